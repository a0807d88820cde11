"""Identity lifecycle states.

Usage:
    state = LifecycleState.CREATED
    state = state.next()  # IDENTITY_DEFINED
    identity_writable(state)  # False
"""

from __future__ import annotations

from enum import Enum


class LifecycleState(Enum):
    """Monotonic lifecycle of a struct: CREATED → IDENTITY_DEFINED → LOCKED."""

    CREATED = 0  # Identity and values writable
    IDENTITY_DEFINED = 1  # Only non-identity values writable
    LOCKED = 2  # Terminal, nothing writable

    @property
    def is_terminal(self) -> bool:
        return self is LifecycleState.LOCKED

    def next(self) -> LifecycleState:
        """Get the immediate successor state.

        Raises:
            ValueError: If called on the terminal state.
        """
        if self.is_terminal:
            raise ValueError(f"{self.name} is terminal")
        return LifecycleState(self.value + 1)

    def can_advance_to(self, target: LifecycleState) -> bool:
        """Check if target is the immediate successor of this state."""
        return target.value == self.value + 1


def identity_writable(state: LifecycleState) -> bool:
    """Identity attributes may only be set before identity is defined."""
    return state is LifecycleState.CREATED


def value_writable(state: LifecycleState) -> bool:
    """Non-identity attributes may be set until the struct is locked."""
    return state is not LifecycleState.LOCKED
