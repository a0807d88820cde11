"""Error taxonomy for attribute resolution, construction and lifecycle.

All errors derive from StructError so callers can catch the whole family.

Usage:
    try:
        account.owner = "someone-else"
    except AttributeLockedError as e:
        print(e.attribute, e.state)
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


class StructError(Exception):
    """Base class for all patchstruct errors."""

    pass


class AttributeLockedError(StructError):
    """Raised when an attribute is mutated outside its writable lifecycle states.

    Identity attributes are writable only while CREATED; other attributes
    while CREATED or IDENTITY_DEFINED. Nothing is writable once LOCKED.
    """

    def __init__(self, attribute: str, struct: Any, state: Any, identity: bool = False):
        self.attribute = attribute
        self.struct = struct
        self.state = state
        self.identity = identity
        kind = "identity attribute" if identity else "attribute"
        reason = (
            "identity attributes cannot be modified after the struct's identity is defined"
            if identity
            else "attributes cannot be modified after the struct is locked"
        )
        super().__init__(
            f"Cannot modify {kind} {attribute!r} of {struct!r}: {reason} (state: {state.name})"
        )


class DuplicateArgumentError(StructError, TypeError):
    """Raised when a construction argument is bound both positionally and by keyword."""

    def __init__(self, type_name: str, names: Iterable[str]):
        self.type_name = type_name
        self.names = tuple(names)
        super().__init__(
            f"{type_name}() got multiple values for identity attribute(s): "
            f"{', '.join(self.names)}"
        )


class MissingRequiredIdentityError(StructError, TypeError):
    """Raised when required identity attributes are left unbound at construction."""

    def __init__(self, type_name: str, names: Iterable[str]):
        self.type_name = type_name
        self.names = tuple(names)
        super().__init__(
            f"{type_name}() missing required identity attribute(s): {', '.join(self.names)}"
        )


class UnknownArgumentError(StructError, TypeError):
    """Raised on positional overflow or keywords that name no identity attribute."""

    def __init__(self, type_name: str, message: str, names: Iterable[str] = ()):
        self.type_name = type_name
        self.names = tuple(names)
        super().__init__(f"{type_name}(): {message}")


class LoadFailure(StructError):
    """Raised when a loader or deferred default fails.

    The original exception is always chained as __cause__. Loader failures
    are reported once: later reads of the same attribute on the same base
    struct resolve to None without running the loader again.
    """

    def __init__(self, attribute: str, phase: str, error: BaseException):
        self.attribute = attribute
        self.phase = phase
        self.error = error
        super().__init__(
            f"Failed to compute {phase} for attribute {attribute!r}: "
            f"{type(error).__name__}: {error}"
        )


class CoercionError(StructError, ValueError):
    """Raised when an attribute's coercion hook rejects a raw value."""

    def __init__(self, attribute: str, value: Any, error: BaseException | None = None):
        self.attribute = attribute
        self.value = value
        self.error = error
        detail = f": {error}" if error is not None else ""
        super().__init__(f"Cannot coerce {value!r} for attribute {attribute!r}{detail}")


class InvalidTransitionError(StructError):
    """Raised when a lifecycle transition skips a state or goes backwards."""

    def __init__(self, current: Any, target: Any):
        self.current = current
        self.target = target
        super().__init__(f"Cannot transition from {current.name} to {target.name}")


class AttributeOwnershipError(StructError):
    """Raised when a descriptor owned by one struct type is added to another."""

    def __init__(self, attribute: str, owner: str, claimant: str):
        self.attribute = attribute
        self.owner = owner
        self.claimant = claimant
        super().__init__(
            f"Attribute {attribute!r} already belongs to {owner}; cannot add it to {claimant}"
        )


class UnknownAttributeError(StructError, AttributeError):
    """Raised when a struct is asked for an attribute its type does not declare."""

    def __init__(self, type_name: str, attribute: str):
        self.type_name = type_name
        self.attribute = attribute
        super().__init__(f"{type_name} has no attribute {attribute!r}")
