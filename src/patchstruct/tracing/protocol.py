"""Protocol for load notifications.

Value resolution reports loader activity to a LoadLog owned by the struct
being read. Implementations may log, record or ignore the events.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class LoadLog(Protocol):
    """Receives notifications around loader evaluation.

    Exactly one of load_value_succeeded / load_value_failed follows every
    load_value_started.
    """

    def load_value_started(self, name: str) -> None:
        """A loader is about to run for attribute name."""
        ...

    def load_value_succeeded(self, name: str) -> None:
        """The loader for name returned and its value was stored."""
        ...

    def load_value_failed(self, name: str, error: BaseException) -> None:
        """The loader for name (or storing its value) raised error."""
        ...
