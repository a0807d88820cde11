"""Coercion models: the hook protocol and the class-backed hook.

Any attribute value type may implement CoercionHook. Plain Python classes
are adapted through TypeCoercer, using a registered coercer function if
one exists and passing values through unchanged otherwise.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class CoercionHook(Protocol):
    """Raw input → canonical value, plus a membership test.

    coerce() must be idempotent: coerce(coerce(x)) == coerce(x).
    """

    def coerce(self, raw: Any) -> Any: ...

    def implemented_by(self, instance: Any) -> bool: ...


@dataclass(frozen=True, slots=True)
class TypeCoercer:
    """CoercionHook backed by a Python class and an optional coercer function."""

    cls: type
    fn: Callable[[Any], Any] | None = None

    def coerce(self, raw: Any) -> Any:
        """Convert raw input using the registered function, if any.

        Args:
            raw: Value to convert.

        Returns:
            The converted value, or raw unchanged when no coercer is registered.
        """
        if self.fn is None:
            return raw
        return self.fn(raw)

    def implemented_by(self, instance: Any) -> bool:
        """Check whether instance is None or an instance of the class."""
        return instance is None or isinstance(instance, self.cls)
