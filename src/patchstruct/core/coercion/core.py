"""Coercer registry, decorator, and hook dispatch.

The registry starts empty: patchstruct ships no built-in primitive
coercions. Applications register the conversions they need.

Usage:
    @coercer(Decimal)
    def to_decimal(raw: object) -> Decimal:
        return raw if isinstance(raw, Decimal) else Decimal(str(raw))

    hook = resolve_hook(Decimal)
    hook.coerce("1.50")  # Decimal('1.50')
"""

from __future__ import annotations

import warnings
from collections.abc import Callable
from typing import Any, TypeAlias

from patchstruct.core.coercion.models import CoercionHook, TypeCoercer

CoercerFn: TypeAlias = Callable[[Any], Any]


class CoercionRegistry:
    """Process-local registry mapping Python classes to coercer functions."""

    def __init__(self) -> None:
        """Initialize empty coercion registry."""
        self._by_type: dict[type, CoercerFn] = {}

    def register(self, cls: type, fn: CoercerFn) -> CoercerFn:
        """Register a coercer function for a class.

        Re-registering the same function is a no-op. Registering a different
        function replaces the old one and emits a warning.

        Args:
            cls: Class whose raw inputs the function converts.
            fn: Idempotent conversion function.

        Returns:
            The registered function, so this can back a decorator.
        """
        existing = self._by_type.get(cls)
        if existing is not None and existing is not fn:
            warnings.warn(
                f"Replacing coercer for {cls.__qualname__}: "
                f"{existing.__qualname__} -> {fn.__qualname__}",
                stacklevel=2,
            )
        self._by_type[cls] = fn
        return fn

    def unregister(self, cls: type) -> bool:
        """Remove the coercer for a class. Returns True if one existed."""
        return self._by_type.pop(cls, None) is not None

    def get_coercer(self, cls: type) -> CoercerFn | None:
        """Get the coercer for an exact class, or None."""
        return self._by_type.get(cls)

    def is_registered(self, cls: type) -> bool:
        """Check if a class has a registered coercer."""
        return cls in self._by_type


# Module-level registry instance
_registry = CoercionRegistry()


def get_registry() -> CoercionRegistry:
    """Access the global coercion registry.

    Returns:
        The process-local CoercionRegistry instance.
    """
    return _registry


def coercer(
    cls: type, *, registry: CoercionRegistry | None = None
) -> Callable[[CoercerFn], CoercerFn]:
    """Register the decorated function as the coercer for cls.

    Args:
        cls: Class the function produces.
        registry: Registry to register with. Defaults to the global one.

    Returns:
        Decorator that registers and returns the function unchanged.
    """
    target = registry if registry is not None else _registry

    def decorator(fn: CoercerFn) -> CoercerFn:
        return target.register(cls, fn)

    return decorator


def resolve_hook(value_type: Any, registry: CoercionRegistry | None = None) -> CoercionHook | None:
    """Find the coercion hook for an attribute value type.

    Dispatch order:
    1. None means untyped: no hook.
    2. A class is adapted through TypeCoercer with its registered coercer
       (or none, passing raw values through).
    3. Any other object implementing CoercionHook is used as-is.

    Args:
        value_type: Declared attribute type.
        registry: Registry to consult. Defaults to the global one.

    Returns:
        The hook to use, or None for untyped attributes.

    Raises:
        TypeError: If value_type is neither a class nor a CoercionHook.
    """
    if value_type is None:
        return None
    if isinstance(value_type, type):
        source = registry if registry is not None else _registry
        return TypeCoercer(value_type, source.get_coercer(value_type))
    if isinstance(value_type, CoercionHook):
        return value_type
    raise TypeError(
        f"Attribute type must be a class or implement coerce()/implemented_by(), "
        f"got {value_type!r}"
    )
