"""Core type definitions for patchstruct."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Final, TypeAlias

if TYPE_CHECKING:
    from patchstruct.core.attribute import AttributeDescriptor


class _NotPassed:
    """Sentinel type for "no value supplied" where None is a real value."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "NOT_PASSED"

    def __bool__(self) -> bool:
        return False


NOT_PASSED: Final = _NotPassed()
"""Marks an unset default. Distinct from None, which is a real default."""

DefaultFactory: TypeAlias = Callable[[Any, "AttributeDescriptor"], Any]
"""Deferred default: called with (owning struct, descriptor)."""

Loader: TypeAlias = Callable[[Any], Any]
"""Deferred real-world fetch: called with the base struct."""
