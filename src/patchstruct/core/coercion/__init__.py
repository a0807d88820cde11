"""Coercion functionality: hook protocol, registry, and dispatch."""

from patchstruct.core.coercion.core import (
    CoercionRegistry,
    coercer,
    get_registry,
    resolve_hook,
)
from patchstruct.core.coercion.models import CoercionHook, TypeCoercer

__all__ = [
    # Models
    "CoercionHook",
    "TypeCoercer",
    # Core
    "CoercionRegistry",
    "coercer",
    "get_registry",
    "resolve_hook",
]
