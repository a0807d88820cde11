"""Core functionalities: stateless protocols and primitives.

Architecture Note:
    core/ contains pure, stateless functionalities: declarations, coercion
    dispatch, lifecycle guards, argument binding and resolution results.
    For stateful structs and value resolution, see struct/.
"""

from patchstruct.core.attribute import AttributeDescriptor, attribute
from patchstruct.core.binding import bind_arguments, split_identity
from patchstruct.core.coercion import (
    CoercionHook,
    CoercionRegistry,
    TypeCoercer,
    coercer,
    get_registry,
    resolve_hook,
)
from patchstruct.core.identity import LifecycleState, identity_writable, value_writable
from patchstruct.core.resolution import BaseValue, FailedOnce, Loaded, NotLoaded
from patchstruct.core.types import NOT_PASSED

__all__ = [
    # Types
    "NOT_PASSED",
    # Attribute
    "AttributeDescriptor",
    "attribute",
    # Coercion
    "CoercionHook",
    "CoercionRegistry",
    "TypeCoercer",
    "coercer",
    "get_registry",
    "resolve_hook",
    # Identity
    "LifecycleState",
    "identity_writable",
    "value_writable",
    # Binding
    "bind_arguments",
    "split_identity",
    # Resolution
    "BaseValue",
    "Loaded",
    "NotLoaded",
    "FailedOnce",
]
