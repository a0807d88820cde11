"""Struct types, struct instances, and value resolution.

Architecture Note:
    struct/ is the stateful layer. Struct instances hold explicit values,
    a lifecycle state and a base link; resolution reads and writes them
    using the stateless declarations from core/.
"""

from patchstruct.struct.instance import RESERVED_NAMES, AttributeAccessor, StructInstance
from patchstruct.struct.resolution import (
    base_attribute_value,
    base_explicit_value,
    default_value,
    get_attribute,
    reset_attribute,
    set_attribute,
)
from patchstruct.struct.struct_type import StructType

__all__ = [
    "StructType",
    "StructInstance",
    "AttributeAccessor",
    "RESERVED_NAMES",
    "get_attribute",
    "set_attribute",
    "reset_attribute",
    "base_attribute_value",
    "base_explicit_value",
    "default_value",
]
