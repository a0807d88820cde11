"""Attribute declaration helper.

Usage:
    Account = StructType(
        "Account",
        attribute("bank", str, identity=True),
        attribute("number", str, identity=True),
        attribute("region", str, identity=True, default="eu"),
        attribute("balance", int, default=0, loader=fetch_balance),
    )
"""

from __future__ import annotations

from typing import Any

from patchstruct.core.attribute.models import AttributeDescriptor
from patchstruct.core.types import NOT_PASSED, DefaultFactory, Loader


def attribute(
    name: str,
    value_type: Any = None,
    *,
    identity: bool = False,
    required: bool | None = None,
    default: Any = NOT_PASSED,
    default_factory: DefaultFactory | None = None,
    loader: Loader | None = None,
) -> AttributeDescriptor:
    """Declare an attribute.

    Args:
        name: Attribute name.
        value_type: Class or CoercionHook, or None for untyped.
        identity: Mark as part of the struct's lookup key.
        required: Override the computed required flag.
        default: Literal default, coerced now. Must be hashable, since every
            struct shares it; use default_factory for lists, dicts and sets.
        default_factory: Called as factory(struct, descriptor) on unresolved reads.
        loader: Called as loader(base_struct) to fetch the real-world value.

    Returns:
        An unowned AttributeDescriptor, ready to be adopted by a StructType.
    """
    return AttributeDescriptor(
        name=name,
        value_type=value_type,
        identity=identity,
        explicit_required=required,
        default=default,
        default_factory=default_factory,
        loader=loader,
    )
