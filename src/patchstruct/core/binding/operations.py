"""Construction argument binding.

Maps a constructor call's positional and keyword arguments onto identity
attributes. Pure: validates everything and returns raw values without
touching any struct, so a failed bind leaves nothing half-set.

Usage:
    # a, b, c required identity; d, e, f identity with defaults
    bind_arguments("Foo", attrs, (1, 2, 3), {"d": 4, "f": 6})
    # {"a": 1, "b": 2, "c": 3, "d": 4, "f": 6}
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from patchstruct.core.attribute import AttributeDescriptor
from patchstruct.errors import (
    DuplicateArgumentError,
    MissingRequiredIdentityError,
    UnknownArgumentError,
)


def split_identity(
    attributes: Sequence[AttributeDescriptor],
) -> tuple[list[AttributeDescriptor], list[AttributeDescriptor]]:
    """Partition identity attributes into required and optional.

    Args:
        attributes: All attributes of a struct type, in declaration order.

    Returns:
        (required_identity, optional_identity), each in declaration order.
        Non-identity attributes appear in neither.
    """
    required = [a for a in attributes if a.identity and a.required]
    optional = [a for a in attributes if a.identity and not a.required]
    return required, optional


def bind_arguments(
    type_name: str,
    attributes: Sequence[AttributeDescriptor],
    args: Sequence[Any],
    kwargs: Mapping[str, Any],
) -> dict[str, Any]:
    """Bind constructor arguments to identity attributes.

    Positional arguments bind in order to required identity attributes only.
    Keyword arguments may name any identity attribute. Unbound optional
    identity attributes are left out; they resolve through their defaults.

    Args:
        type_name: Struct type name, for error messages.
        attributes: All attributes of the type, in declaration order.
        args: Positional constructor arguments.
        kwargs: Keyword constructor arguments.

    Returns:
        Raw (uncoerced) values by attribute name, in declaration order.

    Raises:
        UnknownArgumentError: Too many positional arguments, or a keyword
            naming an unknown or non-identity attribute.
        DuplicateArgumentError: An attribute bound both positionally and by keyword.
        MissingRequiredIdentityError: A required identity attribute left unbound.
    """
    required, optional = split_identity(attributes)
    identity_names = {a.name for a in required} | {a.name for a in optional}

    unknown = [name for name in kwargs if name not in identity_names]
    if unknown:
        declared = {a.name for a in attributes}
        non_identity = [name for name in unknown if name in declared]
        detail = f" ({', '.join(non_identity)} not identity)" if non_identity else ""
        raise UnknownArgumentError(
            type_name,
            f"unexpected keyword argument(s): {', '.join(unknown)}{detail}",
            unknown,
        )

    if len(args) > len(required):
        raise UnknownArgumentError(
            type_name,
            f"takes {len(required)} positional identity argument(s) but {len(args)} were given",
        )

    positional = {attr.name: value for attr, value in zip(required, args, strict=False)}

    duplicates = [name for name in positional if name in kwargs]
    if duplicates:
        raise DuplicateArgumentError(type_name, duplicates)

    bound = {**positional, **kwargs}
    missing = [a.name for a in required if a.name not in bound]
    if missing:
        raise MissingRequiredIdentityError(type_name, missing)

    return {a.name: bound[a.name] for a in attributes if a.name in bound}
