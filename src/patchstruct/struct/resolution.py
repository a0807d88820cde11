"""Value resolution: the get/set contract for struct attributes.

Reads resolve in order:
    1. the struct's own explicit value
    2. the base struct's value (explicit, or fetched by the attribute's loader)
    3. the attribute's default (literal, deferred, or None)

Nothing resolved in steps 2 or 3 is stored on the struct itself, so an
unset attribute keeps tracking its real-world value until it is set.

Writes are guarded by the struct's lifecycle state and always coerce.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from patchstruct.core.identity import identity_writable, value_writable
from patchstruct.core.resolution import BaseValue, FailedOnce, Loaded, NotLoaded
from patchstruct.core.types import NOT_PASSED
from patchstruct.errors import AttributeLockedError, LoadFailure

if TYPE_CHECKING:
    from patchstruct.core.attribute import AttributeDescriptor
    from patchstruct.struct.instance import StructInstance


def get_attribute(struct: StructInstance, attr: AttributeDescriptor) -> Any:
    """Read an attribute.

    Args:
        struct: Struct to read from.
        attr: Attribute of the struct's type.

    Returns:
        The explicit value if set (verbatim), else the base attribute value.

    Raises:
        LoadFailure: If a loader or deferred default raises.
        CoercionError: If a deferred default's result cannot be coerced.
    """
    if attr.name in struct.explicit_values:
        return struct.explicit_values[attr.name]
    return base_attribute_value(struct, attr)


def base_attribute_value(struct: StructInstance, attr: AttributeDescriptor) -> Any:
    """Value of an attribute ignoring anything set on struct itself.

    Tries the base struct first, then falls back to the default.
    """
    result = base_explicit_value(struct, attr)
    if result.found:
        return result.value
    return default_value(struct, attr)


def default_value(struct: StructInstance, attr: AttributeDescriptor) -> Any:
    """Evaluate an attribute's default for struct.

    Deferred defaults run on every call and are not cached.

    Returns:
        The factory result (coerced), the literal default (coerced at
        declaration), or None if no default is declared.

    Raises:
        LoadFailure: If the default factory raises.
    """
    if attr.default_factory is not None:
        try:
            raw = attr.default_factory(struct, attr)
        except Exception as e:
            raise LoadFailure(attr.name, "default", e) from e
        return attr.coerce(raw)
    if attr.default is NOT_PASSED:
        return None
    return attr.default


def base_explicit_value(struct: StructInstance, attr: AttributeDescriptor) -> BaseValue:
    """Look up, or load, an attribute's value on struct's base struct.

    If the base already has the value it is returned without running the
    loader. Otherwise the loader runs against the base and its result is
    stored on the base through the normal setter, so it is coerced and
    loaded at most once.

    If the loader (or storing its result) fails, None is written directly
    into the base's explicit values before the failure propagates. Later
    reads then resolve to FailedOnce (value None) instead of raising again.

    Args:
        struct: Struct being read. Its log receives load notifications.
        attr: Attribute to resolve.

    Returns:
        Loaded, FailedOnce, or NotLoaded when there is no existing base or
        no loader.

    Raises:
        LoadFailure: On the first failure of the loader for this base.
    """
    base = struct.base_instance
    if base is None or not struct.base_exists:
        return NotLoaded()

    if attr.name in base.explicit_values:
        if attr.name in base.failed_loads:
            return FailedOnce(attr.name)
        return Loaded(base.explicit_values[attr.name])

    if attr.loader is None:
        return NotLoaded()

    struct.log.load_value_started(attr.name)
    try:
        raw = attr.loader(base)
        value = set_attribute(base, attr, raw)
    except Exception as e:
        base.explicit_values[attr.name] = None
        base.failed_loads.add(attr.name)
        struct.log.load_value_failed(attr.name, e)
        raise LoadFailure(attr.name, "loader", e) from e
    struct.log.load_value_succeeded(attr.name)
    return Loaded(value)


def _check_writable(struct: StructInstance, attr: AttributeDescriptor) -> None:
    state = struct.lifecycle_state
    allowed = identity_writable(state) if attr.identity else value_writable(state)
    if not allowed:
        raise AttributeLockedError(attr.name, struct, state, identity=attr.identity)


def set_attribute(struct: StructInstance, attr: AttributeDescriptor, value: Any) -> Any:
    """Write an attribute.

    Identity attributes are writable only while CREATED, other attributes
    while CREATED or IDENTITY_DEFINED. The lifecycle state never changes as
    a side effect of a write.

    Args:
        struct: Struct to write to.
        attr: Attribute of the struct's type.
        value: Raw value, coerced before storing.

    Returns:
        The coerced value that was stored.

    Raises:
        AttributeLockedError: If the lifecycle state forbids the write.
        CoercionError: If the value cannot be coerced. Nothing is stored.
    """
    _check_writable(struct, attr)
    coerced = attr.coerce(value)
    struct.explicit_values[attr.name] = coerced
    struct.failed_loads.discard(attr.name)
    return coerced


def reset_attribute(struct: StructInstance, attr: AttributeDescriptor) -> bool:
    """Remove an explicit value so the attribute resolves through base/default again.

    Same lifecycle guards as set_attribute.

    Returns:
        True if an explicit value was removed.
    """
    _check_writable(struct, attr)
    struct.failed_loads.discard(attr.name)
    return struct.explicit_values.pop(attr.name, NOT_PASSED) is not NOT_PASSED
