"""Attribute descriptor: the immutable declaration of one struct field.

Usage:
    path = AttributeDescriptor("path", str, identity=True)
    mode = AttributeDescriptor("mode", int, default=0o644)
    size = AttributeDescriptor("size", int, loader=lambda base: stat(base.path).st_size)
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any

from patchstruct.core.coercion import CoercionHook, resolve_hook
from patchstruct.core.types import NOT_PASSED, DefaultFactory, Loader
from patchstruct.errors import CoercionError


@dataclass(frozen=True, slots=True)
class AttributeDescriptor:
    """Declaration of one attribute: name, type, identity, default and loader.

    A literal default is coerced once, when the descriptor is created. A
    deferred default (default_factory) runs on every unresolved read and is
    called with the owning struct and this descriptor. A loader fetches the
    real-world value and is called with the base struct.

    Attributes:
        name: Attribute name, unique within the owning struct type.
        value_type: Class or CoercionHook, or None for untyped.
        identity: Whether this attribute is part of the struct's lookup key.
        explicit_required: Overrides the computed required flag when not None.
        default: Literal default, or NOT_PASSED for none. None is a real default.
            Shared by every struct, so it must be hashable.
        default_factory: Deferred default, mutually exclusive with default.
        loader: Deferred real-world fetch, or None.
        owner: Struct type this descriptor belongs to, set on adoption.
    """

    name: str
    value_type: Any = None
    identity: bool = False
    explicit_required: bool | None = None
    default: Any = NOT_PASSED
    default_factory: DefaultFactory | None = None
    loader: Loader | None = None
    owner: Any = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        if not self.name.isidentifier():
            raise ValueError(f"Attribute name must be an identifier, got {self.name!r}")
        if self.default is not NOT_PASSED and self.default_factory is not None:
            raise ValueError(
                f"Attribute {self.name!r} cannot have both default and default_factory"
            )
        resolve_hook(self.value_type)  # Reject unusable types at declaration
        if self.default is not NOT_PASSED:
            object.__setattr__(self, "default", self.coerce(self.default))
            if type(self.default).__hash__ is None:
                raise ValueError(
                    f"Mutable default {type(self.default).__name__} for attribute "
                    f"{self.name!r} is not allowed: use default_factory"
                )

    @property
    def hook(self) -> CoercionHook | None:
        """Coercion hook for value_type, resolved against the current registry."""
        return resolve_hook(self.value_type)

    @property
    def has_default(self) -> bool:
        """True if any default is declared, including a literal None."""
        return self.default is not NOT_PASSED or self.default_factory is not None

    @property
    def is_deferred_default(self) -> bool:
        return self.default_factory is not None

    @property
    def required(self) -> bool:
        return self.compute_required()

    def compute_required(self) -> bool:
        """Resolve the required flag.

        Returns:
            explicit_required if set; otherwise True iff this is an identity
            attribute with no default of any kind.
        """
        if self.explicit_required is not None:
            return self.explicit_required
        return self.identity and not self.has_default

    def coerce(self, raw: Any) -> Any:
        """Convert raw input to this attribute's canonical form.

        Args:
            raw: Value supplied by a caller, loader or default.

        Returns:
            The coerced value, or raw unchanged for untyped attributes.

        Raises:
            CoercionError: If the hook raises. The hook's exception is chained
                as the cause.
        """
        hook = self.hook
        if hook is None:
            return raw
        try:
            return hook.coerce(raw)
        except CoercionError:
            raise
        except Exception as e:
            raise CoercionError(self.name, raw, e) from e

    def accepts(self, instance: Any) -> bool:
        """Check whether a value already belongs to this attribute's type.

        Returns:
            True if untyped, if instance is None, or if the hook's membership
            test passes.
        """
        hook = self.hook
        if hook is None or instance is None:
            return True
        return hook.implemented_by(instance)

    def implemented_by(self, instance: Any) -> bool:
        return self.accepts(instance)

    def with_overrides(self, **changes: Any) -> AttributeDescriptor:
        """Copy this descriptor, unowned, with some fields replaced.

        Used to build subtypes: the copy can be adopted by another type.
        Setting default clears default_factory and vice versa.
        """
        if "default" in changes and "default_factory" not in changes:
            changes["default_factory"] = None
        if "default_factory" in changes and "default" not in changes:
            changes["default"] = NOT_PASSED
        return replace(self, owner=None, **changes)
