"""Struct instances with attribute-style and call-style access.

Usage:
    account = Account("acme", "42")

    # Attribute-style access
    account.balance            # explicit → base → default
    account.balance = 100      # coerced, guarded by lifecycle state

    # Call-style accessor
    balance = account.accessor("balance")
    balance()                  # read
    balance(100)               # write

    # Lifecycle
    account.lifecycle_state    # LifecycleState.IDENTITY_DEFINED
    account.lock()             # LOCKED: nothing writable
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from patchstruct.core.identity import LifecycleState
from patchstruct.errors import InvalidTransitionError
from patchstruct.struct.resolution import get_attribute, reset_attribute, set_attribute

if TYPE_CHECKING:
    from patchstruct.core.attribute import AttributeDescriptor
    from patchstruct.struct.struct_type import StructType
    from patchstruct.tracing import LoadLog


class AttributeAccessor:
    """Callable accessor for one attribute of one struct.

    Called with no arguments it reads; called with one argument it writes.
    """

    __slots__ = ("_struct", "_attribute")

    def __init__(self, struct: StructInstance, attribute: AttributeDescriptor):
        self._struct = struct
        self._attribute = attribute

    @property
    def name(self) -> str:
        return self._attribute.name

    @property
    def descriptor(self) -> AttributeDescriptor:
        return self._attribute

    def __call__(self, *args: Any) -> Any:
        if not args:
            return get_attribute(self._struct, self._attribute)
        if len(args) == 1:
            return set_attribute(self._struct, self._attribute, args[0])
        raise TypeError(f"{self.name}() takes 0 or 1 arguments ({len(args)} given)")

    def __repr__(self) -> str:
        return f"<accessor {self.name} of {self._struct!r}>"


class StructInstance:
    """One instantiated struct: explicit values, lifecycle state and base link.

    explicit_values only holds attributes that were actually set; absence
    means unset, while an explicit None is a real value. The base struct is
    read (and lazily loaded) but never written by this struct, except that
    loader results and loader failures are recorded on the base itself.

    Not thread-safe: a struct is expected to be mutated by one caller at a
    time, and first reads of an unloaded attribute on a shared base must be
    serialized by the caller if the loader must run only once.

    Args:
        struct_type: Type declaring this struct's attributes.
    """

    __slots__ = (
        "struct_type",
        "explicit_values",
        "lifecycle_state",
        "base_instance",
        "base_exists",
        "failed_loads",
        "_log",
    )

    def __init__(self, struct_type: StructType):
        object.__setattr__(self, "struct_type", struct_type)
        object.__setattr__(self, "explicit_values", {})
        object.__setattr__(self, "lifecycle_state", LifecycleState.CREATED)
        object.__setattr__(self, "base_instance", None)
        object.__setattr__(self, "base_exists", False)
        object.__setattr__(self, "failed_loads", set())
        object.__setattr__(self, "_log", None)

    # Attribute-style access

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal lookup fails, i.e. for declared attributes
        if name.startswith("_") or name in StructInstance.__slots__:
            raise AttributeError(name)
        struct_type: StructType = object.__getattribute__(self, "struct_type")
        return get_attribute(self, struct_type.attribute(name))

    def __setattr__(self, name: str, value: Any) -> None:
        set_attribute(self, self.struct_type.attribute(name), value)

    def __delattr__(self, name: str) -> None:
        reset_attribute(self, self.struct_type.attribute(name))

    # Explicit access

    def get(self, name: str) -> Any:
        """Read an attribute by name."""
        return get_attribute(self, self.struct_type.attribute(name))

    def set(self, name: str, value: Any) -> Any:
        """Write an attribute by name. Returns the coerced value."""
        return set_attribute(self, self.struct_type.attribute(name), value)

    def reset(self, name: str) -> bool:
        """Remove an explicit value. Returns True if one was set."""
        return reset_attribute(self, self.struct_type.attribute(name))

    def is_set(self, name: str) -> bool:
        """Check if an attribute has an explicit value on this struct."""
        self.struct_type.attribute(name)
        return name in self.explicit_values

    def accessor(self, name: str) -> AttributeAccessor:
        """Get a call-style accessor for an attribute."""
        return AttributeAccessor(self, self.struct_type.attribute(name))

    # Lifecycle

    def advance_state(self, target: LifecycleState | None = None) -> LifecycleState:
        """Move to the next lifecycle state.

        Args:
            target: Expected next state. Defaults to the immediate successor.

        Returns:
            The new state.

        Raises:
            InvalidTransitionError: If target skips a state, goes backwards,
                or the struct is already LOCKED.
        """
        current = self.lifecycle_state
        if current.is_terminal:
            raise InvalidTransitionError(current, target if target is not None else current)
        if target is None:
            target = current.next()
        if not current.can_advance_to(target):
            raise InvalidTransitionError(current, target)
        object.__setattr__(self, "lifecycle_state", target)
        return target

    def define_identity(self) -> LifecycleState:
        """Advance from CREATED to IDENTITY_DEFINED."""
        return self.advance_state(LifecycleState.IDENTITY_DEFINED)

    def lock(self) -> LifecycleState:
        """Advance from IDENTITY_DEFINED to LOCKED."""
        return self.advance_state(LifecycleState.LOCKED)

    # Base struct

    def attach_base(self, base: StructInstance | None, exists: bool) -> None:
        """Link this struct to the struct representing its real-world value.

        Args:
            base: Struct of the same type, or None.
            exists: Whether the real-world entity exists. When False the
                base is ignored and reads go straight to defaults.

        Raises:
            TypeError: If base belongs to a different struct type, or is self.
        """
        if base is not None:
            if base is self:
                raise TypeError(f"{self!r} cannot be its own base")
            if base.struct_type is not self.struct_type:
                raise TypeError(
                    f"Base of {self.struct_type.name} must be a {self.struct_type.name}, "
                    f"got {base.struct_type.name}"
                )
        object.__setattr__(self, "base_instance", base)
        object.__setattr__(self, "base_exists", bool(exists) and base is not None)

    @property
    def log(self) -> LoadLog:
        """Load notifications sink, created by the struct type on first use."""
        log = self._log
        if log is None:
            log = self.struct_type.make_log(self)
            object.__setattr__(self, "_log", log)
        return log

    # Introspection

    def identity_key(self) -> tuple[Any, ...]:
        """Resolved identity values in declaration order: the struct's lookup key.

        Struct-typed identity values are replaced by (type name, identity key),
        so two structs opened with the same arguments produce equal keys.
        """
        return tuple(
            _key_value(get_attribute(self, a)) for a in self.struct_type.identity_attributes
        )

    def explicit_snapshot(self) -> dict[str, Any]:
        """Copy of the explicitly set values."""
        return dict(self.explicit_values)

    def resolved_values(self) -> dict[str, Any]:
        """Every attribute resolved through the normal read path.

        May run loaders and deferred defaults.
        """
        return {a.name: get_attribute(self, a) for a in self.struct_type.attributes}

    def __repr__(self) -> str:
        parts = [
            repr(self.explicit_values[a.name]) if a.name in self.explicit_values else "?"
            for a in self.struct_type.identity_attributes
        ]
        return f"{self.struct_type.name}[{', '.join(parts)}]"


def _key_value(value: Any) -> Any:
    if isinstance(value, StructInstance):
        return (value.struct_type.name, value.identity_key())
    return value


RESERVED_NAMES = frozenset(name for name in dir(StructInstance) if not name.startswith("_"))
"""Public StructInstance members; attributes may not use these names."""
