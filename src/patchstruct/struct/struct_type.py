"""Struct types: explicit compositions of attribute descriptors.

A struct type owns an ordered list of descriptors. Opening the type binds
constructor arguments to identity attributes, defines the identity, and
attaches the base struct supplied by the type's base provider.

Usage:
    Account = StructType(
        "Account",
        attribute("bank", str, identity=True),
        attribute("number", str, identity=True),
        attribute("balance", int, default=0, loader=fetch_balance),
        base_provider=store,
    )

    account = Account.open("acme", "42")   # or Account("acme", "42")
    account.balance                         # 100 from the real world, not 0

    # Subtypes copy and override descriptors
    Savings = Account.derive("Savings", attribute("rate", float, default=0.01))

    # Struct types are coercion hooks, so they can type other attributes
    Transfer = StructType("Transfer", attribute("source", Account, identity=True))
    Transfer(("acme", "42")).source         # Account['acme', '42']
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Mapping
from typing import Any, TypeAlias

from patchstruct.config import LoggingSettings
from patchstruct.core.attribute import AttributeDescriptor
from patchstruct.core.binding import bind_arguments, split_identity
from patchstruct.core.identity import LifecycleState
from patchstruct.errors import AttributeOwnershipError, UnknownAttributeError
from patchstruct.storage.protocol import BaseProvider
from patchstruct.struct.instance import RESERVED_NAMES, StructInstance
from patchstruct.tracing import LoadLog, LoggingLoadLog

LogFactory: TypeAlias = Callable[[StructInstance], LoadLog]

_INHERIT: Any = object()


class StructType:
    """A named, ordered set of attribute descriptors.

    Each descriptor is owned by exactly one struct type: adopting a
    descriptor that already belongs to another type is an error. Subtypes
    are built with derive(), which copies the parent's descriptors.

    Args:
        name: Type name used in messages and as the storage namespace.
        *attributes: Descriptors in declaration order.
        base_provider: Supplies base structs when opening. None means
            opened structs have no base.
        log_factory: Builds each struct's LoadLog. Defaults to a
            LoggingLoadLog configured from settings.
        settings: Logging settings for the default LoadLog. Read from the
            environment on first use if omitted.
    """

    def __init__(
        self,
        name: str,
        *attributes: AttributeDescriptor,
        base_provider: BaseProvider | None = None,
        log_factory: LogFactory | None = None,
        settings: LoggingSettings | None = None,
    ):
        self.name = name
        self.base_provider = base_provider
        self.log_factory = log_factory
        self.parent: StructType | None = None
        self._settings = settings
        self._attributes: dict[str, AttributeDescriptor] = {}
        self._adopt(attributes)

    def _adopt(self, attributes: Iterable[AttributeDescriptor]) -> None:
        """Validate all descriptors, then claim them for this type."""
        pending: list[AttributeDescriptor] = []
        seen: set[str] = set()
        for attr in attributes:
            if attr.name in seen:
                raise ValueError(f"{self.name} declares attribute {attr.name!r} twice")
            if attr.name in RESERVED_NAMES:
                raise ValueError(f"{self.name}: attribute name {attr.name!r} is reserved")
            if attr.owner is not None and attr.owner is not self:
                raise AttributeOwnershipError(attr.name, _type_name(attr.owner), self.name)
            seen.add(attr.name)
            pending.append(attr)

        for attr in pending:
            object.__setattr__(attr, "owner", self)
            self._attributes[attr.name] = attr

    # Declarations

    @property
    def attributes(self) -> tuple[AttributeDescriptor, ...]:
        """All descriptors in declaration order."""
        return tuple(self._attributes.values())

    @property
    def identity_attributes(self) -> tuple[AttributeDescriptor, ...]:
        return tuple(a for a in self._attributes.values() if a.identity)

    @property
    def required_identity(self) -> tuple[AttributeDescriptor, ...]:
        """Identity attributes that can (and must) be passed positionally."""
        return tuple(split_identity(self.attributes)[0])

    @property
    def optional_identity(self) -> tuple[AttributeDescriptor, ...]:
        """Identity attributes that are keyword-only and default when unbound."""
        return tuple(split_identity(self.attributes)[1])

    def attribute(self, name: str) -> AttributeDescriptor:
        """Look up a descriptor by name.

        Raises:
            UnknownAttributeError: If this type declares no such attribute.
        """
        try:
            return self._attributes[name]
        except KeyError:
            raise UnknownAttributeError(self.name, name) from None

    def __contains__(self, name: object) -> bool:
        return name in self._attributes

    def __iter__(self) -> Iterator[AttributeDescriptor]:
        return iter(self._attributes.values())

    # Construction

    def new(self) -> StructInstance:
        """Create a blank struct in CREATED state, without binding arguments."""
        return StructInstance(self)

    def open(self, *args: Any, **kwargs: Any) -> StructInstance:
        """Create a struct from constructor arguments.

        Positional arguments bind to required identity attributes in order;
        keyword arguments may name any identity attribute. The bound values
        are set while CREATED, the identity is then defined, and finally the
        base struct is looked up from the base provider.

        Returns:
            A struct in IDENTITY_DEFINED state.

        Raises:
            UnknownArgumentError: Too many positional or unknown keyword arguments.
            DuplicateArgumentError: An attribute given positionally and by keyword.
            MissingRequiredIdentityError: A required identity attribute unbound.
            CoercionError: A bound value cannot be coerced. No struct is returned.
        """
        values = bind_arguments(self.name, self.attributes, args, kwargs)
        struct = self.new()
        for name, raw in values.items():
            struct.set(name, raw)
        struct.advance_state(LifecycleState.IDENTITY_DEFINED)
        if self.base_provider is not None:
            base, exists = self.base_provider.lookup(struct)
            struct.attach_base(base, exists)
        return struct

    def __call__(self, *args: Any, **kwargs: Any) -> StructInstance:
        return self.open(*args, **kwargs)

    # Subtypes

    def derive(
        self,
        name: str,
        *attributes: AttributeDescriptor,
        base_provider: BaseProvider | None = _INHERIT,
        log_factory: LogFactory | None = _INHERIT,
        settings: LoggingSettings | None = _INHERIT,
    ) -> StructType:
        """Build a subtype from copies of this type's descriptors.

        Descriptors named like a parent attribute replace it in place; new
        names are appended. The parent's descriptors are not shared.

        Args:
            name: Subtype name.
            *attributes: Overriding or additional descriptors.
            base_provider: Defaults to the parent's.
            log_factory: Defaults to the parent's.
            settings: Defaults to the parent's.

        Returns:
            The new struct type, with parent set to this type.
        """
        overrides = {a.name: a for a in attributes}
        merged = [overrides.pop(a.name, None) or a.with_overrides() for a in self.attributes]
        merged.extend(overrides.values())

        child = StructType(
            name,
            *merged,
            base_provider=self.base_provider if base_provider is _INHERIT else base_provider,
            log_factory=self.log_factory if log_factory is _INHERIT else log_factory,
            settings=self._settings if settings is _INHERIT else settings,
        )
        child.parent = self
        return child

    def is_subtype_of(self, other: StructType) -> bool:
        """Check if this type is other or was derived from it."""
        current: StructType | None = self
        while current is not None:
            if current is other:
                return True
            current = current.parent
        return False

    # Logging

    @property
    def settings(self) -> LoggingSettings:
        """Logging settings, read from the environment on first use."""
        if self._settings is None:
            self._settings = LoggingSettings()
        return self._settings

    def make_log(self, struct: StructInstance) -> LoadLog:
        """Build the LoadLog for one of this type's structs."""
        if self.log_factory is not None:
            return self.log_factory(struct)
        return LoggingLoadLog(struct, settings=self.settings)

    # Coercion hook, for attributes typed by this struct type

    def coerce(self, raw: Any) -> StructInstance | None:
        """Convert raw input to a struct of this type.

        Accepts a struct of this type (returned as-is), a mapping of keyword
        arguments, a tuple of positional arguments, or a single positional
        argument. None passes through.

        Raises:
            TypeError: If raw is a struct of another type.
        """
        if raw is None:
            return None
        if isinstance(raw, StructInstance):
            if raw.struct_type is not self:
                raise TypeError(f"Expected {self.name}, got {raw.struct_type.name}")
            return raw
        if isinstance(raw, Mapping):
            return self.open(**raw)
        if isinstance(raw, tuple):
            return self.open(*raw)
        return self.open(raw)

    def implemented_by(self, instance: Any) -> bool:
        """Check whether instance is None or a struct of this type."""
        if instance is None:
            return True
        return isinstance(instance, StructInstance) and instance.struct_type is self

    def __repr__(self) -> str:
        names = ", ".join(self._attributes)
        return f"<StructType {self.name} ({names})>"


def _type_name(owner: Any) -> str:
    return getattr(owner, "name", repr(owner))
