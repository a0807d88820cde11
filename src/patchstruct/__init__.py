"""patchstruct: typed, self-describing resource structs with patchy updates.

Attributes that were never set resolve to the struct's real-world (base)
value before falling back to a default, so a partial update never reverts
fields to blank defaults.

Usage:
    from patchstruct import LocalBaseStore, StructType, attribute

    store = LocalBaseStore()
    Account = StructType(
        "Account",
        attribute("bank", str, identity=True),
        attribute("number", str, identity=True),
        attribute("balance", int, default=0),
        base_provider=store,
    )

    current = Account("acme", "42")
    current.balance = 100
    store.save(current)

    desired = Account("acme", "42")
    desired.balance        # 100: unset fields keep their real-world value
    desired.bank = "x"     # AttributeLockedError: identity is defined
"""

__version__ = "0.1.0"

# Core primitives
from patchstruct.core import (
    NOT_PASSED,
    AttributeDescriptor,
    BaseValue,
    CoercionHook,
    CoercionRegistry,
    FailedOnce,
    LifecycleState,
    Loaded,
    NotLoaded,
    TypeCoercer,
    attribute,
    bind_arguments,
    coercer,
    get_registry,
    resolve_hook,
)

# Errors
from patchstruct.errors import (
    AttributeLockedError,
    AttributeOwnershipError,
    CoercionError,
    DuplicateArgumentError,
    InvalidTransitionError,
    LoadFailure,
    MissingRequiredIdentityError,
    StructError,
    UnknownArgumentError,
    UnknownAttributeError,
)

# Storage
from patchstruct.storage import BaseProvider, LocalBaseStore

# Structs and resolution
from patchstruct.struct import (
    AttributeAccessor,
    StructInstance,
    StructType,
    get_attribute,
    set_attribute,
)

# Tracing
from patchstruct.tracing import LoadLog, LoggingLoadLog, NullLoadLog, RecordingLoadLog

__all__ = [
    # Version
    "__version__",
    # Core
    "NOT_PASSED",
    "AttributeDescriptor",
    "attribute",
    "CoercionHook",
    "CoercionRegistry",
    "TypeCoercer",
    "coercer",
    "get_registry",
    "resolve_hook",
    "LifecycleState",
    "bind_arguments",
    "BaseValue",
    "Loaded",
    "NotLoaded",
    "FailedOnce",
    # Errors
    "StructError",
    "AttributeLockedError",
    "DuplicateArgumentError",
    "MissingRequiredIdentityError",
    "UnknownArgumentError",
    "LoadFailure",
    "CoercionError",
    "InvalidTransitionError",
    "AttributeOwnershipError",
    "UnknownAttributeError",
    # Structs
    "StructType",
    "StructInstance",
    "AttributeAccessor",
    "get_attribute",
    "set_attribute",
    # Storage
    "BaseProvider",
    "LocalBaseStore",
    # Tracing
    "LoadLog",
    "LoggingLoadLog",
    "NullLoadLog",
    "RecordingLoadLog",
]
