"""Tests for struct instances: access styles, lifecycle, base links."""

import logging

import pytest

from patchstruct import (
    AttributeAccessor,
    InvalidTransitionError,
    LifecycleState,
    StructType,
    UnknownAttributeError,
    attribute,
)
from patchstruct.config import LoggingSettings
from patchstruct.tracing import LoggingLoadLog, NullLoadLog


def test_new_struct_is_blank(account_type):
    struct = account_type.new()

    assert struct.lifecycle_state is LifecycleState.CREATED
    assert struct.explicit_values == {}
    assert struct.base_instance is None
    assert struct.base_exists is False


# Access styles


def test_get_and_set_by_name(account_type):
    struct = account_type("acme", "1")

    assert struct.set("balance", "3") == 3
    assert struct.get("balance") == 3


def test_accessor_reads_and_writes(account_type):
    struct = account_type("acme", "1")
    balance = struct.accessor("balance")

    assert isinstance(balance, AttributeAccessor)
    assert balance.name == "balance"
    assert balance.descriptor is account_type.attribute("balance")
    assert balance() == 0
    assert balance("8") == 8
    assert balance() == 8


def test_accessor_rejects_extra_arguments(account_type):
    balance = account_type("acme", "1").accessor("balance")

    with pytest.raises(TypeError, match="0 or 1 arguments"):
        balance(1, 2)


def test_unknown_attribute(account_type):
    struct = account_type("acme", "1")

    with pytest.raises(UnknownAttributeError):
        struct.colour
    with pytest.raises(AttributeError):
        struct.colour = "red"
    with pytest.raises(UnknownAttributeError):
        struct.get("colour")
    assert not hasattr(struct, "colour")


def test_internal_state_not_assignable(account_type):
    struct = account_type("acme", "1")

    with pytest.raises(UnknownAttributeError):
        struct.lifecycle_state = LifecycleState.CREATED


def test_is_set(account_type):
    struct = account_type("acme", "1")

    assert struct.is_set("bank")
    assert not struct.is_set("region"), "unbound optional identity stays unset"
    assert struct.region == "eu"


# Lifecycle


def test_advance_through_all_states(account_type):
    struct = account_type.new()

    assert struct.define_identity() is LifecycleState.IDENTITY_DEFINED
    assert struct.lock() is LifecycleState.LOCKED


def test_advance_defaults_to_next(account_type):
    struct = account_type.new()
    assert struct.advance_state() is LifecycleState.IDENTITY_DEFINED


def test_cannot_skip_state(account_type):
    struct = account_type.new()

    with pytest.raises(InvalidTransitionError) as exc_info:
        struct.lock()

    assert exc_info.value.current is LifecycleState.CREATED
    assert exc_info.value.target is LifecycleState.LOCKED
    assert struct.lifecycle_state is LifecycleState.CREATED


def test_cannot_go_back(account_type):
    struct = account_type("acme", "1")

    with pytest.raises(InvalidTransitionError):
        struct.advance_state(LifecycleState.CREATED)


def test_locked_is_final(account_type):
    struct = account_type("acme", "1")
    struct.lock()

    with pytest.raises(InvalidTransitionError):
        struct.advance_state()


# Base links


def test_attach_base(account_type):
    base = account_type("acme", "1")
    struct = account_type("acme", "1")

    struct.attach_base(base, exists=True)

    assert struct.base_instance is base
    assert struct.base_exists


def test_attach_none_never_exists(account_type):
    struct = account_type("acme", "1")
    struct.attach_base(None, exists=True)
    assert not struct.base_exists


def test_base_must_share_type(account_type, foo_type):
    struct = account_type("acme", "1")

    with pytest.raises(TypeError, match="must be a Account"):
        struct.attach_base(foo_type(1, 2, 3), exists=True)


def test_base_cannot_be_self(account_type):
    struct = account_type("acme", "1")

    with pytest.raises(TypeError, match="own base"):
        struct.attach_base(struct, exists=True)


# Logs


def test_log_built_once_by_type(account_type, load_log):
    struct = account_type("acme", "1")
    assert struct.log is load_log
    assert struct.log is struct.log


def test_default_log_is_logging_load_log():
    Thing = StructType("Thing", attribute("id", identity=True))
    struct = Thing("t1")
    log = struct.log

    assert isinstance(log, LoggingLoadLog)
    assert log.label is struct


def test_log_label_follows_identity_set_after_first_use(caplog):
    """CRITICAL: The log prefix reflects the struct as it is when logging.

    Why: a CREATED struct can read its log before its identity is bound.
    """
    Thing = StructType(
        "Thing",
        attribute("id", identity=True),
        settings=LoggingSettings(level="INFO"),
    )
    struct = Thing.new()
    log = struct.log

    struct.id = "t1"
    with caplog.at_level(logging.INFO, logger="patchstruct.load"):
        log.load_value_started("size")

    assert [r.getMessage() for r in caplog.records] == ["Thing['t1']: load size started"]


def test_custom_log_factory():
    Thing = StructType("Thing", attribute("id", identity=True), log_factory=lambda s: NullLoadLog())
    assert isinstance(Thing("t1").log, NullLoadLog)


# Introspection


def test_identity_key_includes_defaults(account_type):
    assert account_type("ACME", "1").identity_key() == ("acme", "1", "eu")
    assert account_type("acme", "1", region="US").identity_key() == ("acme", "1", "us")


def test_explicit_snapshot_is_a_copy(account_type):
    struct = account_type("acme", "1")
    snapshot = struct.explicit_snapshot()
    snapshot["balance"] = 99

    assert snapshot == {"bank": "acme", "number": "1", "balance": 99}
    assert "balance" not in struct.explicit_values


def test_resolved_values(account_type):
    struct = account_type("acme", "1")
    struct.owner = "alice"

    assert struct.resolved_values() == {
        "bank": "acme",
        "number": "1",
        "region": "eu",
        "balance": 0,
        "owner": "alice",
    }


def test_repr_shows_bound_identity(account_type):
    assert repr(account_type("acme", "1")) == "Account['acme', '1', ?]"
    assert repr(account_type.new()) == "Account[?, ?, ?]"
