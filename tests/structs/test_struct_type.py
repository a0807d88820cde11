"""Tests for struct types: declaration, construction, subtypes, composition."""

import pytest
from conftest import INT

from patchstruct import (
    AttributeOwnershipError,
    CoercionError,
    DuplicateArgumentError,
    LifecycleState,
    MissingRequiredIdentityError,
    StructType,
    UnknownArgumentError,
    UnknownAttributeError,
    attribute,
)

# Declaration


def test_attributes_in_declaration_order(foo_type):
    assert [a.name for a in foo_type.attributes] == ["a", "b", "c", "d", "e", "f", "g"]
    assert [a.name for a in foo_type.identity_attributes] == ["a", "b", "c", "d", "e", "f"]
    assert [a.name for a in foo_type.required_identity] == ["a", "b", "c"]
    assert [a.name for a in foo_type.optional_identity] == ["d", "e", "f"]
    assert "g" in foo_type
    assert [a.name for a in foo_type] == [a.name for a in foo_type.attributes]


def test_adopted_descriptors_are_owned(foo_type):
    assert all(a.owner is foo_type for a in foo_type.attributes)


def test_descriptor_belongs_to_one_type():
    """CRITICAL: A descriptor is never reassigned to another struct type."""
    shared = attribute("x")
    First = StructType("First", shared)

    with pytest.raises(AttributeOwnershipError) as exc_info:
        StructType("Second", shared)

    assert exc_info.value.owner == "First"
    assert exc_info.value.claimant == "Second"
    assert shared.owner is First


def test_failed_declaration_claims_nothing():
    x = attribute("x")

    with pytest.raises(ValueError, match="twice"):
        StructType("Broken", x, attribute("x"))

    assert x.owner is None
    assert StructType("Fine", x).attribute("x") is x


def test_reserved_names_rejected():
    with pytest.raises(ValueError, match="reserved"):
        StructType("Bad", attribute("lock"))


def test_unknown_attribute_lookup(foo_type):
    with pytest.raises(UnknownAttributeError, match="Foo has no attribute 'zzz'"):
        foo_type.attribute("zzz")


# Construction


def test_open_binds_identity(foo_type):
    """CRITICAL: bind(Foo, [1, 2, 3], {d: 4, f: 6}) → a=1 b=2 c=3 d=4 e=eee f=6."""
    struct = foo_type.open(1, 2, 3, d=4, f=6)

    assert (struct.a, struct.b, struct.c) == (1, 2, 3)
    assert (struct.d, struct.e, struct.f) == (4, "eee", 6)
    assert not struct.is_set("e"), "unbound optional identity resolves through its default"
    assert struct.lifecycle_state is LifecycleState.IDENTITY_DEFINED


def test_call_is_open(foo_type):
    assert foo_type(1, 2, 3).identity_key() == (1, 2, 3, "ddd", "eee", "fff")


def test_open_missing_required(foo_type):
    with pytest.raises(MissingRequiredIdentityError):
        foo_type(1, 2, d=4, f=6)


def test_open_duplicate(foo_type):
    with pytest.raises(DuplicateArgumentError):
        foo_type(1, a=2)


def test_open_unknown(foo_type):
    with pytest.raises(UnknownArgumentError):
        foo_type(1, 2, 3, g="not identity")


def test_open_coerces_identity():
    Counter = StructType("Counter", attribute("n", INT, identity=True))
    assert Counter("5").n == 5


def test_open_coercion_failure_raises():
    Counter = StructType("Counter", attribute("n", INT, identity=True))

    with pytest.raises(CoercionError):
        Counter("five")


def test_open_attaches_base_from_provider(account_type, store):
    base = account_type("acme", "1")
    store.save(base)

    struct = account_type("acme", "1")

    assert struct.base_instance is base
    assert struct.base_exists
    assert account_type("acme", "2").base_instance is None


def test_new_has_no_base(account_type, store):
    store.save(account_type("acme", "1"))
    assert account_type.new().base_instance is None


# Subtypes


@pytest.fixture
def savings_type(account_type):
    return account_type.derive(
        "Savings",
        attribute("region", str, identity=True, default="us"),
        attribute("rate", float, default=0.01),
    )


def test_derive_copies_and_overrides(account_type, savings_type):
    assert [a.name for a in savings_type.attributes] == [
        "bank",
        "number",
        "region",
        "balance",
        "owner",
        "rate",
    ]
    assert savings_type.attribute("region").default == "us"
    assert account_type.attribute("region").default == "eu"


def test_derive_does_not_share_descriptors(account_type, savings_type):
    parent = account_type.attribute("balance")
    child = savings_type.attribute("balance")

    assert child is not parent
    assert child == parent
    assert child.owner is savings_type
    assert parent.owner is account_type


def test_derive_inherits_collaborators(account_type, savings_type, store, load_log):
    assert savings_type.base_provider is store
    assert savings_type("acme", "1").log is load_log


def test_derive_records_parent(account_type, savings_type):
    assert savings_type.parent is account_type
    assert savings_type.is_subtype_of(account_type)
    assert savings_type.is_subtype_of(savings_type)
    assert not account_type.is_subtype_of(savings_type)


def test_derive_with_overridden_descriptor(account_type):
    rich_balance = account_type.attribute("balance").with_overrides(default=10**6)
    Rich = account_type.derive("Rich", rich_balance)

    assert Rich("acme", "1").balance == 10**6
    assert account_type("acme", "1").balance == 0


def test_derived_bases_are_separate(account_type, savings_type, store):
    base = account_type("acme", "1")
    base.balance = 100
    store.save(base)

    assert savings_type("acme", "1", region="eu").balance == 0


# Struct types as attribute types


@pytest.fixture
def bank_type():
    return StructType("Bank", attribute("code", identity=True), attribute("name"))


@pytest.fixture
def branch_type(bank_type):
    return StructType(
        "Branch",
        attribute("bank", bank_type, identity=True),
        attribute("city", identity=True),
    )


def test_struct_type_attribute_from_single_arg(bank_type, branch_type):
    branch = branch_type("acme", "Paris")

    assert branch.bank.struct_type is bank_type
    assert branch.bank.code == "acme"


def test_struct_type_attribute_from_mapping_and_tuple(branch_type):
    assert branch_type({"code": "acme"}, "Paris").bank.code == "acme"
    assert branch_type(("acme",), "Paris").bank.code == "acme"


def test_struct_type_attribute_keeps_instance(bank_type, branch_type):
    bank = bank_type("acme")
    assert branch_type(bank, "Paris").bank is bank


def test_struct_type_attribute_rejects_other_types(foo_type, branch_type):
    with pytest.raises(CoercionError):
        branch_type(foo_type(1, 2, 3), "Paris")


def test_struct_type_attribute_bad_arguments(branch_type):
    with pytest.raises(CoercionError) as exc_info:
        branch_type({"nope": 1}, "Paris")

    assert isinstance(exc_info.value.__cause__, UnknownArgumentError)


def test_struct_type_membership(bank_type, branch_type):
    attr = branch_type.attribute("bank")

    assert attr.accepts(bank_type("acme"))
    assert attr.accepts(None)
    assert not attr.accepts("acme")


def test_struct_type_coerce_idempotent(bank_type):
    bank = bank_type.coerce("acme")
    assert bank_type.coerce(bank) is bank
    assert bank_type.coerce(None) is None
