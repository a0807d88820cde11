"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from patchstruct import LocalBaseStore, RecordingLoadLog, StructType, attribute


class IntHook:
    """Coercion hook converting raw input with int()."""

    def coerce(self, raw):
        if raw is None or isinstance(raw, int):
            return raw
        return int(raw)

    def implemented_by(self, instance):
        return instance is None or isinstance(instance, int)


class LowerHook:
    """Coercion hook normalizing strings to stripped lower case."""

    def coerce(self, raw):
        if not isinstance(raw, str):
            raise TypeError(f"expected str, got {type(raw).__name__}")
        return raw.strip().lower()

    def implemented_by(self, instance):
        return instance is None or isinstance(instance, str)


INT = IntHook()
LOWER = LowerHook()


@pytest.fixture
def store():
    """Fresh in-memory base store."""
    return LocalBaseStore()


@pytest.fixture
def load_log():
    """Recording load log shared by every struct of a type."""
    return RecordingLoadLog()


@pytest.fixture
def foo_type():
    """Required identity a, b, c; optional identity d, e, f; plain attribute g."""
    return StructType(
        "Foo",
        attribute("a", identity=True),
        attribute("b", identity=True),
        attribute("c", identity=True),
        attribute("d", identity=True, default="ddd"),
        attribute("e", identity=True, default="eee"),
        attribute("f", identity=True, default="fff"),
        attribute("g"),
    )


@pytest.fixture
def account_type(store, load_log):
    """Account keyed by bank and number, backed by the store."""
    return StructType(
        "Account",
        attribute("bank", LOWER, identity=True),
        attribute("number", identity=True),
        attribute("region", LOWER, identity=True, default="eu"),
        attribute("balance", INT, default=0),
        attribute("owner"),
        base_provider=store,
        log_factory=lambda struct: load_log,
    )
