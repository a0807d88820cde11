"""Resolution results for reading an attribute from a base struct.

A base lookup is one of three outcomes:

    Loaded(value)  the base holds the value, set explicitly or by its loader
    NotLoaded()    no value and no loader; fall through to the default
    FailedOnce()   the loader failed on an earlier read; resolves to None

FailedOnce is what makes loader failures loud exactly once: the read that
ran the loader raises, every later read sees FailedOnce and returns None.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Loaded:
    """Base struct has a value for the attribute."""

    value: Any

    @property
    def found(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class NotLoaded:
    """Base struct has no value and cannot load one."""

    @property
    def found(self) -> bool:
        return False

    @property
    def value(self) -> None:
        return None


@dataclass(frozen=True, slots=True)
class FailedOnce:
    """Loader already failed for this attribute; the cached result is None."""

    attribute: str

    @property
    def found(self) -> bool:
        return True

    @property
    def value(self) -> None:
        return None


BaseValue = Loaded | NotLoaded | FailedOnce
