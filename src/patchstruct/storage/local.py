"""Local in-memory base store.

Simple dict-based provider suitable for single-process use and testing.
Bases are keyed by struct type name and identity key. Nothing persists
beyond the process.

Usage:
    store = LocalBaseStore()
    Account = StructType("Account", ..., base_provider=store)

    current = Account("acme", "42")
    current.balance = 100
    store.save(current)

    desired = Account("acme", "42")
    desired.balance  # 100
"""

from __future__ import annotations

from collections.abc import Hashable, Iterator
from typing import TYPE_CHECKING, TypeAlias

if TYPE_CHECKING:
    from patchstruct.struct.instance import StructInstance

BaseKey: TypeAlias = tuple[str, tuple[Hashable, ...]]


class LocalBaseStore:
    """In-memory map from (type name, identity key) to base struct.

    Stored structs are owned by the store and returned by reference as the
    base of later structs with the same identity.
    """

    def __init__(self) -> None:
        """Initialize empty store."""
        self._bases: dict[BaseKey, StructInstance] = {}

    @staticmethod
    def key(struct: StructInstance) -> BaseKey:
        """Storage key for a struct.

        Raises:
            TypeError: If an identity value is unhashable.
        """
        return (struct.struct_type.name, struct.identity_key())

    def save(self, struct: StructInstance) -> BaseKey:
        """Record struct as the real-world value for its identity.

        Replaces any struct previously saved under the same key.

        Returns:
            The key struct was saved under.
        """
        key = self.key(struct)
        self._bases[key] = struct
        return key

    def discard(self, struct: StructInstance) -> bool:
        """Forget the base for struct's identity. Returns True if one existed."""
        return self._bases.pop(self.key(struct), None) is not None

    def contains(self, struct: StructInstance) -> bool:
        """Check if a base exists for struct's identity."""
        return self.key(struct) in self._bases

    def get(self, struct: StructInstance) -> StructInstance | None:
        """Get the base for struct's identity, or None."""
        return self._bases.get(self.key(struct))

    def lookup(self, struct: StructInstance) -> tuple[StructInstance | None, bool]:
        """BaseProvider lookup: the stored base, and whether it exists."""
        base = self.get(struct)
        return base, base is not None

    def keys(self) -> Iterator[BaseKey]:
        """Iterate all stored keys."""
        return iter(list(self._bases))

    def clear(self) -> None:
        self._bases.clear()

    def __len__(self) -> int:
        return len(self._bases)
