"""Base provider protocol for swappable real-world lookups.

A base provider answers, for a freshly opened struct, which struct holds
its current real-world value and whether that entity exists at all:
- Local in-memory (LocalBaseStore)
- Anything backed by a real system (implemented by applications)

Usage:
    store = LocalBaseStore()
    Account = StructType("Account", ..., base_provider=store)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from patchstruct.struct.instance import StructInstance


@runtime_checkable
class BaseProvider(Protocol):
    """Supplies the base struct for a struct whose identity is defined."""

    def lookup(self, struct: StructInstance) -> tuple[StructInstance | None, bool]:
        """Find the base struct for struct.

        Returns:
            (base, exists): the base struct or None, and whether the
            real-world entity exists. The provider keeps ownership of base.
        """
        ...
