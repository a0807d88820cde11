"""Base providers."""

from patchstruct.storage.local import LocalBaseStore
from patchstruct.storage.protocol import BaseProvider

__all__ = [
    "BaseProvider",
    "LocalBaseStore",
]
