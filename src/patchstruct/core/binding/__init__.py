"""Construction argument binding onto identity attributes."""

from patchstruct.core.binding.operations import bind_arguments, split_identity

__all__ = [
    "bind_arguments",
    "split_identity",
]
