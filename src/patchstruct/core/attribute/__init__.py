"""Attribute functionality: descriptor model and declaration helper."""

from patchstruct.core.attribute.core import attribute
from patchstruct.core.attribute.models import AttributeDescriptor

__all__ = [
    "AttributeDescriptor",
    "attribute",
]
