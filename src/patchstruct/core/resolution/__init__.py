"""Resolution result variants for base-value lookups."""

from patchstruct.core.resolution.models import BaseValue, FailedOnce, Loaded, NotLoaded

__all__ = [
    "BaseValue",
    "Loaded",
    "NotLoaded",
    "FailedOnce",
]
