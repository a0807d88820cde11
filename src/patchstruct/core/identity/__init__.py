"""Identity lifecycle functionality: states and write guards."""

from patchstruct.core.identity.models import LifecycleState, identity_writable, value_writable

__all__ = [
    "LifecycleState",
    "identity_writable",
    "value_writable",
]
