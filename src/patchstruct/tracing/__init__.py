"""Load notifications for loader evaluation.

Usage:
    from patchstruct.tracing import RecordingLoadLog

    log = RecordingLoadLog()
    Account = StructType("Account", ..., log_factory=lambda struct: log)
    account.balance
    log.phases("balance")  # [LoadPhase.STARTED, LoadPhase.SUCCEEDED]
"""

from patchstruct.tracing.models import (
    LoadEvent,
    LoadPhase,
    LoggingLoadLog,
    NullLoadLog,
    RecordingLoadLog,
)
from patchstruct.tracing.protocol import LoadLog

__all__ = [
    "LoadLog",
    "LoadEvent",
    "LoadPhase",
    "LoggingLoadLog",
    "NullLoadLog",
    "RecordingLoadLog",
]
