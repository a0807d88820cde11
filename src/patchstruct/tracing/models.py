"""LoadLog implementations: stdlib logging, no-op, and in-memory recording."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum

from patchstruct.config import LoggingSettings


class LoadPhase(Enum):
    """Kind of load notification."""

    STARTED = "started"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class LoadEvent:
    """One recorded load notification."""

    phase: LoadPhase
    name: str
    error: BaseException | None = None


class LoggingLoadLog:
    """LoadLog that writes to a stdlib logger.

    Args:
        label: Message prefix. A string is used as-is; anything else (normally
            the struct itself) is rendered with repr() on every message, so
            identity values set later still show up.
        settings: Logging settings. Read from the environment if omitted.
        logger: Logger to use instead of settings.logger_name.
    """

    def __init__(
        self,
        label: object,
        settings: LoggingSettings | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.settings = settings if settings is not None else LoggingSettings()
        self.label = label
        self.logger = logger if logger is not None else logging.getLogger(self.settings.logger_name)
        self._level = self.settings.level_number

    def _prefix(self) -> str:
        if not self.settings.include_struct:
            return ""
        label = self.label if isinstance(self.label, str) else repr(self.label)
        return f"{label}: "

    def load_value_started(self, name: str) -> None:
        self.logger.log(self._level, "%sload %s started", self._prefix(), name)

    def load_value_succeeded(self, name: str) -> None:
        self.logger.log(self._level, "%sload %s succeeded", self._prefix(), name)

    def load_value_failed(self, name: str, error: BaseException) -> None:
        self.logger.warning(
            "%sload %s failed: %s: %s", self._prefix(), name, type(error).__name__, error
        )


class NullLoadLog:
    """LoadLog that discards all notifications."""

    def load_value_started(self, name: str) -> None:
        pass

    def load_value_succeeded(self, name: str) -> None:
        pass

    def load_value_failed(self, name: str, error: BaseException) -> None:
        pass


@dataclass
class RecordingLoadLog:
    """LoadLog that keeps every notification in memory, in order."""

    events: list[LoadEvent] = field(default_factory=list)

    def load_value_started(self, name: str) -> None:
        self.events.append(LoadEvent(LoadPhase.STARTED, name))

    def load_value_succeeded(self, name: str) -> None:
        self.events.append(LoadEvent(LoadPhase.SUCCEEDED, name))

    def load_value_failed(self, name: str, error: BaseException) -> None:
        self.events.append(LoadEvent(LoadPhase.FAILED, name, error))

    def phases(self, name: str | None = None) -> list[LoadPhase]:
        """Phases recorded so far, optionally for one attribute."""
        return [e.phase for e in self.events if name is None or e.name == name]

    def clear(self) -> None:
        self.events.clear()
