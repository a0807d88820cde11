"""Configuration settings using Pydantic Settings.

Provides typed configuration with environment variable support.

Usage:
    from patchstruct.config import LoggingSettings

    # Load from environment variables (PATCHSTRUCT_LOG_*)
    settings = LoggingSettings()

    # Or override with explicit values
    settings = LoggingSettings(level="INFO")
"""

from __future__ import annotations

import logging

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for load notifications.

    Attributes:
        logger_name: Name of the stdlib logger that receives load events.
        level: Level for started/succeeded events. Failures always log at WARNING.
        include_struct: Prefix messages with the struct's label.

    Environment Variables:
        PATCHSTRUCT_LOG_LOGGER_NAME
        PATCHSTRUCT_LOG_LEVEL
        PATCHSTRUCT_LOG_INCLUDE_STRUCT
    """

    model_config = SettingsConfigDict(
        env_prefix="PATCHSTRUCT_LOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    logger_name: str = "patchstruct.load"
    level: str = "DEBUG"
    include_struct: bool = True

    @field_validator("level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        name = value.upper()
        if not isinstance(logging.getLevelName(name), int):
            raise ValueError(f"Unknown log level: {value}")
        return name

    @property
    def level_number(self) -> int:
        """Numeric stdlib logging level."""
        return logging.getLevelNamesMapping()[self.level]
