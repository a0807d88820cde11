"""Configuration module using Pydantic Settings.

Usage:
    from patchstruct.config import LoggingSettings

    settings = LoggingSettings(logger_name="myapp.resources")
"""

from patchstruct.config.settings import LoggingSettings

__all__ = [
    "LoggingSettings",
]
