"""
Infrastructure layer - Configuration and external concerns.

Contains:
- Settings
"""

from .settings import (
    DispenserSettings,
    LoggingSettings,
    Settings,
    get_settings,
)


__all__ = [
    "DispenserSettings",
    "LoggingSettings",
    "Settings",
    "get_settings",
]
