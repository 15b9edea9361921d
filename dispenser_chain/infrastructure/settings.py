"""
Application settings.

Provides typed, immutable configuration sections aggregated into a
single settings object.
"""

import logging
from dataclasses import dataclass, field

from dispenser_chain.configs import (
    APP_NAME,
    DEFAULT_DENOMINATIONS,
    DEFAULT_GRANULARITY,
    LOG_FILE,
    LOKI_URL,
)


# =============================================================================
# Configuration Classes
# =============================================================================


@dataclass(frozen=True)
class DispenserSettings:
    """Chain layout and amount validation settings."""

    denominations: tuple[int, ...] = DEFAULT_DENOMINATIONS
    granularity: int = DEFAULT_GRANULARITY

    @property
    def smallest_denomination(self) -> int:
        """Get the terminal handler's denomination."""
        return min(self.denominations)


@dataclass(frozen=True)
class LoggingSettings:
    """Logging output settings."""

    app: str = APP_NAME
    level: int = logging.INFO
    log_file: str | None = LOG_FILE
    loki_url: str | None = LOKI_URL


# =============================================================================
# Main Settings
# =============================================================================


@dataclass
class Settings:
    """
    Main application settings.

    Aggregates all configuration sections.
    """

    dispenser: DispenserSettings = field(default_factory=DispenserSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)


# =============================================================================
# Settings Singleton
# =============================================================================


_settings: Settings | None = None


def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns:
        Settings instance.
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
