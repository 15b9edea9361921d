"""
Configuration module for the dispense chain.

This module provides centralized constants for the chain layout,
amount validation and logging output.
"""

from typing import Final


# =============================================================================
# Chain Configuration
# =============================================================================

# Reference assembly: 1000 -> 500 -> 100
DEFAULT_DENOMINATIONS: Final[tuple[int, ...]] = (1000, 500, 100)

# Reference assembly with the 20 bill handler appended
EXTENDED_DENOMINATIONS: Final[tuple[int, ...]] = (1000, 500, 100, 20)


# =============================================================================
# Amount Validation
# =============================================================================

DEFAULT_GRANULARITY: Final[int] = 10


# =============================================================================
# Logging Configuration
# =============================================================================

APP_NAME: Final[str] = "dispenser_chain"
LOGGER_NAME: Final[str] = "DISPENSER_CHAIN"

LOKI_URL: Final[str | None] = None  # e.g. "http://localhost:3100/loki/api/v1/push"
LOG_FILE: Final[str | None] = None  # e.g. "logs/dispenser_chain.log"
