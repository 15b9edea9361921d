"""
Core module - Foundation layer with no external dependencies.

Contains:
- Exceptions
- Interfaces
- Value Objects
"""

from .exceptions import (
    DispenserError,
    InvalidAmountError,
    InputGranularityError,
    ChainConfigurationError,
    InvalidGranularityError,
)
from .interfaces import (
    DispenseHandler,
    HandlerStep,
)
from .value_objects import (
    Amount,
    ReportStage,
    DispenseReport,
    DispensingResult,
)


__all__ = [
    # Exceptions
    "DispenserError",
    "InvalidAmountError",
    "InputGranularityError",
    "ChainConfigurationError",
    "InvalidGranularityError",
    # Interfaces
    "DispenseHandler",
    "HandlerStep",
    # Value Objects
    "Amount",
    "ReportStage",
    "DispenseReport",
    "DispensingResult",
]
