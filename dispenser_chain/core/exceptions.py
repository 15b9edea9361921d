"""
Custom exceptions for the dispense chain.

Provides a hierarchy of typed exceptions for better error handling
and more informative error messages.

An amount left over after the terminal handler is not an error: it is
reported through the dispensing result.
"""

from typing import Any, Optional


class DispenserError(Exception):
    """Base exception for all dispense chain errors."""

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        """
        Initialize the exception.

        Args:
            message: Human-readable error message.
            code: Optional error code for programmatic handling.
            details: Optional additional error details.
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for command responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


# =============================================================================
# Amount Errors
# =============================================================================


class InvalidAmountError(DispenserError):
    """Amount is negative or not a whole number."""

    def __init__(self, message: str, amount: Any = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.amount = amount
        self.details["amount"] = amount


class InputGranularityError(InvalidAmountError):
    """Amount is not a multiple of the accepted granularity."""

    def __init__(
        self,
        message: str,
        amount: Any = None,
        granularity: int = 0,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, amount=amount, **kwargs)
        self.granularity = granularity
        self.details["granularity"] = granularity


# =============================================================================
# Chain Errors
# =============================================================================


class ChainConfigurationError(DispenserError):
    """Denominations cannot form a valid chain."""

    def __init__(
        self,
        message: str,
        denominations: Any = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        if isinstance(denominations, (list, tuple)):
            denominations = list(denominations)
        self.details["denominations"] = denominations


class InvalidGranularityError(DispenserError):
    """Granularity is not a positive whole number."""

    def __init__(self, message: str, granularity: Any = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.details["granularity"] = granularity
