"""
Dispense Service - Client entry point to the chain.

Validates requested amounts before they enter the chain and logs the
report lines the chain produces.
"""

from __future__ import annotations

from typing import Any, Optional

from dispenser_chain.core.exceptions import InputGranularityError, InvalidGranularityError
from dispenser_chain.core.value_objects import Amount, DispensingResult
from dispenser_chain.domain.chain import DispenseChain, build_chain
from dispenser_chain.infrastructure.settings import Settings, get_settings
from dispenser_chain.loggers import logger


class DispenseService:
    """
    Submits validated amounts to a dispense chain.

    Amounts that are not a multiple of the granularity are rejected
    before the chain sees them.
    """

    def __init__(self, chain: DispenseChain, granularity: int = 10) -> None:
        """
        Initialize the dispense service.

        Args:
            chain: Assembled dispense chain.
            granularity: Step every requested amount must be a multiple of.
        """
        if isinstance(granularity, bool) or not isinstance(granularity, int) or granularity <= 0:
            raise InvalidGranularityError(
                f"Granularity must be a positive whole number, got {granularity!r}",
                granularity=granularity,
            )
        self._chain = chain
        self._granularity = granularity

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "DispenseService":
        """Create a service with a chain built from settings."""
        settings = settings or get_settings()
        return cls(
            build_chain(settings.dispenser.denominations),
            granularity=settings.dispenser.granularity,
        )

    @property
    def chain(self) -> DispenseChain:
        return self._chain

    @property
    def granularity(self) -> int:
        return self._granularity

    def validate(self, amount: Any) -> int:
        """
        Check that an amount may be submitted to the chain.

        Args:
            amount: Requested amount.

        Returns:
            The amount as an int.

        Raises:
            InvalidAmountError: If the amount is negative or not whole.
            InputGranularityError: If the amount is not a multiple of
                the granularity.
        """
        value = Amount(amount).value
        if value % self._granularity != 0:
            raise InputGranularityError(
                f"Amount {value} must be a multiple of {self._granularity}",
                amount=value,
                granularity=self._granularity,
            )
        return value

    def dispense(self, amount: Any) -> DispensingResult:
        """
        Validate an amount and dispense it through the chain.

        Args:
            amount: Requested amount.

        Returns:
            Dispensing result with ordered report records.
        """
        try:
            value = self.validate(amount)
        except InputGranularityError as e:
            logger.warning(f"Rejected amount: {e.message}")
            raise

        logger.info(f"Dispensing request: {value}")
        result = self._chain.dispense(value)

        for report in result.reports:
            if report.is_dispensed:
                logger.info(report.message)
            else:
                logger.warning(report.message)

        if not result.success:
            logger.warning(f"Unable to dispense full amount. Remaining: {result.remaining_amount}")

        return result
