"""
Value Objects for the dispense chain.

Immutable objects that represent values in the domain.
Value objects are compared by value, not by identity.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any

from .exceptions import InvalidAmountError


# =============================================================================
# Enums
# =============================================================================


class ReportStage(Enum):
    """Outcome recorded by a single handler."""

    DISPENSED = auto()
    REMAINDER_UNDISPENSABLE = auto()
    AMOUNT_UNDISPENSABLE = auto()


# =============================================================================
# Amount Value Object
# =============================================================================


@dataclass(frozen=True)
class Amount:
    """
    Immutable value object representing an amount to dispense.

    Amounts are whole currency units; there are no fractional units.

    Attributes:
        value: Amount in whole currency units.
    """

    value: int = 0

    def __post_init__(self) -> None:
        """Validate the amount."""
        # bool is an int subclass but never a meaningful amount
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise InvalidAmountError(
                f"Amount must be a whole number, got {self.value!r}",
                amount=self.value,
            )
        if self.value < 0:
            raise InvalidAmountError(
                f"Amount cannot be negative: {self.value}",
                amount=self.value,
            )

    def split(self, denomination: int) -> tuple[int, int]:
        """
        Split the amount into whole bills and a remainder.

        Args:
            denomination: Bill value.

        Returns:
            Tuple of (bill count, remainder).
        """
        return divmod(self.value, denomination)

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)


# =============================================================================
# Report Value Objects
# =============================================================================


@dataclass(frozen=True)
class DispenseReport:
    """
    A single report line produced while walking the chain.

    Attributes:
        denomination: Denomination of the reporting handler.
        stage: What the handler did.
        count: Number of bills dispensed (DISPENSED only).
        amount: Amount the report is about: the value dispensed for
            DISPENSED, the left-over amount otherwise.
    """

    denomination: int
    stage: ReportStage
    count: int = 0
    amount: int = 0

    @classmethod
    def dispensed(cls, denomination: int, count: int) -> "DispenseReport":
        """Create a report for dispensed bills."""
        return cls(
            denomination=denomination,
            stage=ReportStage.DISPENSED,
            count=count,
            amount=count * denomination,
        )

    @classmethod
    def remainder_undispensable(
        cls,
        denomination: int,
        remainder: int,
    ) -> "DispenseReport":
        """Create a report for a remainder left after the terminal handler."""
        return cls(
            denomination=denomination,
            stage=ReportStage.REMAINDER_UNDISPENSABLE,
            amount=remainder,
        )

    @classmethod
    def amount_undispensable(
        cls,
        denomination: int,
        amount: int,
    ) -> "DispenseReport":
        """Create a report for an amount the terminal handler could not touch."""
        return cls(
            denomination=denomination,
            stage=ReportStage.AMOUNT_UNDISPENSABLE,
            amount=amount,
        )

    @property
    def is_dispensed(self) -> bool:
        return self.stage is ReportStage.DISPENSED

    @property
    def message(self) -> str:
        """Human-readable report line."""
        if self.stage is ReportStage.DISPENSED:
            return f"Dispensing {self.count} {self.denomination} bills"
        if self.stage is ReportStage.REMAINDER_UNDISPENSABLE:
            return f"Cannot dispense remaining amount: {self.amount}"
        return f"Cannot dispense amount: {self.amount}"

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "denomination": self.denomination,
            "stage": self.stage.name.lower(),
            "count": self.count,
            "amount": self.amount,
            "message": self.message,
        }


@dataclass(frozen=True)
class DispensingResult:
    """
    Result of a dispense request walked through the chain.

    Attributes:
        requested_amount: Amount submitted to the chain.
        dispensed_amount: Sum of all dispensed bills.
        remaining_amount: Amount that could not be dispensed.
        reports: Ordered report records, head handler first.
    """

    requested_amount: int = 0
    dispensed_amount: int = 0
    remaining_amount: int = 0
    reports: tuple[DispenseReport, ...] = field(default_factory=tuple)

    @classmethod
    def from_reports(
        cls,
        requested: int,
        reports: list[DispenseReport],
    ) -> "DispensingResult":
        """Build a result, deriving totals from the report records."""
        dispensed = sum(r.amount for r in reports if r.is_dispensed)
        return cls(
            requested_amount=requested,
            dispensed_amount=dispensed,
            remaining_amount=requested - dispensed,
            reports=tuple(reports),
        )

    @property
    def success(self) -> bool:
        """Whether the whole amount was dispensed."""
        return self.remaining_amount == 0

    @property
    def bills(self) -> dict[int, int]:
        """Dispensed bill counts keyed by denomination."""
        return {r.denomination: r.count for r in self.reports if r.is_dispensed}

    @property
    def message(self) -> str:
        if self.success:
            return f"Dispensed {self.dispensed_amount}"
        return (
            f"Partially dispensed {self.dispensed_amount} of {self.requested_amount}, "
            f"remaining {self.remaining_amount}"
        )

    def lines(self) -> list[str]:
        """Report lines in chain order."""
        return [r.message for r in self.reports]

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "success": self.success,
            "requested_amount": self.requested_amount,
            "dispensed_amount": self.dispensed_amount,
            "remaining_amount": self.remaining_amount,
            "bills": {str(d): c for d, c in self.bills.items()},
            "reports": [r.to_dict() for r in self.reports],
            "message": self.message,
        }
