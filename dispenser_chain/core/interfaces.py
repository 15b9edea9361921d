"""
Interfaces for the dispense chain.

Defines the contract every chain handler fulfils.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from .value_objects import DispenseReport


# =============================================================================
# Data Classes
# =============================================================================


@dataclass(frozen=True)
class HandlerStep:
    """
    Outcome of one handler for one incoming amount.

    Attributes:
        reports: Report records produced by the handler (may be empty).
        forward: Amount to pass to the next handler; 0 stops the walk.
    """

    reports: tuple[DispenseReport, ...] = field(default_factory=tuple)
    forward: int = 0


# =============================================================================
# Handler Interface
# =============================================================================


class DispenseHandler(ABC):
    """
    Abstract base class for chain handlers.

    A handler owns exactly one denomination and holds no per-call state,
    so one instance can serve any number of independent requests.
    """

    @property
    @abstractmethod
    def denomination(self) -> int:
        """Get the bill value this handler dispenses."""
        ...

    @abstractmethod
    def dispense(self, amount: int, is_terminal: bool = True) -> HandlerStep:
        """
        Dispense as many bills as fit into the amount.

        Args:
            amount: Non-negative incoming amount.
            is_terminal: Whether no handler follows this one.

        Returns:
            Reports produced and the amount to forward.
        """
        ...
