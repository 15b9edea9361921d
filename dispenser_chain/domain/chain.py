"""
Dispense chain - ordered sequence of denomination handlers.

The chain is assembled once, in strictly descending denomination order,
and walked front to back for every request. A handler's successor is
simply the next entry in the sequence.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Optional, Sequence

from dispenser_chain.core.exceptions import ChainConfigurationError
from dispenser_chain.core.interfaces import DispenseHandler
from dispenser_chain.core.value_objects import Amount, DispenseReport, DispensingResult
from dispenser_chain.loggers import logger

from .handlers import DenominationHandler


class DispenseChain:
    """
    Immutable chain of dispense handlers.

    Holds ``(denomination, handler)`` pairs ordered from the largest bill
    to the smallest. The last pair is the terminal handler.
    """

    def __init__(self, handlers: Sequence[DispenseHandler]) -> None:
        """
        Assemble the chain.

        Args:
            handlers: Handlers in strictly descending denomination order.

        Raises:
            ChainConfigurationError: If the sequence is empty or not
                strictly descending.
        """
        handlers = list(handlers)
        denominations = [h.denomination for h in handlers]
        if not denominations:
            raise ChainConfigurationError(
                "Chain needs at least one handler",
                denominations=denominations,
            )
        for larger, smaller in zip(denominations, denominations[1:]):
            if smaller >= larger:
                raise ChainConfigurationError(
                    f"Denominations must be strictly descending: {larger} then {smaller}",
                    denominations=denominations,
                )

        self._links: tuple[tuple[int, DispenseHandler], ...] = tuple(
            (h.denomination, h) for h in handlers
        )
        logger.debug(f"Chain assembled: {' -> '.join(str(d) for d in denominations)}")

    # -------------------------------------------------------------------------
    # Topology
    # -------------------------------------------------------------------------

    @property
    def denominations(self) -> tuple[int, ...]:
        return tuple(d for d, _ in self._links)

    @property
    def head(self) -> DispenseHandler:
        """Get the handler requests enter through."""
        return self._links[0][1]

    @property
    def terminal(self) -> DispenseHandler:
        """Get the smallest-denomination handler."""
        return self._links[-1][1]

    def successor_of(self, denomination: int) -> Optional[DispenseHandler]:
        """
        Get the handler that follows the given denomination.

        Args:
            denomination: Denomination of a handler in this chain.

        Returns:
            The next handler, or None for the terminal handler.

        Raises:
            KeyError: If no handler in the chain has this denomination.
        """
        for index, (value, _) in enumerate(self._links):
            if value == denomination:
                if index + 1 < len(self._links):
                    return self._links[index + 1][1]
                return None
        raise KeyError(denomination)

    def __len__(self) -> int:
        return len(self._links)

    def __iter__(self) -> Iterator[DispenseHandler]:
        return (handler for _, handler in self._links)

    def __repr__(self) -> str:
        return f"DispenseChain({list(self.denominations)})"

    # -------------------------------------------------------------------------
    # Dispensing
    # -------------------------------------------------------------------------

    def dispense(self, amount: int) -> DispensingResult:
        """
        Walk the amount down the chain.

        Each handler takes what it can and forwards the remainder; the
        walk stops as soon as nothing is left to forward.

        Args:
            amount: Non-negative amount to dispense.

        Returns:
            Result with the ordered report records.
        """
        requested = Amount(amount).value
        reports: list[DispenseReport] = []
        remaining = requested
        last = len(self._links) - 1

        for index, (_, handler) in enumerate(self._links):
            if remaining == 0:
                break
            step = handler.dispense(remaining, is_terminal=index == last)
            reports.extend(step.reports)
            remaining = step.forward

        return DispensingResult.from_reports(requested, reports)


def build_chain(denominations: Iterable[int]) -> DispenseChain:
    """
    Build a chain with one DenominationHandler per denomination.

    Args:
        denominations: Bill values in strictly descending order.

    Returns:
        Assembled chain.
    """
    return DispenseChain([DenominationHandler(d) for d in denominations])
