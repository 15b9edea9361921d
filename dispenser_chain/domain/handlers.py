"""
Denomination handlers.

Each handler dispenses the largest whole number of its own bills and
hands the rest on.
"""

from dispenser_chain.core.exceptions import ChainConfigurationError
from dispenser_chain.core.interfaces import DispenseHandler, HandlerStep
from dispenser_chain.core.value_objects import Amount, DispenseReport


class DenominationHandler(DispenseHandler):
    """
    Handler bound to a single bill denomination.

    Zero-count dispensing is never reported. When nothing follows this
    handler, any non-zero leftover is reported instead of forwarded.
    """

    def __init__(self, denomination: int) -> None:
        """
        Initialize the handler.

        Args:
            denomination: Positive bill value.
        """
        if isinstance(denomination, bool) or not isinstance(denomination, int) or denomination <= 0:
            raise ChainConfigurationError(
                f"Denomination must be a positive whole number, got {denomination!r}",
                denominations=[denomination],
            )
        self._denomination = denomination

    @property
    def denomination(self) -> int:
        return self._denomination

    def dispense(self, amount: int, is_terminal: bool = True) -> HandlerStep:
        incoming = Amount(amount)
        count, remainder = incoming.split(self._denomination)

        if count == 0:
            # Nothing fits: pass the untouched amount on
            if remainder == 0:
                return HandlerStep()
            if is_terminal:
                return HandlerStep(
                    reports=(DispenseReport.amount_undispensable(self._denomination, remainder),),
                )
            return HandlerStep(forward=remainder)

        reports = [DispenseReport.dispensed(self._denomination, count)]
        if remainder == 0:
            return HandlerStep(reports=tuple(reports))
        if is_terminal:
            reports.append(DispenseReport.remainder_undispensable(self._denomination, remainder))
            return HandlerStep(reports=tuple(reports))
        return HandlerStep(reports=tuple(reports), forward=remainder)

    def __repr__(self) -> str:
        return f"DenominationHandler({self._denomination})"
