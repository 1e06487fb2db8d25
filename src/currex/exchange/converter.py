"""Cross-rate conversion pivoted through the base unit.

Only code-to-base rates are stored. A conversion normalizes the amount to
the base unit with the source rate and denormalizes it with the target
rate: ``amount * rate(from) / rate(to)``. The rate direction is whichever
makes the base currency (USD) equal 1.00; no rounding is applied.
"""

import logging

from currex.exchange.results import Outcome, Result
from currex.exchange.store import CurrencyStore

logger = logging.getLogger(__name__)


def to_base(amount: float, rate: float) -> float:
    return amount * rate


def from_base(amount: float, rate: float) -> float:
    return amount / rate


def try_convert(store: CurrencyStore, from_code: str, to_code: str, amount: float) -> Result:
    """Convert an amount between two stored currencies.

    Returns the lookup's result unchanged when either code is missing or the
    store fails, otherwise an OK result carrying the raw quotient.
    """
    source = store.lookup(from_code)
    if not source.ok:
        logger.debug("Cannot convert from %r: %s", from_code, source.outcome.value)
        return source
    target = store.lookup(to_code)
    if not target.ok:
        logger.debug("Cannot convert to %r: %s", to_code, target.outcome.value)
        return target
    value = from_base(to_base(amount, source.value.rate), target.value.rate)
    return Result(Outcome.OK, value=value)


def convert(store: CurrencyStore, from_code: str, to_code: str, amount: float) -> float | None:
    result = try_convert(store, from_code, to_code, amount)
    return result.value if result.ok else None


class CurrencyConverter:
    """Converter bound to one store."""

    def __init__(self, store: CurrencyStore):
        self._store = store

    def try_convert(self, from_code: str, to_code: str, amount: float) -> Result:
        return try_convert(self._store, from_code, to_code, amount)

    def convert(self, from_code: str, to_code: str, amount: float) -> float | None:
        return convert(self._store, from_code, to_code, amount)
