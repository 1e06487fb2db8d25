"""Currency records: validation, store and conversion."""

from currex.exchange.converter import CurrencyConverter, convert, from_base, to_base, try_convert
from currex.exchange.results import CurrencyRecord, Outcome, Result
from currex.exchange.schema import ensure_schema
from currex.exchange.store import CurrencyStore
from currex.exchange.validation import canonical_code, is_valid_code, is_valid_rate

__all__ = [
    "CurrencyConverter",
    "CurrencyRecord",
    "CurrencyStore",
    "Outcome",
    "Result",
    "canonical_code",
    "convert",
    "ensure_schema",
    "from_base",
    "is_valid_code",
    "is_valid_rate",
    "to_base",
    "try_convert",
]
