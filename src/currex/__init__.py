"""Currency exchange table and converter: public API."""

from currex.database import DatabaseService, create_service
from currex.exchange import (
    CurrencyConverter,
    CurrencyRecord,
    CurrencyStore,
    Outcome,
    Result,
    convert,
    ensure_schema,
    is_valid_code,
    is_valid_rate,
)
from currex.session import open_store

__all__ = [
    "CurrencyConverter",
    "CurrencyRecord",
    "CurrencyStore",
    "DatabaseService",
    "Outcome",
    "Result",
    "convert",
    "create_service",
    "ensure_schema",
    "is_valid_code",
    "is_valid_rate",
    "open_store",
]
