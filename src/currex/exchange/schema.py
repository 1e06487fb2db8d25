"""CurrencyExchange table schema."""

from currex.database.service import DatabaseService

CURRENCY_TABLE = "CurrencyExchange"
CURRENCY_COLUMNS = ["CurrencyCode", "ExchangeRate"]

SQLITE_CURRENCY_DDL = """
CREATE TABLE IF NOT EXISTS CurrencyExchange (
    CurrencyID    INTEGER     PRIMARY KEY AUTOINCREMENT,
    CurrencyCode  VARCHAR(3)  NOT NULL UNIQUE,
    ExchangeRate  REAL        NOT NULL
);
"""

POSTGRES_CURRENCY_DDL = """
CREATE TABLE IF NOT EXISTS CurrencyExchange (
    CurrencyID    SERIAL      PRIMARY KEY,
    CurrencyCode  VARCHAR(3)  NOT NULL UNIQUE,
    ExchangeRate  DOUBLE PRECISION NOT NULL
);
"""

_DDL_BY_DIALECT = {
    "sqlite": SQLITE_CURRENCY_DDL,
    "postgresql": POSTGRES_CURRENCY_DDL,
}


def ensure_schema(service: DatabaseService) -> None:
    """Create the CurrencyExchange table if it doesn't exist."""
    try:
        ddl = _DDL_BY_DIALECT[service.dialect]
    except KeyError:
        raise ValueError(f"No CurrencyExchange schema for dialect {service.dialect!r}") from None
    service.execute_ddl(ddl)
