"""Environment-driven configuration."""

import os

DEFAULT_DB_URL = "sqlite:///CurrencyExchange.db"
DB_URL_ENV = "CURRENCY_DB_URL"


def database_url() -> str:
    return os.environ.get(DB_URL_ENV, DEFAULT_DB_URL)
