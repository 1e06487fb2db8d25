"""Shared test fixtures."""

import pytest

from currex import create_service
from currex.exchange import CurrencyStore, ensure_schema

SEED_RATES = {
    "USD": 1.00,
    "EUR": 1.02,
    "GBP": 0.90,
    "JPY": 142.79,
    "MXN": 20.08,
}


@pytest.fixture
def db_service(tmp_path):
    """Provide a fresh SQLite DatabaseService for each test."""
    db_path = tmp_path / "test.db"
    service = create_service(f"sqlite:///{db_path}")
    service.connect()
    yield service
    service.close()


@pytest.fixture
def store(db_service):
    """A CurrencyStore seeded with SEED_RATES inside an open transaction."""
    ensure_schema(db_service)
    with db_service.transaction():
        currency_store = CurrencyStore(db_service)
        for code, rate in SEED_RATES.items():
            assert currency_store.add(code, rate)
        yield currency_store
