"""Tests for open_store and configuration."""

import pytest

from currex import open_store
from currex.config import DEFAULT_DB_URL, database_url


@pytest.fixture
def db_url(tmp_path):
    return f"sqlite:///{tmp_path / 'session.db'}"


class TestOpenStore:
    def test_commit_persists(self, db_url):
        with open_store(db_url) as store:
            assert store.add("USD", 1.0)

        with open_store(db_url) as store:
            assert store.select("USD").rate == 1.0

    def test_rollback_discards(self, db_url):
        with open_store(db_url, commit=False) as store:
            assert store.add("USD", 1.0)

        with open_store(db_url) as store:
            assert store.select("USD") is None

    def test_exception_rolls_back(self, db_url):
        with pytest.raises(ZeroDivisionError):
            with open_store(db_url) as store:
                store.add("USD", 1.0)
                1 / 0

        with open_store(db_url) as store:
            assert store.records() == []

    def test_uses_environment_url(self, db_url, monkeypatch):
        monkeypatch.setenv("CURRENCY_DB_URL", db_url)
        with open_store() as store:
            store.add("EUR", 1.02)
        with open_store(db_url) as store:
            assert store.exists("EUR")


class TestConfig:
    def test_default_url(self, monkeypatch):
        monkeypatch.delenv("CURRENCY_DB_URL", raising=False)
        assert database_url() == DEFAULT_DB_URL == "sqlite:///CurrencyExchange.db"
