"""Tests for cross-rate conversion."""

import pytest

from currex.exchange import CurrencyConverter, Outcome, convert, from_base, to_base, try_convert


class TestHelpers:
    def test_to_and_from_base(self):
        assert to_base(50.0, 0.90) == 50.0 * 0.90
        assert from_base(45.0, 1.02) == 45.0 / 1.02


class TestConvert:
    def test_gbp_to_eur(self, store):
        result = convert(store, "GBP", "EUR", 50.00)
        assert result == 50.00 * 0.90 / 1.02
        assert result == pytest.approx(44.1176, abs=1e-4)

    def test_exact_formula(self, store):
        assert store.add("ABC", 1.45)
        assert store.add("DEF", 0.88)
        amount = 10.00
        assert convert(store, "ABC", "DEF", amount) == amount * 1.45 / 0.88

    def test_case_insensitive_codes(self, store):
        assert convert(store, "gbp", "eur", 50.00) == convert(store, "GBP", "EUR", 50.00)

    def test_same_currency(self, store):
        assert convert(store, "JPY", "JPY", 12.5) == 12.5 * 142.79 / 142.79

    def test_no_rounding(self, store):
        assert convert(store, "USD", "MXN", 1.0) == 1.0 / 20.08

    @pytest.mark.parametrize(
        "from_code, to_code", [("ZZZ", "USD"), ("USD", "ZZZ"), ("ZZZ", "YYY"), ("AB", "USD")]
    )
    def test_missing_code_is_absent(self, store, from_code, to_code):
        assert convert(store, from_code, to_code, 10.0) is None

    def test_tagged_result(self, store):
        result = try_convert(store, "USD", "ZZZ", 10.0)
        assert result.outcome is Outcome.NOT_FOUND
        assert try_convert(store, "USD", "EUR", 10.0).value == 10.0 * 1.00 / 1.02

    def test_reflects_rate_update(self, store):
        before = convert(store, "GBP", "JPY", 50.00)
        assert store.update_rate("GBP", 3.50)
        after = convert(store, "GBP", "JPY", 50.00)
        assert after != before
        assert after == 50.00 * 3.50 / 142.79

    def test_after_rename(self, store):
        store.rename_code("GBP", "GBX")
        assert convert(store, "GBP", "EUR", 50.00) is None
        assert convert(store, "GBX", "EUR", 50.00) == 50.00 * 0.90 / 1.02

    def test_storage_failure_is_absent(self, store, db_service):
        db_service.execute("DROP TABLE CurrencyExchange")
        assert convert(store, "GBP", "EUR", 50.00) is None
        assert try_convert(store, "GBP", "EUR", 50.00).outcome is Outcome.STORAGE_ERROR


class TestCurrencyConverter:
    def test_bound_converter(self, store):
        converter = CurrencyConverter(store)
        assert converter.convert("GBP", "EUR", 50.00) == 50.00 * 0.90 / 1.02
        assert converter.convert("GBP", "ZZZ", 50.00) is None
        assert converter.try_convert("MXN", "USD", 20.08).value == 20.08 * 20.08 / 1.00
