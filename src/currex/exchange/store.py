"""Validated CRUD over the CurrencyExchange table."""

import logging
from typing import Callable

from currex.database.service import DatabaseService
from currex.exchange.results import (
    ALREADY_EXISTS,
    INVALID_INPUT,
    NOT_FOUND,
    OK,
    CurrencyRecord,
    Outcome,
    Result,
    storage_error,
)
from currex.exchange.schema import CURRENCY_COLUMNS, CURRENCY_TABLE
from currex.exchange.validation import (
    canonical_code,
    is_storable,
    is_valid_code,
    is_valid_rate,
)

logger = logging.getLogger(__name__)

SAVEPOINT = "currency_op"


class CurrencyStore:
    """Guarded insert/update/delete/select against CurrencyExchange.

    Runs inside the caller's transaction; each operation gets its own
    savepoint so a storage failure leaves no partial change behind.

    Every operation has a tagged form returning a Result (``try_add``,
    ``lookup``, ...) and a plain form returning ``bool`` or
    ``CurrencyRecord | None``. The plain forms cannot tell invalid input
    from a storage failure; use the tagged forms when that matters.
    """

    def __init__(self, service: DatabaseService):
        self._service = service

    @property
    def service(self) -> DatabaseService:
        return self._service

    # -- tagged operations -------------------------------------------------

    def lookup(self, code: str) -> Result:
        """Find the record for a code. No length check is applied."""
        if not isinstance(code, str):
            return INVALID_INPUT
        if not is_storable(code):
            return NOT_FOUND
        canonical = canonical_code(code)

        def op() -> Result:
            record = self._find(canonical)
            if record is None:
                return NOT_FOUND
            return Result(Outcome.OK, value=record)

        return self._guarded("select", canonical, op)

    def try_add(self, code: str, rate: float) -> Result:
        if not (is_valid_code(code) and is_valid_rate(rate)):
            logger.debug("Rejected add of %r at rate %r", code, rate)
            return INVALID_INPUT
        canonical = canonical_code(code)

        def op() -> Result:
            if self._find(canonical) is not None:
                return ALREADY_EXISTS
            self._service.insert(CURRENCY_TABLE, CURRENCY_COLUMNS, [(canonical, float(rate))])
            return OK

        result = self._guarded("add", canonical, op)
        if result.ok:
            logger.info("Added currency %s at rate %s", canonical, rate)
        return result

    def try_remove(self, code: str) -> Result:
        if not is_valid_code(code):
            logger.debug("Rejected remove of %r", code)
            return INVALID_INPUT
        canonical = canonical_code(code)

        def op() -> Result:
            if self._find(canonical) is None:
                return NOT_FOUND
            self._execute(f"DELETE FROM {CURRENCY_TABLE} WHERE CurrencyCode = {{p}}", (canonical,))
            return OK

        result = self._guarded("remove", canonical, op)
        if result.ok:
            logger.info("Removed currency %s", canonical)
        return result

    def try_rename_code(self, old_code: str, new_code: str) -> Result:
        if not (is_valid_code(old_code) and is_valid_code(new_code)):
            logger.debug("Rejected rename of %r to %r", old_code, new_code)
            return INVALID_INPUT
        old, new = canonical_code(old_code), canonical_code(new_code)

        def op() -> Result:
            if self._find(old) is None:
                return NOT_FOUND
            if self._find(new) is not None:
                return ALREADY_EXISTS
            self._execute(
                f"UPDATE {CURRENCY_TABLE} SET CurrencyCode = {{p}} WHERE CurrencyCode = {{p}}",
                (new, old),
            )
            return OK

        result = self._guarded("rename", old, op)
        if result.ok:
            logger.info("Renamed currency %s to %s", old, new)
        return result

    def try_update_rate(self, code: str, new_rate: float) -> Result:
        if not (is_valid_code(code) and is_valid_rate(new_rate)):
            logger.debug("Rejected rate update of %r to %r", code, new_rate)
            return INVALID_INPUT
        canonical = canonical_code(code)

        def op() -> Result:
            if self._find(canonical) is None:
                return NOT_FOUND
            self._execute(
                f"UPDATE {CURRENCY_TABLE} SET ExchangeRate = {{p}} WHERE CurrencyCode = {{p}}",
                (float(new_rate), canonical),
            )
            return OK

        result = self._guarded("rate update", canonical, op)
        if result.ok:
            logger.info("Updated rate of %s to %s", canonical, new_rate)
        return result

    def try_clear(self) -> Result:
        """Delete every record. The result value is the number removed."""

        def op() -> Result:
            count = self._service.execute(f"SELECT COUNT(*) AS n FROM {CURRENCY_TABLE}")[0]["n"]
            self._service.execute(f"DELETE FROM {CURRENCY_TABLE}")
            return Result(Outcome.OK, value=count)

        result = self._guarded("clear", None, op)
        if result.ok:
            logger.info("Cleared %d currencies", result.value)
        return result

    def try_records(self) -> Result:
        """All live records ordered by code."""

        def op() -> Result:
            rows = self._service.execute(
                f"SELECT CurrencyCode AS code, ExchangeRate AS rate "
                f"FROM {CURRENCY_TABLE} ORDER BY CurrencyCode"
            )
            return Result(Outcome.OK, value=[_to_record(row) for row in rows])

        return self._guarded("list", None, op)

    # -- boolean / optional view -------------------------------------------

    def select(self, code: str) -> CurrencyRecord | None:
        result = self.lookup(code)
        return result.value if result.ok else None

    def exists(self, code: str) -> bool:
        return self.lookup(code).ok

    def add(self, code: str, rate: float) -> bool:
        return self.try_add(code, rate).ok

    def remove(self, code: str) -> bool:
        return self.try_remove(code).ok

    def rename_code(self, old_code: str, new_code: str) -> bool:
        return self.try_rename_code(old_code, new_code).ok

    def update_rate(self, code: str, new_rate: float) -> bool:
        return self.try_update_rate(code, new_rate).ok

    def clear(self) -> bool:
        return self.try_clear().ok

    def records(self) -> list[CurrencyRecord]:
        result = self.try_records()
        return result.value if result.ok else []

    # -- internals ---------------------------------------------------------

    def _execute(self, sql: str, params: tuple) -> list[dict]:
        return self._service.execute(sql.format(p=self._service.placeholder), params)

    def _find(self, canonical: str) -> CurrencyRecord | None:
        rows = self._execute(
            f"SELECT CurrencyCode AS code, ExchangeRate AS rate "
            f"FROM {CURRENCY_TABLE} WHERE CurrencyCode = {{p}}",
            (canonical,),
        )
        return _to_record(rows[0]) if rows else None

    def _guarded(self, action: str, code: str | None, op: Callable[[], Result]) -> Result:
        try:
            with self._service.savepoint(SAVEPOINT):
                return op()
        except self._service.errors as e:
            logger.error("Storage failure during %s of %s: %s", action, code or "*", e)
            return storage_error(e)


def _to_record(row: dict) -> CurrencyRecord:
    return CurrencyRecord(code=row["code"], rate=float(row["rate"]))
