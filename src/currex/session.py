"""Scoped acquisition of a CurrencyStore."""

import logging
from contextlib import contextmanager
from typing import Iterator

from currex.config import database_url
from currex.database import create_service
from currex.exchange.schema import ensure_schema
from currex.exchange.store import CurrencyStore

logger = logging.getLogger(__name__)


@contextmanager
def open_store(
    db_url: str | None = None, *, commit: bool = True, pool_size: int = 1
) -> Iterator[CurrencyStore]:
    """Open a unit of work against the currency table.

    Connects, ensures the schema and yields a store bound to one
    transaction. A clean exit commits (rolls back with ``commit=False``), an
    exception rolls back; the service is closed on every path.
    """
    service = create_service(db_url or database_url(), pool_size)
    service.connect()
    try:
        ensure_schema(service)
        with service.transaction(commit=commit):
            yield CurrencyStore(service)
        logger.debug("Unit of work %s", "committed" if commit else "rolled back")
    finally:
        service.close()
