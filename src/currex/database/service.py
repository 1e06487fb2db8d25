"""Abstract DatabaseService interface."""

import threading
from abc import ABC, abstractmethod
from contextlib import contextmanager
from queue import Empty, Queue
from typing import Any, Iterator

from currex.database.types import Params, ParamsList, Row


class DatabaseService(ABC):
    """Database-agnostic interface for all DB operations.

    Design principles:
    - Explicit: no module-level connection, callers pass the service around
    - Scoped: every transaction() borrows a pooled connection and returns it
    - DB-agnostic: callers program against this ABC, never a concrete backend

    Backends supply ``_open`` plus the statement methods; pooling and the
    transaction boundary live here.
    """

    #: Dialect name, used to pick dialect-specific DDL.
    dialect: str = ""
    #: Positional parameter marker for this backend's driver.
    placeholder: str = "?"
    #: Driver exceptions that count as storage failures.
    errors: tuple[type[Exception], ...] = ()

    def __init__(self, target: str, pool_size: int = 1):
        self._target = target
        self._pool_size = pool_size
        self._pool: Queue = Queue(maxsize=pool_size)
        self._local = threading.local()

    @abstractmethod
    def _open(self) -> Any:
        """Open one driver connection, not yet inside a transaction."""

    def _begin(self, conn: Any) -> None:
        """Start a transaction on ``conn``; drivers that begin implicitly skip this."""

    def connect(self) -> None:
        """Fill the connection pool."""
        for _ in range(self._pool_size):
            self._pool.put(self._open())

    def close(self) -> None:
        """Close all pooled connections."""
        while True:
            try:
                self._pool.get_nowait().close()
            except Empty:
                break

    @contextmanager
    def _borrow(self) -> Iterator[Any]:
        conn = self._pool.get(timeout=30)
        try:
            yield conn
        finally:
            self._pool.put(conn)

    def _active(self) -> Any:
        conn = getattr(self._local, "conn", None)
        if conn is None:
            raise RuntimeError(
                "No active transaction. Wrap calls in a `with service.transaction():` block."
            )
        return conn

    @contextmanager
    def transaction(self, commit: bool = True) -> Iterator[None]:
        """Bind a pooled connection to this thread for one unit of work.

        A clean exit commits, or rolls back with ``commit=False``; an
        exception rolls back and propagates.
        """
        with self._borrow() as conn:
            self._local.conn = conn
            try:
                self._begin(conn)
                yield
                if commit:
                    conn.commit()
                else:
                    conn.rollback()
            except Exception:
                conn.rollback()
                raise
            finally:
                self._local.conn = None

    @contextmanager
    def savepoint(self, name: str) -> Iterator[None]:
        """Nested unit inside the active transaction.

        Rolls back to the savepoint and re-raises if the block fails, leaving
        the enclosing transaction usable.
        """
        self.execute(f"SAVEPOINT {name}")
        try:
            yield
        except Exception:
            self.execute(f"ROLLBACK TO SAVEPOINT {name}")
            self.execute(f"RELEASE SAVEPOINT {name}")
            raise
        self.execute(f"RELEASE SAVEPOINT {name}")

    @abstractmethod
    def execute(self, sql: str, params: Params | None = None) -> list[Row]:
        """Execute a single SQL statement and return rows as dicts."""

    @abstractmethod
    def execute_many(self, sql: str, params_list: ParamsList) -> None:
        """Execute a SQL statement for each parameter set."""

    @abstractmethod
    def execute_ddl(self, sql: str) -> None:
        """Execute DDL statements outside any transaction and persist them."""

    def insert(self, table: str, columns: list[str], rows: list[tuple]) -> None:
        """Insert multiple rows into a table."""
        if not rows:
            return
        cols = ", ".join(columns)
        placeholders = ", ".join(self.placeholder for _ in columns)
        self.execute_many(f"INSERT INTO {table} ({cols}) VALUES ({placeholders})", rows)
