"""SQLite implementation of DatabaseService."""

import sqlite3

from currex.database.service import DatabaseService
from currex.database.types import Params, ParamsList, Row


class SQLiteDatabaseService(DatabaseService):
    """SQLite backend using stdlib sqlite3.

    Connections run in driver autocommit mode and ``_begin`` issues BEGIN,
    so savepoints nest inside the transaction instead of committing it.
    """

    dialect = "sqlite"
    placeholder = "?"
    errors = (sqlite3.Error,)

    def _open(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self._target, check_same_thread=False, isolation_level=None)
        if self._target != ":memory:":
            conn.execute("PRAGMA journal_mode=WAL")
        conn.execute("PRAGMA foreign_keys=ON")
        return conn

    def _begin(self, conn: sqlite3.Connection) -> None:
        conn.execute("BEGIN")

    def execute(self, sql: str, params: Params | None = None) -> list[Row]:
        cursor = self._active().execute(sql, params or ())
        if cursor.description is None:
            return []
        columns = [desc[0] for desc in cursor.description]
        return [dict(zip(columns, row)) for row in cursor.fetchall()]

    def execute_many(self, sql: str, params_list: ParamsList) -> None:
        self._active().executemany(sql, params_list)

    def execute_ddl(self, sql: str) -> None:
        with self._borrow() as conn:
            conn.executescript(sql)
