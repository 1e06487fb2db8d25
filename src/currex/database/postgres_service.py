"""PostgreSQL implementation of DatabaseService."""

import psycopg2
import psycopg2.extras

from currex.database.service import DatabaseService
from currex.database.types import Params, ParamsList, Row


class PostgresDatabaseService(DatabaseService):
    """PostgreSQL backend using psycopg2; transactions begin implicitly."""

    dialect = "postgresql"
    placeholder = "%s"
    errors = (psycopg2.Error,)

    def _open(self):
        conn = psycopg2.connect(self._target)
        conn.autocommit = False
        return conn

    def execute(self, sql: str, params: Params | None = None) -> list[Row]:
        with self._active().cursor(cursor_factory=psycopg2.extras.RealDictCursor) as cur:
            cur.execute(sql, params or ())
            if cur.description is None:
                return []
            return [dict(row) for row in cur.fetchall()]

    def execute_many(self, sql: str, params_list: ParamsList) -> None:
        with self._active().cursor() as cur:
            cur.executemany(sql, params_list)

    def execute_ddl(self, sql: str) -> None:
        with self._borrow() as conn:
            with conn.cursor() as cur:
                cur.execute(sql)
            conn.commit()
