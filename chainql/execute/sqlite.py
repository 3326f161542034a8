"""sqlite3 connection wrapper."""

from __future__ import annotations

import sqlite3
from typing import Any

from chainql.execute.protocols import StatementResult


class SQLiteConnection:
    """Adapts a :class:`sqlite3.Connection` to the chainQL ``Connection`` protocol.

    Rows come back as plain dicts keyed by column name, whatever
    ``row_factory`` the wrapped connection uses.  No ``COMMIT`` is issued:
    transaction scope stays with the owner of the sqlite3 connection.

    Usage::

        conn = sqlite3.connect("app.db")
        users = UserModel(SQLiteConnection(conn))
        users.delete_where({"id": 1})
        conn.commit()
    """

    def __init__(self, connection: sqlite3.Connection) -> None:
        self._connection = connection

    @property
    def raw(self) -> sqlite3.Connection:
        """The wrapped sqlite3 connection."""
        return self._connection

    def run_query(self, sql: str) -> list[dict[str, Any]]:
        cursor = self._connection.execute(sql)
        try:
            columns = [column[0] for column in cursor.description or ()]
            return [dict(zip(columns, row)) for row in cursor.fetchall()]
        finally:
            cursor.close()

    def run_statement(self, sql: str) -> StatementResult:
        cursor = self._connection.execute(sql)
        try:
            return StatementResult(affected_count=cursor.rowcount)
        finally:
            cursor.close()
