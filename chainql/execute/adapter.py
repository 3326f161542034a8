"""Execution adapter: the seam between rendered SQL and a connection.

The adapter does no SQL parsing, no retries and no error translation.  Each
statement is logged at DEBUG; a failing statement is logged at ERROR together
with its text, and the original exception is re-raised unchanged.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence, Sized
from typing import Any

from chainql.errors import ConnectionNotBoundError
from chainql.execute.protocols import Connection, StatementResult

logger = logging.getLogger(__name__)


class ExecutionAdapter:
    """Runs SQL text through an injected :class:`Connection`.

    Args:
        connection: Any object implementing :class:`Connection`, or ``None``
            for an unbound adapter that refuses to execute.
    """

    def __init__(self, connection: Connection | None = None) -> None:
        self._connection = connection

    @property
    def connection(self) -> Connection | None:
        """The injected connection; referenced, never owned."""
        return self._connection

    @property
    def bound(self) -> bool:
        """True when a connection was supplied."""
        return self._connection is not None

    def query(self, sql: str) -> Sequence[Any]:
        """Run a read statement and return its rows.

        The rows are handed back exactly as the connection produced them, so a
        lazy iterable stays lazy.

        Raises:
            ConnectionNotBoundError: If no connection was supplied.
        """
        connection = self._require(sql)
        logger.debug("Executing query: %s", sql)
        try:
            rows = connection.run_query(sql)
        except Exception as exc:
            logger.error("Query failed: %s | SQL: %s", exc, sql)
            raise
        if isinstance(rows, Sized):
            logger.debug("Query returned %d rows.", len(rows))
        return rows

    def statement(self, sql: str) -> StatementResult:
        """Run a write statement and return its result.

        Raises:
            ConnectionNotBoundError: If no connection was supplied.
        """
        connection = self._require(sql)
        logger.debug("Executing statement: %s", sql)
        try:
            result = connection.run_statement(sql)
        except Exception as exc:
            logger.error("Statement failed: %s | SQL: %s", exc, sql)
            raise
        return result

    def _require(self, sql: str) -> Connection:
        if self._connection is None:
            raise ConnectionNotBoundError(sql)
        return self._connection
