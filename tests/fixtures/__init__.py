"""Test fixtures: sample DDL and an in-memory recording connection."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from pathlib import Path
from typing import Any

from chainql import StatementResult, TableModel

_FIXTURES_DIR = Path(__file__).parent


def load_ddl() -> str:
    """Return the sample SQLite DDL (users, orders, products)."""
    return (_FIXTURES_DIR / "ddl_sqlite.sql").read_text()


class UserModel(TableModel):
    table_name = "users"


class OrderModel(TableModel):
    table_name = "orders"


class FakeConnection:
    """Records every statement and answers with canned results.

    Attributes:
        queries: SQL passed to ``run_query`` in call order.
        statements: SQL passed to ``run_statement`` in call order.
        rows: Rows returned by every ``run_query`` call.
        affected: ``affected_count`` returned by every ``run_statement`` call.
        error: When set, both methods raise this exception.
    """

    def __init__(
        self,
        rows: Sequence[Any] | None = None,
        affected: int = 1,
        error: Exception | None = None,
    ) -> None:
        self.queries: list[str] = []
        self.statements: list[str] = []
        self.rows = list(rows or [])
        self.affected = affected
        self.error = error

    def run_query(self, sql: str) -> list[Any]:
        self.queries.append(sql)
        if self.error is not None:
            raise self.error
        return self.rows

    def run_statement(self, sql: str) -> StatementResult:
        self.statements.append(sql)
        if self.error is not None:
            raise self.error
        return StatementResult(affected_count=self.affected)


class LazyConnection(FakeConnection):
    """Like :class:`FakeConnection` but yields rows from a generator."""

    def run_query(self, sql: str) -> Iterator[Any]:  # type: ignore[override]
        rows = super().run_query(sql)
        return (row for row in rows)


class RecordingLookup:
    """EqualityLookup double that remembers what it was asked."""

    def __init__(self, rows: Sequence[Any] | None = None) -> None:
        self.calls: list[tuple[str, dict[str, str]]] = []
        self.rows = list(rows or [])

    def find_by(self, table: str, literals) -> list[Any]:
        self.calls.append((table, dict(literals)))
        return self.rows
