"""Clause-level SQL builders.

Each class handles exactly one SQL clause and returns its text without
surrounding whitespace.  None of them mutate the state they read.

Classes
-------
SelectClauseBuilder   — ``SELECT <projection | table.*>``
JoinClauseBuilder     — ``<type> JOIN <table> ON <condition>``
WhereClauseBuilder    — ``WHERE <f1> AND <f2> ...``
OrderByClauseBuilder  — ``ORDER BY <k1>, <k2> ...``
"""
from __future__ import annotations

from collections.abc import Sequence

from chainql.compile.coercion import coerce_literal
from chainql.config import QueryConfig
from chainql.schema.conditions import Equality, Raw
from chainql.schema.query_state import JoinClause, OrderByItem, QueryState


class SelectClauseBuilder:
    """Builds the ``SELECT …`` clause."""

    def build(self, state: QueryState) -> str:
        if not state.projection:
            return f"SELECT {state.default_projection}"
        return f"SELECT {', '.join(state.projection)}"


class JoinClauseBuilder:
    """Builds a single ``JOIN … ON …`` fragment.

    The ON condition is caller text and is emitted verbatim.
    """

    def build(self, join: JoinClause) -> str:
        return f"{join.type} JOIN {join.table} ON {join.condition}"


class WhereClauseBuilder:
    """Builds the ``WHERE`` clause from equality and raw fragments."""

    def __init__(self, config: QueryConfig) -> None:
        self._config = config

    def build(self, filters: Sequence[Equality | Raw]) -> str:
        return f"WHERE {' AND '.join(self.fragment(c) for c in filters)}"

    def fragment(self, condition: Equality | Raw) -> str:
        """Render one condition without the ``WHERE`` keyword."""
        if isinstance(condition, Raw):
            return condition.text
        literal = coerce_literal(
            condition.value, self._config.escape_quotes, field=condition.field
        )
        return f"{condition.field} = {literal}"


class OrderByClauseBuilder:
    """Builds the ``ORDER BY`` clause."""

    def build(self, items: Sequence[OrderByItem]) -> str:
        return f"ORDER BY {', '.join(str(item) for item in items)}"
