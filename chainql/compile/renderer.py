"""QueryState → SQL text.

``SelectRenderer`` is the top-level orchestrator for SELECT statements.  It
wires together the clause-level builders and emits the clauses in a fixed
order, each one only when its backing state is non-empty::

    SELECT <projection | table.*>
    FROM <table>
    [<type> JOIN <table> ON <condition>]*
    [WHERE <f1> AND <f2> ...]
    [GROUP BY <g1>, <g2> ...]
    [ORDER BY <k1>, <k2> ...]
    [LIMIT <n>]
    [OFFSET <n>]
    ;

Clauses are separated by a single space and the statement ends with exactly
one semicolon.  Rendering is a pure function of the state: calling it any
number of times yields the same text and never changes the state.

``DeleteRenderer`` is a separate path for ``DELETE FROM … WHERE …`` that
works from a plain field → value mapping.  It shares the coercion rules but
not the query state.

``LIMIT`` / ``OFFSET`` are standard SQL tokens.  Dialects that page with
``TOP`` or ``FETCH FIRST`` need their own translation downstream.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from chainql.compile.clause_builders import (
    JoinClauseBuilder,
    OrderByClauseBuilder,
    SelectClauseBuilder,
    WhereClauseBuilder,
)
from chainql.config import DEFAULT_CONFIG, QueryConfig
from chainql.errors import EmptyConditionError
from chainql.schema.conditions import equalities
from chainql.schema.query_state import QueryState


class SelectRenderer:
    """Renders a :class:`QueryState` to a single SELECT statement.

    Args:
        config: Rendering options; defaults to :data:`DEFAULT_CONFIG`.
    """

    def __init__(self, config: QueryConfig | None = None) -> None:
        self._config = config or DEFAULT_CONFIG
        self._select = SelectClauseBuilder()
        self._join = JoinClauseBuilder()
        self._where = WhereClauseBuilder(self._config)
        self._order_by = OrderByClauseBuilder()

    def render(self, state: QueryState) -> str:
        """Return the SQL text for ``state``."""
        parts: list[str] = [self._select.build(state), f"FROM {state.table}"]

        for join in state.joins:
            parts.append(self._join.build(join))

        if state.filters:
            parts.append(self._where.build(state.filters))

        if state.group_by:
            parts.append(f"GROUP BY {', '.join(state.group_by)}")

        if state.order_by:
            parts.append(self._order_by.build(state.order_by))

        if state.limit is not None:
            parts.append(f"LIMIT {state.limit}")

        if state.offset is not None:
            parts.append(f"OFFSET {state.offset}")

        return " ".join(parts) + ";"


class DeleteRenderer:
    """Renders ``DELETE FROM <table> WHERE <f1> = <v1> AND …;``.

    Args:
        config: Rendering options; ``allow_unfiltered_delete`` decides what
            an empty mapping does.
    """

    def __init__(self, config: QueryConfig | None = None) -> None:
        self._config = config or DEFAULT_CONFIG
        self._where = WhereClauseBuilder(self._config)

    def render(self, table: str, conditions: Mapping[str, Any]) -> str:
        """Return the DELETE statement for ``conditions``.

        Raises:
            CoercionError: If a value has no SQL literal form.
            EmptyConditionError: If ``conditions`` is empty and unfiltered
                deletes are not allowed.
        """
        if not conditions:
            if not self._config.allow_unfiltered_delete:
                raise EmptyConditionError(table)
            return f"DELETE FROM {table};"
        return f"DELETE FROM {table} {self._where.build(equalities(conditions))};"
