"""Fluent query chain.

``QueryChain`` accumulates query intent through chained calls and renders it
to one SQL statement.  Every chaining method mutates this chain in place and
returns it, so a chain is built for one query and then discarded::

    rows = (
        users.new_query()
        .select("users.*", "orders.amount")
        .join("orders", "users.id = orders.user_id")
        .where({"users.name": "Mike"})
        .order_by("orders.amount", "DESC")
        .limit(10)
        .execute()
    )

A chain is not safe to share between threads.  Separate chains are fully
independent.

Raw text passed to :meth:`where_raw`, to :meth:`where` as a string, and to
the ``condition`` of the join methods is spliced into the statement verbatim.
Only mapping / :class:`~chainql.schema.conditions.Equality` values are
coerced and quoted.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from chainql.compile.renderer import SelectRenderer
from chainql.config import DEFAULT_CONFIG, QueryConfig
from chainql.execute.adapter import ExecutionAdapter
from chainql.schema.conditions import Equality, Raw, to_conditions
from chainql.schema.query_state import JoinClause, JoinType, OrderByItem, QueryState

WhereArg = Mapping[str, Any] | str | Equality | Raw | Sequence[Equality | Raw]


class QueryChain:
    """Builds one SELECT statement against ``table``.

    Usually obtained from :meth:`TableModel.new_query`; can also be created
    directly when only the SQL text is needed.

    Args:
        table: Target table; fixed for the life of the chain.
        adapter: Execution adapter used by :meth:`execute` and :meth:`first`.
            An unbound chain still renders.
        config: Rendering options.
    """

    def __init__(
        self,
        table: str,
        adapter: ExecutionAdapter | None = None,
        config: QueryConfig | None = None,
    ) -> None:
        self._state = QueryState(table=table)
        self._adapter = adapter or ExecutionAdapter()
        self._config = config or DEFAULT_CONFIG
        self._renderer = SelectRenderer(self._config)

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def table_name(self) -> str:
        return self._state.table

    @property
    def state(self) -> QueryState:
        """A deep copy of the accumulated state."""
        return self._state.model_copy(deep=True)

    # ------------------------------------------------------------------
    # Projection and joins
    # ------------------------------------------------------------------

    def select(self, *fields: str) -> QueryChain:
        """Add fields to the projection; repeated calls accumulate."""
        self._state.projection.extend(fields)
        return self

    def join(self, table: str, condition: str) -> QueryChain:
        """Add an ``INNER JOIN``."""
        return self._add_join("INNER", table, condition)

    def left_join(self, table: str, condition: str) -> QueryChain:
        """Add a ``LEFT JOIN``."""
        return self._add_join("LEFT", table, condition)

    def right_join(self, table: str, condition: str) -> QueryChain:
        """Add a ``RIGHT JOIN``."""
        return self._add_join("RIGHT", table, condition)

    def _add_join(self, join_type: JoinType, table: str, condition: str) -> QueryChain:
        self._state.joins.append(JoinClause(type=join_type, table=table, condition=condition))
        return self

    # ------------------------------------------------------------------
    # Filters
    # ------------------------------------------------------------------

    def where(self, condition: WhereArg) -> QueryChain:
        """Add one or more filter fragments, ANDed with existing ones.

        * mapping: one ``field = value`` fragment per entry; text values are
          quoted, numbers and booleans are not.  ``{}`` adds nothing.
        * ``str``: one raw fragment, inserted verbatim.
        * :class:`Equality` / :class:`Raw`, or a list of them.

        Raises:
            CoercionError: If a mapping value has no SQL literal form.
        """
        self._state.filters.extend(to_conditions(condition))
        return self

    def where_raw(self, text: str) -> QueryChain:
        """Add ``text`` verbatim as one filter fragment.

        No escaping or validation is applied.
        """
        self._state.filters.append(Raw(text=text))
        return self

    # ------------------------------------------------------------------
    # Grouping, ordering and paging
    # ------------------------------------------------------------------

    def group_by(self, *fields: str) -> QueryChain:
        """Add GROUP BY expressions; repeated calls accumulate."""
        self._state.group_by.extend(fields)
        return self

    def order_by(self, field: str, direction: str = "ASC") -> QueryChain:
        """Add a sort key.

        Args:
            field: Field expression.
            direction: ``"ASC"`` or ``"DESC"`` (case-insensitive).

        Raises:
            ValueError: For any other direction.
        """
        self._state.order_by.append(OrderByItem(field=field, direction=direction.upper()))
        return self

    def limit(self, limit: int) -> QueryChain:
        """Set the row limit, replacing any earlier value.

        Raises:
            ValueError: If ``limit`` is negative.
        """
        self._state.limit = limit
        return self

    def offset(self, offset: int) -> QueryChain:
        """Set the row offset, replacing any earlier value.

        Raises:
            ValueError: If ``offset`` is negative.
        """
        self._state.offset = offset
        return self

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def build_query(self) -> str:
        """Render the accumulated state to SQL; never mutates the chain."""
        return self._renderer.render(self._state)

    def to_sql(self) -> str:
        """Alias of :meth:`build_query`, handy when debugging."""
        return self.build_query()

    def __str__(self) -> str:
        return self.build_query()

    def __repr__(self) -> str:
        return f"<QueryChain table={self.table_name!r} sql={self.build_query()!r}>"

    # ------------------------------------------------------------------
    # Execution
    # ------------------------------------------------------------------

    def execute(self) -> Sequence[Any]:
        """Render and run the query; return whatever rows the connection returns.

        Raises:
            ConnectionNotBoundError: If the chain has no connection.
            Exception: Any error from the connection, unchanged.
        """
        return self._adapter.query(self.build_query())

    def first(self) -> Any | None:
        """Run the query with ``LIMIT 1`` and return the first row or ``None``.

        Any earlier limit is overwritten.
        """
        self.limit(1)
        return next(iter(self.execute()), None)
