"""Table-mapped entities and their static query helpers.

A model names one table and is bound, by composition, to the capabilities it
needs: a :class:`~chainql.execute.protocols.Connection` for statements and an
:class:`~chainql.execute.protocols.EqualityLookup` for structured finds.
Nothing is global; two models bound to different connections never
interfere.

Example::

    class UserModel(TableModel):
        table_name = "users"

    users = UserModel(SQLiteConnection(conn))
    users.structured_where({"name": "Mike"})      # rows
    users.delete_where({"id": 1})                 # StatementResult
    users.new_query().where({"age": 25}).first()  # row or None
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, ClassVar

from chainql.compile.coercion import coerce_mapping
from chainql.compile.renderer import DeleteRenderer, SelectRenderer
from chainql.config import DEFAULT_CONFIG, QueryConfig
from chainql.errors import ModelConfigError
from chainql.execute.adapter import ExecutionAdapter
from chainql.execute.protocols import Connection, EqualityLookup, StatementResult
from chainql.query.chain import QueryChain
from chainql.schema.conditions import Raw
from chainql.schema.query_state import QueryState


class ConnectionLookup:
    """Default :class:`EqualityLookup` that queries through an adapter.

    Renders ``SELECT * FROM <table> WHERE <f1> = <lit1> AND ...;`` using the
    literals exactly as given.

    Args:
        adapter: Adapter used to run the lookup.
    """

    def __init__(self, adapter: ExecutionAdapter) -> None:
        self._adapter = adapter
        self._renderer = SelectRenderer()

    def find_by(self, table: str, literals: Mapping[str, str]) -> Sequence[Any]:
        state = QueryState(
            table=table,
            projection=["*"],
            filters=[Raw(text=f"{field} = {literal}") for field, literal in literals.items()],
        )
        return self._adapter.query(self._renderer.render(state))


class TableModel:
    """Base class for table-mapped entities.

    Subclasses set :attr:`table_name`.  Instances carry the injected
    connection, lookup and config used by every helper and chain.

    Args:
        connection: Connection for statements; ``None`` gives a model that can
            only render SQL.
        lookup: Equality-lookup capability for :meth:`structured_where`.
            Defaults to :class:`ConnectionLookup` over ``connection``.
        config: Rendering options shared by all chains of this model.

    Raises:
        ModelConfigError: If the subclass does not define ``table_name``.
    """

    table_name: ClassVar[str] = ""

    def __init__(
        self,
        connection: Connection | None = None,
        *,
        lookup: EqualityLookup | None = None,
        config: QueryConfig | None = None,
    ) -> None:
        if not self.table_name:
            raise ModelConfigError(
                f"{type(self).__name__} must define a non-empty 'table_name'.",
                model=type(self).__name__,
            )
        self._config = config or DEFAULT_CONFIG
        self._adapter = ExecutionAdapter(connection)
        self._lookup = lookup or ConnectionLookup(self._adapter)

    @property
    def config(self) -> QueryConfig:
        return self._config

    @property
    def adapter(self) -> ExecutionAdapter:
        return self._adapter

    def new_query(self) -> QueryChain:
        """Start a fresh query chain on this model's table."""
        return QueryChain(self.table_name, adapter=self._adapter, config=self._config)

    def structured_where(self, conditions: Mapping[str, Any]) -> Sequence[Any]:
        """Find rows whose fields equal the given values.

        Every value is coerced to literal text first (text quoted, numbers
        and booleans bare); the lookup receives the coerced mapping.  The
        caller's mapping is never modified.  ``{}`` matches every row.

        Raises:
            CoercionError: If a value has no SQL literal form.
        """
        literals = coerce_mapping(conditions, self._config.escape_quotes)
        return self._lookup.find_by(self.table_name, literals)

    def delete_where(self, conditions: Mapping[str, Any]) -> StatementResult:
        """Delete rows whose fields equal the given values.

        Renders ``DELETE FROM <table> WHERE f1 = v1 AND ...;`` directly,
        without a query chain, and runs it as a write statement.

        Raises:
            CoercionError: If a value has no SQL literal form.
            EmptyConditionError: If ``conditions`` is empty and
                ``allow_unfiltered_delete`` is off.
            ConnectionNotBoundError: If the model has no connection.
        """
        sql = DeleteRenderer(self._config).render(self.table_name, conditions)
        return self._adapter.statement(sql)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} table={self.table_name!r}>"
