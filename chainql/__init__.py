"""chainQL – a fluent SQL statement builder.

Chain the query, render the text.

Public API
----------
``TableModel``
    Base class for table-mapped entities.  ``new_query()`` starts a chain;
    ``structured_where()`` and ``delete_where()`` are the shorthand helpers.

``QueryChain``
    The per-query builder: ``select``, ``join`` / ``left_join`` /
    ``right_join``, ``where`` / ``where_raw``, ``group_by``, ``order_by``,
    ``limit``, ``offset``, then ``to_sql()``, ``execute()`` or ``first()``.

``coerce_literal``
    The single value → SQL literal rule shared by every path.

Connections
-----------
Any object with ``run_query(sql)`` and ``run_statement(sql)`` satisfies the
``Connection`` protocol.  ``SQLiteConnection`` wraps ``sqlite3``;
``chainql.execute.sqlalchemy.SQLAlchemyConnection`` wraps an engine (install
``chainql[sqlalchemy]``).

Example::

    class UserModel(chainql.TableModel):
        table_name = "users"

    users = UserModel(chainql.SQLiteConnection(sqlite3.connect("app.db")))
    sql = (
        users.new_query()
        .select("users.*", "orders.amount")
        .join("orders", "users.id = orders.user_id")
        .where({"users.name": "Mike"})
        .order_by("orders.amount", "DESC")
        .limit(10)
        .to_sql()
    )
"""

from __future__ import annotations

from chainql.compile.coercion import coerce_literal, coerce_mapping
from chainql.compile.renderer import DeleteRenderer, SelectRenderer
from chainql.config import DEFAULT_CONFIG, QueryConfig
from chainql.errors import (
    ChainQLError,
    CoercionError,
    ConnectionNotBoundError,
    EmptyConditionError,
    ModelConfigError,
)
from chainql.execute.adapter import ExecutionAdapter
from chainql.execute.protocols import Connection, EqualityLookup, StatementResult
from chainql.execute.sqlite import SQLiteConnection
from chainql.query.chain import QueryChain
from chainql.query.model import ConnectionLookup, TableModel
from chainql.schema.conditions import Condition, Equality, Raw
from chainql.schema.query_state import JoinClause, OrderByItem, QueryState

__all__ = [
    # Entry points
    "TableModel",
    "QueryChain",
    # Conditions and state
    "Condition",
    "Equality",
    "Raw",
    "JoinClause",
    "OrderByItem",
    "QueryState",
    # Rendering
    "coerce_literal",
    "coerce_mapping",
    "SelectRenderer",
    "DeleteRenderer",
    # Configuration
    "QueryConfig",
    "DEFAULT_CONFIG",
    # Execution
    "Connection",
    "ConnectionLookup",
    "EqualityLookup",
    "ExecutionAdapter",
    "SQLiteConnection",
    "StatementResult",
    # Errors
    "ChainQLError",
    "CoercionError",
    "ConnectionNotBoundError",
    "EmptyConditionError",
    "ModelConfigError",
]
