"""chainQL schema models: QueryState, JoinClause, OrderByItem, conditions."""
from chainql.schema.conditions import (
    CONDITION_ADAPTER,
    Condition,
    Equality,
    Raw,
    equalities,
    to_conditions,
)
from chainql.schema.query_state import (
    JoinClause,
    JoinType,
    OrderByItem,
    QueryState,
    SortDirection,
)

__all__ = [
    "CONDITION_ADAPTER",
    "Condition",
    "Equality",
    "Raw",
    "equalities",
    "to_conditions",
    "JoinClause",
    "JoinType",
    "OrderByItem",
    "QueryState",
    "SortDirection",
]
