"""Pydantic models for the state accumulated by a query chain.

``QueryState`` is the single record a :class:`~chainql.query.chain.QueryChain`
mutates and the renderer reads.  Every list keeps insertion order, which is
also rendering order.  Only ``limit`` and ``offset`` are ever overwritten.
"""
from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from chainql.schema.conditions import Condition

JoinType = Literal["INNER", "LEFT", "RIGHT"]
SortDirection = Literal["ASC", "DESC"]


class JoinClause(BaseModel):
    """A single JOIN entry.

    The ON condition is raw caller text and is rendered verbatim.

    Attributes:
        type: SQL join type.
        table: Joined table name.
        condition: Boolean ON expression, e.g. ``users.id = orders.user_id``.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    type: JoinType = "INNER"
    table: str
    condition: str


class OrderByItem(BaseModel):
    """A single ORDER BY key.

    Attributes:
        field: Field expression to sort on.
        direction: Sort direction.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    field: str
    direction: SortDirection = "ASC"

    def __str__(self) -> str:
        return f"{self.field} {self.direction}"


class QueryState(BaseModel):
    """Everything a query chain has accumulated so far.

    Attributes:
        table: Target relation; fixed at construction.
        projection: Field expressions for SELECT; empty means ``<table>.*``.
        joins: JOIN entries in call order.
        filters: WHERE fragments, ANDed in call order.
        group_by: GROUP BY expressions in call order.
        order_by: ORDER BY keys in call order.
        limit: Maximum number of rows, or ``None``.
        offset: Rows to skip, or ``None``.
    """

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    table: str = Field(frozen=True)
    projection: list[str] = Field(default_factory=list)
    joins: list[JoinClause] = Field(default_factory=list)
    filters: list[Condition] = Field(default_factory=list)
    group_by: list[str] = Field(default_factory=list)
    order_by: list[OrderByItem] = Field(default_factory=list)
    limit: int | None = Field(default=None, ge=0)
    offset: int | None = Field(default=None, ge=0)

    @property
    def default_projection(self) -> str:
        """The projection used when none was selected."""
        return f"{self.table}.*"
