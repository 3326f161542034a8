"""Custom exception hierarchy for chainQL.

All public errors inherit from ChainQLError so callers can catch the base
class for any chainQL-specific failure.  Errors raised by a database
connection are never wrapped; they reach the caller unchanged.
"""
from __future__ import annotations

from typing import Any


class ChainQLError(Exception):
    """Base exception for all chainQL errors."""


class CoercionError(ChainQLError, TypeError):
    """Raised when a value has no SQL literal form.

    Only text, numbers and booleans are coerced.  Anything else (``None``,
    dates, lists, ...) must be pre-formatted by the caller.

    Args:
        value: The offending value.
        field: The field the value was bound to, when known.
    """

    def __init__(self, value: Any, field: str | None = None) -> None:
        target = f" for field '{field}'" if field else ""
        super().__init__(
            f"Cannot coerce {type(value).__name__} value {value!r}{target} "
            "to a SQL literal; pass str, int, float, Decimal or bool."
        )
        self.value = value
        self.field = field


class EmptyConditionError(ChainQLError, ValueError):
    """Raised when a DELETE would run without any predicate.

    Enable ``QueryConfig.allow_unfiltered_delete`` to delete every row
    instead.

    Args:
        table: The table the statement targeted.
    """

    def __init__(self, table: str) -> None:
        super().__init__(
            f"Refusing to delete from '{table}' without conditions. "
            "Pass at least one field or set allow_unfiltered_delete=True."
        )
        self.table = table


class ConnectionNotBoundError(ChainQLError):
    """Raised when a statement is executed without a connection.

    Args:
        sql: The statement that could not be sent.
    """

    def __init__(self, sql: str) -> None:
        super().__init__(
            "No connection is bound to this query; construct the model with "
            "a connection before calling execute() or first()."
        )
        self.sql = sql


class ModelConfigError(ChainQLError):
    """Raised when a TableModel subclass is misconfigured.

    Args:
        message: Human-readable description.
        model: Name of the offending class.
    """

    def __init__(self, message: str, model: str | None = None) -> None:
        super().__init__(message)
        self.model = model
