"""chainQL execution layer: connection protocols and adapters."""
from chainql.execute.adapter import ExecutionAdapter
from chainql.execute.protocols import Connection, EqualityLookup, StatementResult
from chainql.execute.sqlite import SQLiteConnection

__all__ = [
    "Connection",
    "EqualityLookup",
    "ExecutionAdapter",
    "SQLiteConnection",
    "StatementResult",
]
