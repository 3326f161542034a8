"""chainQL query layer: the fluent chain and table-mapped models."""
from chainql.query.chain import QueryChain
from chainql.query.model import ConnectionLookup, TableModel

__all__ = [
    "ConnectionLookup",
    "QueryChain",
    "TableModel",
]
