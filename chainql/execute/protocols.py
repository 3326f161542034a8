"""Protocol interfaces for the I/O boundary.

chainQL never opens, pools or closes connections.  It talks to whatever
object the caller injects through these protocols, which keeps the builder
testable with in-memory fakes and lets any driver be plugged in.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable


@dataclass(frozen=True)
class StatementResult:
    """Outcome of a write statement.

    Attributes:
        affected_count: Number of rows the statement changed.  Drivers that
            cannot tell report ``-1``.
    """

    affected_count: int


@runtime_checkable
class Connection(Protocol):
    """Sends SQL text to a database.

    Both methods may raise; chainQL logs and re-raises whatever they throw.
    """

    def run_query(self, sql: str) -> Sequence[Any]:
        """Run a read statement.

        Args:
            sql: Complete SQL text ending in ``;``.

        Returns:
            The result rows, in database order.
        """
        ...

    def run_statement(self, sql: str) -> StatementResult:
        """Run a write statement.

        Args:
            sql: Complete SQL text ending in ``;``.

        Returns:
            The number of affected rows.
        """
        ...


@runtime_checkable
class EqualityLookup(Protocol):
    """Finds rows whose fields equal the given literals.

    Values arrive already coerced to SQL literal text (``"'Mike'"``, ``"25"``)
    and must be used verbatim.
    """

    def find_by(self, table: str, literals: Mapping[str, str]) -> Sequence[Any]:
        """Return the rows of ``table`` matching every ``field = literal``.

        An empty mapping matches every row.
        """
        ...
