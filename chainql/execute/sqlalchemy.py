"""SQLAlchemy engine wrapper.

Install the optional dependency before using this module::

    pip install "chainql[sqlalchemy]"

Example::

    from sqlalchemy import create_engine
    from chainql.execute.sqlalchemy import SQLAlchemyConnection

    engine = create_engine("postgresql+psycopg://user:pw@host/db")
    users = UserModel(SQLAlchemyConnection(engine))
    rows = users.new_query().where({"active": True}).limit(20).execute()

Statements are sent with :meth:`~sqlalchemy.engine.Connection.exec_driver_sql`
so SQLAlchemy does not parse ``:name`` sequences inside string literals as
bind parameters.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from chainql.execute.protocols import StatementResult

if TYPE_CHECKING:
    from sqlalchemy import Engine


class SQLAlchemyConnection:
    """Adapts a SQLAlchemy :class:`~sqlalchemy.engine.Engine` to ``Connection``.

    Reads run on a short-lived connection; writes run inside
    ``engine.begin()`` and are committed when the block exits.

    Args:
        engine: A configured engine; it is referenced, never disposed.

    Raises:
        ImportError: If ``sqlalchemy`` is not installed.
    """

    def __init__(self, engine: Engine) -> None:
        try:
            import sqlalchemy  # noqa: F401
        except ImportError as exc:
            raise ImportError(
                "SQLAlchemy is required for SQLAlchemyConnection. "
                'Install it with: pip install "chainql[sqlalchemy]"'
            ) from exc
        self._engine = engine

    @property
    def engine(self) -> Engine:
        return self._engine

    def run_query(self, sql: str) -> list[dict[str, Any]]:
        with self._engine.connect() as conn:
            result = conn.exec_driver_sql(sql)
            return [dict(row) for row in result.mappings()]

    def run_statement(self, sql: str) -> StatementResult:
        with self._engine.begin() as conn:
            result = conn.exec_driver_sql(sql)
            return StatementResult(affected_count=result.rowcount)
