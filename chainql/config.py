"""Rendering configuration.

``QueryConfig`` collects the two behaviours that differ between callers:
how embedded single quotes in text values are treated, and whether a
``DELETE`` without conditions is allowed.  One config is shared by a
:class:`~chainql.query.model.TableModel` and every chain it creates.

Example::

    legacy = QueryConfig(escape_quotes=False)
    users = UserModel(connection, config=legacy)
    users.new_query().where({"name": "O'Brien"}).to_sql()
    # SELECT users.* FROM users WHERE name = 'O'Brien';
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class QueryConfig:
    """Rendering options applied to every statement.

    Attributes:
        escape_quotes: If ``True`` (default), single quotes inside text values
            are doubled, which is standard SQL escaping.  If ``False``, text is
            wrapped in quotes verbatim and a value containing ``'`` produces
            invalid SQL.
        allow_unfiltered_delete: If ``False`` (default), ``delete_where({})``
            raises :class:`~chainql.errors.EmptyConditionError`.  If ``True``,
            it renders ``DELETE FROM <table>;`` and removes every row.
    """

    escape_quotes: bool = True
    allow_unfiltered_delete: bool = False


#: Shared default instance; ``QueryConfig`` is immutable.
DEFAULT_CONFIG = QueryConfig()
