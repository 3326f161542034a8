"""chainQL walk-through against an in-memory SQLite database.

Seeds the sample schema from ``tests/fixtures/ddl_sqlite.sql`` and runs the
find / query-chain / delete flow, printing each statement before its rows.

Usage::

    python examples/demo.py          # statements and rows
    python examples/demo.py -v       # plus DEBUG logging from the adapter
"""
from __future__ import annotations

import argparse
import contextlib
import logging
import sqlite3
import sys
from pathlib import Path

# ---------------------------------------------------------------------------
# Adjust sys.path so the package is importable when run as a script
# ---------------------------------------------------------------------------
_REPO_ROOT = Path(__file__).resolve().parent.parent
if str(_REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(_REPO_ROOT))

from chainql import ChainQLError, SQLiteConnection, TableModel

_DDL_PATH = _REPO_ROOT / "tests" / "fixtures" / "ddl_sqlite.sql"


class UserModel(TableModel):
    table_name = "users"


def make_sqlite_conn() -> sqlite3.Connection:
    """Return an in-memory connection seeded with the sample data."""
    conn = sqlite3.connect(":memory:")
    conn.executescript(_DDL_PATH.read_text())
    return conn


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("-v", "--verbose", action="store_true", help="log every statement")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    with contextlib.closing(make_sqlite_conn()) as conn:
        users = UserModel(SQLiteConnection(conn))

        found = users.structured_where({"name": "John Doe"})
        print(f"Found: {found[0]['name']} (id={found[0]['id']})")

        query = (
            users.new_query()
            .select("users.name", "COUNT(orders.id) as order_count", "SUM(orders.amount) as total")
            .left_join("orders", "users.id = orders.user_id")
            .where({"users.active": True})
            .group_by("users.id")
            .order_by("total", "DESC")
            .limit(3)
        )
        print(f"\n{query.to_sql()}")
        for row in query.execute():
            print(f"  {row['name']:<12} orders={row['order_count']} total={row['total']}")

        newest = users.new_query().order_by("id", "DESC").first()
        print(f"\nNewest user: {newest['name']}")

        try:
            result = users.delete_where({"name": "Eve"})
            conn.commit()
            print(f"Deleted {result.affected_count} user(s).")
            users.delete_where({})
        except ChainQLError as exc:
            print(f"Refused: {exc}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
