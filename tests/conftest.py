"""Shared pytest fixtures for chainQL unit and integration tests."""
from __future__ import annotations

import sqlite3
from collections.abc import Iterator

import pytest

from chainql import SQLiteConnection
from tests.fixtures import FakeConnection, UserModel, load_ddl


@pytest.fixture()
def fake_conn() -> FakeConnection:
    """Recording connection returning no rows."""
    return FakeConnection()


@pytest.fixture()
def users(fake_conn: FakeConnection) -> UserModel:
    """``users`` model bound to the recording connection."""
    return UserModel(fake_conn)


@pytest.fixture()
def db() -> Iterator[sqlite3.Connection]:
    """In-memory SQLite database loaded with the sample schema and rows."""
    conn = sqlite3.connect(":memory:")
    conn.executescript(load_ddl())
    yield conn
    conn.close()


@pytest.fixture()
def sqlite_users(db: sqlite3.Connection) -> UserModel:
    """``users`` model bound to the in-memory SQLite database."""
    return UserModel(SQLiteConnection(db))
