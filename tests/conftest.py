"""Shared test fixtures."""

from types import MappingProxyType

import pytest
import pytest_asyncio

from sqlsnap.db import registry
from sqlsnap.db.sqlite_backend import SQLiteConnector
from sqlsnap.errors import BackendConnectionError, QueryError
from sqlsnap.models.request import Credentials
from sqlsnap.models.result import QueryResult


class FakeCursor:
    """In-memory Cursor with fixed columns and records.

    ``fail_after`` makes fetchone raise once that many records were read.
    """

    def __init__(self, columns, records, *, fail_after=None, fail_columns=False):
        self._columns = columns
        self._records = list(records)
        self._fail_after = fail_after
        self._fail_columns = fail_columns
        self.closed = False

    @property
    def columns(self):
        if self._fail_columns:
            raise RuntimeError("no metadata")
        return self._columns

    async def fetchone(self):
        if self._fail_after is not None:
            if self._fail_after == 0:
                raise RuntimeError("connection reset")
            self._fail_after -= 1
        return self._records.pop(0) if self._records else None

    async def close(self):
        self.closed = True


class RecordingConnector:
    """Connector double that logs its lifecycle into ``calls``."""

    calls: list[str] = []
    fail_connect = False
    fail_query = False
    fail_close = False

    async def connect(self, credentials):
        self.calls.append("connect")
        if self.fail_connect:
            raise BackendConnectionError("Failed to connect: refused")

    async def query(self, query):
        self.calls.append(f"query:{query}")
        if self.fail_query:
            raise QueryError("Query failed: boom")
        return QueryResult(columns=["n"], rows=[[1]])

    async def query_with_pagination(self, query, limit=None, offset=None):
        self.calls.append(f"paginate:{query}:{limit}:{offset}")
        return QueryResult(columns=["n"], rows=[[1]])

    async def close(self):
        self.calls.append("close")
        if self.fail_close:
            raise RuntimeError("close failed")


@pytest.fixture
def recording_connector(monkeypatch):
    """Register a fresh RecordingConnector subclass as backend ``fake``."""

    class Connector(RecordingConnector):
        calls: list[str] = []

    monkeypatch.setattr(registry, "CONNECTORS", MappingProxyType({"fake": Connector}))
    return Connector


@pytest.fixture
def sqlite_path(tmp_path):
    """Path to a fresh SQLite database file."""
    return str(tmp_path / "test.db")


@pytest_asyncio.fixture
async def sqlite_db(sqlite_path):
    """SQLite file with a small ``users`` table."""
    conn = SQLiteConnector()
    await conn.connect(Credentials(dbname=sqlite_path))
    try:
        await conn.query(
            "CREATE TABLE users (id INTEGER PRIMARY KEY, name TEXT, score REAL, avatar BLOB)"
        )
        await conn.query(
            "INSERT INTO users (id, name, score, avatar) VALUES"
            " (1, 'ada', 9.5, X'6869'), (2, 'bob', NULL, NULL), (3, 'cy', 7.0, NULL)"
        )
    finally:
        await conn.close()
    return sqlite_path
