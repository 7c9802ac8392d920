"""PostgreSQL connector.

Uses asyncpg. asyncpg has no DB-API cursor for plain queries: a prepared
statement gives the column attributes and ``fetch()`` returns every record
eagerly, so the cursor here wraps a list.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from sqlsnap.db.sql_backend import SQLConnector

if TYPE_CHECKING:
    import asyncpg

    from sqlsnap.db.backend import Cursor
    from sqlsnap.models.request import Credentials

logger = logging.getLogger(__name__)


def connect_kwargs(credentials: Credentials) -> dict[str, Any]:
    """Translate credentials to asyncpg connection attributes (sslmode=disable)."""
    return {
        "host": credentials.host,
        "port": credentials.port,
        "user": credentials.user,
        "password": credentials.password,
        "database": credentials.dbname,
        "ssl": False,
    }


class PostgresCursor:
    """Wraps a list of asyncpg.Record as a Cursor."""

    def __init__(self, records: list[asyncpg.Record], columns: list[str]) -> None:
        """Initialize with fetched records and their column names."""
        self._records = records
        self._columns = columns
        self._index = 0

    @property
    def columns(self) -> list[str]:
        """Column names of the result set."""
        return self._columns

    async def fetchone(self) -> Sequence[Any] | None:
        """Return the next record's values, or None if exhausted."""
        if self._index >= len(self._records):
            return None
        record = self._records[self._index]
        self._index += 1
        return list(record.values())

    async def close(self) -> None:
        """Drop the buffered records."""
        self._records = []
        self._index = 0


class PostgresConnector(SQLConnector):
    """Connector for PostgreSQL servers."""

    async def _open(self, credentials: Credentials) -> Any:
        import asyncpg as _asyncpg

        return await _asyncpg.connect(**connect_kwargs(credentials))

    async def _run(self, sql: str) -> Cursor:
        stmt = await self._conn.prepare(sql)
        columns = [attr.name for attr in stmt.get_attributes()]
        records = await stmt.fetch()
        return PostgresCursor(records, columns)
