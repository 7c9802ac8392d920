"""SQLite connector.

Thin wrapper around aiosqlite — the database name is used as the file
path, host/port/user/password are ignored.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sqlsnap.db.sql_backend import DBAPICursor, SQLConnector

if TYPE_CHECKING:
    from sqlsnap.db.backend import Cursor
    from sqlsnap.models.request import Credentials


class SQLiteConnector(SQLConnector):
    """Connector for SQLite database files."""

    async def _open(self, credentials: Credentials) -> Any:
        import aiosqlite

        # autocommit, matching the other backends
        return await aiosqlite.connect(credentials.dbname, isolation_level=None)

    async def _run(self, sql: str) -> Cursor:
        cursor = await self._conn.execute(sql)
        return DBAPICursor(cursor)
