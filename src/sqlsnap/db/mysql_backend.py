"""MySQL connector (aiomysql)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sqlsnap.db.sql_backend import DBAPICursor, SQLConnector

if TYPE_CHECKING:
    from sqlsnap.db.backend import Cursor
    from sqlsnap.models.request import Credentials


def connect_kwargs(credentials: Credentials) -> dict[str, Any]:
    """Translate credentials to aiomysql arguments (user:password@tcp(host:port)/db)."""
    return {
        "host": credentials.host,
        "port": credentials.port,
        "user": credentials.user,
        "password": credentials.password,
        "db": credentials.dbname,
        "autocommit": True,
    }


class MySQLConnector(SQLConnector):
    """Connector for MySQL and MariaDB servers."""

    async def _open(self, credentials: Credentials) -> Any:
        import aiomysql

        return await aiomysql.connect(**connect_kwargs(credentials))

    async def _run(self, sql: str) -> Cursor:
        cursor = await self._conn.cursor()
        await cursor.execute(sql)
        return DBAPICursor(cursor)

    async def _close(self, conn: Any) -> None:
        # aiomysql's close() is synchronous; ensure_closed() sends COM_QUIT
        await conn.ensure_closed()
