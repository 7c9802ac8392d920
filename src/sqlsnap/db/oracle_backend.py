"""Oracle connector (python-oracledb, thin mode, asyncio API).

Oracle rejects a trailing ``;`` on a single statement and has no LIMIT
keyword, so queries are trimmed before execution and paginated with
OFFSET/FETCH.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sqlsnap.db.pagination import PagingStyle, strip_terminator
from sqlsnap.db.sql_backend import DBAPICursor, SQLConnector

if TYPE_CHECKING:
    from sqlsnap.db.backend import Cursor
    from sqlsnap.models.request import Credentials


def easy_connect_dsn(credentials: Credentials) -> str:
    """Build an Easy Connect string: host:port/service."""
    return f"{credentials.host}:{credentials.port}/{credentials.dbname}"


def fetch_lobs_inline(cursor: Any, metadata: Any) -> Any:
    """Output type handler: fetch CLOB/NCLOB/BLOB columns as str/bytes.

    Installed per connection, so no process-wide driver default changes.
    """
    import oracledb

    inline = {
        oracledb.DB_TYPE_CLOB: oracledb.DB_TYPE_LONG,
        oracledb.DB_TYPE_NCLOB: oracledb.DB_TYPE_LONG_NVARCHAR,
        oracledb.DB_TYPE_BLOB: oracledb.DB_TYPE_LONG_RAW,
    }
    target = inline.get(metadata.type_code)
    if target is None:
        return None
    return cursor.var(target, arraysize=cursor.arraysize)


class OracleConnector(SQLConnector):
    """Connector for Oracle Database."""

    paging_style = PagingStyle.FETCH

    async def _open(self, credentials: Credentials) -> Any:
        import oracledb

        conn = await oracledb.connect_async(
            user=credentials.user,
            password=credentials.password,
            dsn=easy_connect_dsn(credentials),
        )
        conn.outputtypehandler = fetch_lobs_inline
        return conn

    def prepare(self, query: str) -> str:
        """Strip whitespace and one trailing semicolon."""
        return strip_terminator(query)

    async def _run(self, sql: str) -> Cursor:
        cursor = self._conn.cursor()
        await cursor.execute(sql)
        return DBAPICursor(cursor)
