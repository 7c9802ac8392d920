"""Execution logic shared by the relational connectors.

Subclasses provide ``_open`` (driver connect), ``_run`` (execute a
statement and return a Cursor) and, if needed, ``prepare`` and
``_close``. Everything between the driver cursor and the QueryResult
lives here so every SQL backend reports failures the same way.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from sqlsnap.db.pagination import PagingStyle, paginate
from sqlsnap.errors import BackendConnectionError, QueryError
from sqlsnap.models.result import QueryResult

if TYPE_CHECKING:
    from sqlsnap.db.backend import Cursor
    from sqlsnap.models.request import Credentials

logger = logging.getLogger(__name__)


def to_cell(value: Any) -> Any:
    """Convert a driver value to a result cell. Bytes become text."""
    if isinstance(value, bytes | bytearray | memoryview):
        return bytes(value).decode("utf-8", errors="replace")
    return value


class DBAPICursor:
    """Wraps a DB-API style async cursor to satisfy the Cursor protocol.

    Works for aiosqlite, aiomysql and python-oracledb, which all expose
    ``description`` and an awaitable ``fetchone``. Their ``close`` differs
    (coroutine vs plain call), so both are accepted.
    """

    def __init__(self, cursor: Any) -> None:
        """Initialize with a driver cursor that has already executed."""
        self._cursor = cursor

    @property
    def columns(self) -> list[str]:
        """Column names from the cursor description."""
        description = self._cursor.description
        if not description:
            return []
        return [str(col[0]) for col in description]

    async def fetchone(self) -> Sequence[Any] | None:
        """Fetch the next record, or None if exhausted."""
        return await self._cursor.fetchone()  # type: ignore[no-any-return]

    async def close(self) -> None:
        """Close the driver cursor."""
        result = self._cursor.close()
        if inspect.isawaitable(result):
            await result


async def collect_result(cursor: Cursor) -> QueryResult:
    """Materialize every record of an executed cursor into a QueryResult.

    Each failure point maps to its own QueryError message. Nothing partial
    is returned.
    """
    try:
        columns = list(cursor.columns)
    except Exception as e:
        raise QueryError(f"Failed to get columns: {e}") from e

    if not columns:
        return QueryResult()

    rows: list[list[Any]] = []
    while True:
        try:
            record = await cursor.fetchone()
        except Exception as e:
            raise QueryError(f"Error reading rows: {e}") from e
        if record is None:
            break
        try:
            values = list(record)
            if len(values) != len(columns):
                raise ValueError(f"expected {len(columns)} values, got {len(values)}")
            rows.append([to_cell(v) for v in values])
        except Exception as e:
            raise QueryError(f"Failed to scan row: {e}") from e

    return QueryResult(columns=columns, rows=rows)


class SQLConnector:
    """Base class for relational connectors."""

    paging_style = PagingStyle.LIMIT

    def __init__(self) -> None:
        """Initialize unconnected."""
        self._conn: Any = None

    async def _open(self, credentials: Credentials) -> Any:
        """Open and return a driver connection."""
        raise NotImplementedError

    async def _run(self, sql: str) -> Cursor:
        """Execute one statement and return its cursor."""
        raise NotImplementedError

    async def _close(self, conn: Any) -> None:
        """Close a driver connection."""
        await conn.close()

    def prepare(self, query: str) -> str:
        """Adjust query text before execution. Identity by default."""
        return query

    async def connect(self, credentials: Credentials) -> None:
        """Open the connection. Raises BackendConnectionError."""
        try:
            self._conn = await self._open(credentials)
        except Exception as e:
            raise BackendConnectionError(f"Failed to connect: {e}") from e

    async def query(self, query: str) -> QueryResult:
        """Execute the query text unmodified (apart from ``prepare``)."""
        return await self._execute(self.prepare(query))

    async def query_with_pagination(
        self, query: str, limit: int | None = None, offset: int | None = None
    ) -> QueryResult:
        """Execute the query with limit/offset injected when missing."""
        sql = paginate(self.prepare(query), limit, offset, style=self.paging_style)
        return await self._execute(sql)

    async def close(self) -> None:
        """Close the connection if one is open."""
        conn, self._conn = self._conn, None
        if conn is not None:
            await self._close(conn)

    async def _execute(self, sql: str) -> QueryResult:
        if self._conn is None:
            raise QueryError("Query failed: not connected")
        logger.debug("%s executing: %s", type(self).__name__, sql)
        try:
            cursor = await self._run(sql)
        except Exception as e:
            raise QueryError(f"Query failed: {e}") from e
        try:
            return await collect_result(cursor)
        finally:
            await cursor.close()
