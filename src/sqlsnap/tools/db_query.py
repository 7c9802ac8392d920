"""db_query MCP tool — run one query against any registered backend."""

import logging
from typing import Annotated

from fastmcp import FastMCP
from pydantic import Field

from sqlsnap.db.registry import execute_request
from sqlsnap.models.request import Credentials, QueryRequest
from sqlsnap.tools.formatters import format_result

logger = logging.getLogger(__name__)


async def run_db_query(request: QueryRequest) -> str:
    """Execute a request and render the outcome as text."""
    result = await execute_request(request)
    if not result.ok:
        logger.debug("db_query returned error for %s", request.database)
    return format_result(result)


def register_db_query(mcp: FastMCP) -> None:
    """Register the db_query tool with the MCP server."""

    @mcp.tool()
    async def db_query(
        database: Annotated[
            str,
            Field(description="Backend id: postgresql, mysql, sqlite, oracle or redis"),
        ],
        query: Annotated[
            str, Field(description="SQL statement, or a Redis command line for redis")
        ],
        host: Annotated[str, Field(description="Server host name")] = "",
        port: Annotated[int, Field(description="Server port")] = 0,
        user: Annotated[str, Field(description="User name")] = "",
        password: Annotated[str, Field(description="Password")] = "",
        dbname: Annotated[
            str, Field(description="Database / service name, or file path for sqlite")
        ] = "",
        limit: Annotated[
            int | None, Field(description="Max rows; appended as LIMIT when missing")
        ] = None,
        offset: Annotated[
            int | None, Field(description="Rows to skip; appended as OFFSET when missing")
        ] = None,
    ) -> str:
        """Run a query against a PostgreSQL, MySQL, SQLite, Oracle or Redis backend.

        Opens a fresh connection, runs the single statement or command and
        closes the connection again. Results come back as a pipe-separated
        table. Redis replies are shown as a ``value`` column, or ``key`` and
        ``value`` columns for hashes. limit/offset are ignored for redis and
        for SQL that already mentions LIMIT or OFFSET.
        """
        request = QueryRequest(
            database=database,
            query=query,
            config=Credentials(
                host=host, port=port, user=user, password=password, dbname=dbname
            ),
            limit=limit,
            offset=offset,
        )
        return await run_db_query(request)
