"""FastMCP server with the db_query tool and the HTTP /query route."""

import logging
import sys

from fastmcp import FastMCP

from sqlsnap.config import get_log_level
from sqlsnap.routes import register_query_route
from sqlsnap.tools.db_query import register_db_query

_INSTRUCTIONS = """\
sqlsnap runs a single query against a database you name and returns the \
rows. Nothing is kept between calls: every call opens a new connection \
with the credentials you pass and closes it afterwards.

Backends: postgresql, mysql, sqlite, oracle (SQL text) and redis (one \
command line, e.g. HGETALL user:1 or SET "my key" 'a value').

Pass limit/offset to page through large SQL results; they are appended \
only when the statement does not already mention LIMIT or OFFSET.
"""


def configure_logging() -> None:
    """Send log records to stderr (stdout may be the MCP stdio transport)."""
    logging.basicConfig(
        level=getattr(logging, get_log_level(), logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
        stream=sys.stderr,
    )


def create_server() -> FastMCP:
    """Create and configure the server with all tools and routes."""
    mcp = FastMCP("sqlsnap", instructions=_INSTRUCTIONS)

    register_db_query(mcp)
    register_query_route(mcp)

    return mcp
