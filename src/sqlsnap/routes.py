"""HTTP ``POST /query`` endpoint, mounted as a FastMCP custom route.

Request body::

    {"database": "postgresql", "query": "SELECT 1",
     "config": {"host": "...", "port": 5432, "user": "...",
                "password": "...", "dbname": "..."},
     "limit": 10, "offset": 0}

Every error is returned as ``{"error": "<message>"}``.
"""

import logging

from fastmcp import FastMCP
from pydantic import ValidationError
from starlette.requests import Request
from starlette.responses import JSONResponse

from sqlsnap.db.registry import dispatch
from sqlsnap.errors import SQLSnapError, UnsupportedBackendError
from sqlsnap.models.request import QueryRequest

logger = logging.getLogger(__name__)


def error_response(message: str, status_code: int) -> JSONResponse:
    """Wrap an error message in the JSON error envelope."""
    return JSONResponse({"error": message}, status_code=status_code)


def status_for(error: SQLSnapError) -> int:
    """Map a core error to an HTTP status: caller mistakes 400, backend failures 500."""
    if isinstance(error, UnsupportedBackendError):
        return 400
    return 500


async def handle_query(request: Request) -> JSONResponse:
    """Parse the body, dispatch the query, serialize the result."""
    body = await request.body()
    try:
        query_request = QueryRequest.model_validate_json(body)
    except ValidationError as e:
        logger.info("Rejected malformed query request (%d errors)", e.error_count())
        return error_response(str(e), 400)

    try:
        result = await dispatch(query_request)
    except SQLSnapError as e:
        logger.info("%s query failed: %s", query_request.database, e)
        return error_response(str(e), status_for(e))

    return JSONResponse(result.model_dump(mode="json", exclude={"error"}))


def register_query_route(mcp: FastMCP) -> None:
    """Register POST /query on the server's HTTP app."""
    mcp.custom_route("/query", methods=["POST"])(handle_query)
