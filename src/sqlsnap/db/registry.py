"""Driver registry and request dispatcher.

``CONNECTORS`` maps each backend id to its connector class. It is built
once at import and never modified, so concurrent requests can share it
without locking. A fresh connector is constructed for every request.
"""

import logging
from types import MappingProxyType

from sqlsnap.db.backend import Connector
from sqlsnap.db.mysql_backend import MySQLConnector
from sqlsnap.db.oracle_backend import OracleConnector
from sqlsnap.db.postgres_backend import PostgresConnector
from sqlsnap.db.redis_backend import RedisConnector
from sqlsnap.db.sqlite_backend import SQLiteConnector
from sqlsnap.errors import SQLSnapError, UnsupportedBackendError
from sqlsnap.models.request import QueryRequest
from sqlsnap.models.result import QueryResult

logger = logging.getLogger(__name__)

CONNECTORS: MappingProxyType[str, type[Connector]] = MappingProxyType(
    {
        "postgresql": PostgresConnector,
        "mysql": MySQLConnector,
        "sqlite": SQLiteConnector,
        "oracle": OracleConnector,
        "redis": RedisConnector,
    }
)


def supported_backends() -> list[str]:
    """Return the registered backend ids."""
    return sorted(CONNECTORS)


def get_connector(database: str) -> Connector:
    """Return a new connector for the backend id.

    Raises UnsupportedBackendError for ids that are not registered. Lookup
    is case-sensitive.
    """
    factory = CONNECTORS.get(database)
    if factory is None:
        raise UnsupportedBackendError(database)
    return factory()


async def dispatch(request: QueryRequest) -> QueryResult:
    """Run one request: lookup, connect, query, close.

    The first failure propagates. Once connected, the connection is closed
    on every path; errors from close are logged and dropped so they never
    mask the query outcome.
    """
    connector = get_connector(request.database)
    logger.debug("Dispatching %s query: %s", request.database, request.query)

    await connector.connect(request.config)
    try:
        if request.paginated:
            return await connector.query_with_pagination(
                request.query, request.limit, request.offset
            )
        return await connector.query(request.query)
    finally:
        try:
            await connector.close()
        except Exception:
            logger.warning("Failed to close %s connection", request.database, exc_info=True)


async def execute_request(request: QueryRequest) -> QueryResult:
    """Run a request and fold any failure into an error result."""
    try:
        return await dispatch(request)
    except SQLSnapError as e:
        logger.info("%s request failed: %s", request.database, e)
        return QueryResult.failure(str(e))
