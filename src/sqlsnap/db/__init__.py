"""Backend connectors, pagination and request dispatch."""

from sqlsnap.db.backend import Connector, Cursor
from sqlsnap.db.mysql_backend import MySQLConnector
from sqlsnap.db.oracle_backend import OracleConnector
from sqlsnap.db.postgres_backend import PostgresConnector
from sqlsnap.db.redis_backend import RedisConnector
from sqlsnap.db.registry import CONNECTORS, dispatch, execute_request, get_connector
from sqlsnap.db.sqlite_backend import SQLiteConnector

__all__ = [
    "CONNECTORS",
    "Connector",
    "Cursor",
    "MySQLConnector",
    "OracleConnector",
    "PostgresConnector",
    "RedisConnector",
    "SQLiteConnector",
    "dispatch",
    "execute_request",
    "get_connector",
]
