"""Tests for the driver registry and dispatcher."""

import logging

import pytest

from sqlsnap.db.mysql_backend import MySQLConnector
from sqlsnap.db.oracle_backend import OracleConnector
from sqlsnap.db.postgres_backend import PostgresConnector
from sqlsnap.db.redis_backend import RedisConnector
from sqlsnap.db.registry import (
    CONNECTORS,
    dispatch,
    execute_request,
    get_connector,
    supported_backends,
)
from sqlsnap.db.sqlite_backend import SQLiteConnector
from sqlsnap.errors import BackendConnectionError, QueryError, UnsupportedBackendError
from sqlsnap.models.request import Credentials, QueryRequest


def test_registered_backends():
    assert supported_backends() == ["mysql", "oracle", "postgresql", "redis", "sqlite"]


@pytest.mark.parametrize(
    "database,cls",
    [
        ("postgresql", PostgresConnector),
        ("mysql", MySQLConnector),
        ("sqlite", SQLiteConnector),
        ("oracle", OracleConnector),
        ("redis", RedisConnector),
    ],
)
def test_get_connector_returns_fresh_instance(database, cls):
    first = get_connector(database)
    second = get_connector(database)
    assert isinstance(first, cls)
    assert first is not second


def test_registry_is_read_only():
    with pytest.raises(TypeError):
        CONNECTORS["mongo"] = object  # type: ignore[index]


@pytest.mark.parametrize("database", ["mongodb", "PostgreSQL", ""])
def test_unsupported_backend(database):
    with pytest.raises(UnsupportedBackendError, match="Unsupported database type"):
        get_connector(database)


@pytest.mark.asyncio
async def test_unsupported_backend_never_connects(recording_connector):
    request = QueryRequest(database="nope", query="SELECT 1")
    with pytest.raises(UnsupportedBackendError):
        await dispatch(request)
    assert recording_connector.calls == []


@pytest.mark.asyncio
async def test_dispatch_lifecycle(recording_connector):
    result = await dispatch(QueryRequest(database="fake", query="SELECT 1"))
    assert result.rows == [[1]]
    assert recording_connector.calls == ["connect", "query:SELECT 1", "close"]


@pytest.mark.asyncio
async def test_dispatch_uses_pagination_when_requested(recording_connector):
    await dispatch(QueryRequest(database="fake", query="SELECT 1", limit=10))
    assert recording_connector.calls == ["connect", "paginate:SELECT 1:10:None", "close"]


@pytest.mark.asyncio
async def test_close_after_query_failure(recording_connector):
    recording_connector.fail_query = True
    with pytest.raises(QueryError):
        await dispatch(QueryRequest(database="fake", query="SELECT 1"))
    assert recording_connector.calls[-1] == "close"


@pytest.mark.asyncio
async def test_no_close_when_connect_fails(recording_connector):
    recording_connector.fail_connect = True
    with pytest.raises(BackendConnectionError):
        await dispatch(QueryRequest(database="fake", query="SELECT 1"))
    assert recording_connector.calls == ["connect"]


@pytest.mark.asyncio
async def test_close_failure_logged_not_raised(recording_connector, caplog):
    recording_connector.fail_close = True
    with caplog.at_level(logging.WARNING, logger="sqlsnap.db.registry"):
        result = await dispatch(QueryRequest(database="fake", query="SELECT 1"))
    assert result.rows == [[1]]
    assert "Failed to close fake connection" in caplog.text


@pytest.mark.asyncio
async def test_execute_request_folds_errors(recording_connector):
    recording_connector.fail_query = True
    result = await execute_request(QueryRequest(database="fake", query="SELECT 1"))
    assert result.error == "Query failed: boom"
    assert result.columns == []
    assert result.rows == []


@pytest.mark.asyncio
async def test_execute_request_unsupported():
    result = await execute_request(QueryRequest(database="nope", query="x"))
    assert result.error == "Unsupported database type: nope"


@pytest.mark.asyncio
async def test_end_to_end_sqlite(sqlite_db):
    request = QueryRequest(
        database="sqlite",
        query="SELECT name FROM users ORDER BY id",
        config=Credentials(dbname=sqlite_db),
        limit=2,
        offset=0,
    )
    result = await execute_request(request)
    assert result.ok
    assert result.rows == [["ada"], ["bob"]]
