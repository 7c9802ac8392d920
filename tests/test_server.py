"""Tests for the server, HTTP route, config and entry point."""

from unittest.mock import patch

import httpx
import pytest

from sqlsnap.__main__ import parse_args
from sqlsnap.config import get_host, get_log_level, get_port, get_transport
from sqlsnap.errors import BackendConnectionError, QueryError, UnsupportedBackendError
from sqlsnap.routes import status_for
from sqlsnap.server import create_server


@pytest.fixture
def client():
    app = create_server().http_app()
    transport = httpx.ASGITransport(app=app)
    return httpx.AsyncClient(transport=transport, base_url="http://testserver")


def test_config_defaults():
    with patch.dict("os.environ", {}, clear=True):
        assert get_host() == "0.0.0.0"
        assert get_port() == 9091
        assert get_transport() == "http"
        assert get_log_level() == "INFO"


def test_config_from_env():
    env = {"SQLSNAP_PORT": "8080", "SQLSNAP_TRANSPORT": "STDIO", "SQLSNAP_LOG_LEVEL": "debug"}
    with patch.dict("os.environ", env):
        assert get_port() == 8080
        assert get_transport() == "stdio"
        assert get_log_level() == "DEBUG"


def test_port_flag():
    assert parse_args(["-port", "9999"]).port == 9999
    assert parse_args(["--port", "1234"]).port == 1234
    assert parse_args([]).port is None


def test_status_mapping():
    assert status_for(UnsupportedBackendError("x")) == 400
    assert status_for(BackendConnectionError("x")) == 500
    assert status_for(QueryError("x")) == 500


@pytest.mark.asyncio
async def test_query_route_success(client, sqlite_db):
    async with client:
        resp = await client.post(
            "/query",
            json={
                "database": "sqlite",
                "query": "SELECT id, name FROM users ORDER BY id",
                "config": {"dbname": sqlite_db},
                "limit": 1,
            },
        )
    assert resp.status_code == 200
    assert resp.json() == {"columns": ["id", "name"], "rows": [[1, "ada"]]}


@pytest.mark.asyncio
async def test_query_route_unsupported_backend(client):
    async with client:
        resp = await client.post("/query", json={"database": "mongodb", "query": "{}"})
    assert resp.status_code == 400
    assert resp.json() == {"error": "Unsupported database type: mongodb"}


@pytest.mark.asyncio
async def test_query_route_malformed_body(client):
    async with client:
        resp = await client.post("/query", content=b"{not json")
    assert resp.status_code == 400
    assert "error" in resp.json()


@pytest.mark.asyncio
async def test_query_route_missing_field(client):
    async with client:
        resp = await client.post("/query", json={"database": "sqlite"})
    assert resp.status_code == 400


@pytest.mark.asyncio
async def test_query_route_query_failure(client, sqlite_db):
    async with client:
        resp = await client.post(
            "/query",
            json={
                "database": "sqlite",
                "query": "SELECT * FROM nope",
                "config": {"dbname": sqlite_db},
            },
        )
    assert resp.status_code == 500
    assert resp.json()["error"].startswith("Query failed:")


@pytest.mark.asyncio
async def test_query_route_tokenize_failure(client):
    async with client:
        resp = await client.post(
            "/query",
            json={"database": "redis", "query": 'echo "unterminated', "config": {"port": 6399}},
        )
    assert resp.status_code == 500
    assert resp.json() == {"error": "syntax error: unmatched double quote at: 6"}


@pytest.mark.asyncio
async def test_query_route_rejects_get(client):
    async with client:
        resp = await client.get("/query")
    assert resp.status_code == 405
