"""Redis connector.

The query is one Redis command line (``HGETALL user:1``). It is split with
the command tokenizer, sent as-is through ``execute_command`` and the reply
is normalized into a one- or two-column result.

redis-py post-processes replies per command (``SET`` becomes ``True``,
``INFO`` a parsed dict). Those callbacks are removed so callers see what the
server sent: status text, integers, bulk strings and arrays. Replies stay
undecoded bytes and are decoded by the normalizer, so binary values survive.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from sqlsnap.command.reply import normalize_reply
from sqlsnap.command.tokenizer import split_command
from sqlsnap.errors import BackendConnectionError, QueryError

if TYPE_CHECKING:
    from sqlsnap.models.request import Credentials
    from sqlsnap.models.result import QueryResult

logger = logging.getLogger(__name__)


def pairs_to_dict(reply: Any) -> Any:
    """Fold a flat ``[field, value, ...]`` array into a dict."""
    if not isinstance(reply, list):
        return reply
    return dict(zip(reply[::2], reply[1::2], strict=False))


def raw_replies(client: Any) -> Any:
    """Strip a client's reply callbacks, keeping only hash pairing.

    HGETALL is the one reply folded into a mapping, so hashes come back as
    ``key``/``value`` rows.
    """
    client.response_callbacks.clear()
    client.response_callbacks["HGETALL"] = pairs_to_dict
    return client


class RedisConnector:
    """Connector for Redis servers (database 0)."""

    def __init__(self) -> None:
        """Initialize without a client."""
        self._client: Any = None

    async def connect(self, credentials: Credentials) -> None:
        """Build the client. The TCP connection is opened lazily on first command."""
        import redis.asyncio as aioredis

        try:
            client = aioredis.Redis(
                host=credentials.host,
                port=credentials.port,
                password=credentials.password or None,
                db=0,
                decode_responses=False,
            )
        except Exception as e:
            raise BackendConnectionError(f"Failed to connect: {e}") from e
        self._client = raw_replies(client)

    async def query(self, query: str) -> QueryResult:
        """Tokenize and run a single command."""
        if self._client is None:
            raise QueryError("Query failed: not connected")
        args = split_command(query)
        if not args:
            raise QueryError("Query failed: empty command")
        logger.debug("Redis command: %s (%d args)", args[0], len(args) - 1)
        try:
            reply = await self._client.execute_command(*args)
        except Exception as e:
            raise QueryError(f"Query failed: {e}") from e
        return normalize_reply(reply)

    async def query_with_pagination(
        self, query: str, limit: int | None = None, offset: int | None = None
    ) -> QueryResult:
        """Redis has no generic limit/offset; runs the command unchanged."""
        return await self.query(query)

    async def close(self) -> None:
        """Close the client and its connection pool."""
        client, self._client = self._client, None
        if client is not None:
            await client.aclose()
