"""Connector protocol — one implementation per supported backend.

The dispatcher programs against these protocols. Each connector owns its
driver, its address encoding and its query translation; nothing outside
the connector knows which driver is in use.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from sqlsnap.models.request import Credentials
    from sqlsnap.models.result import QueryResult


@runtime_checkable
class Cursor(Protocol):
    """Result cursor of a relational driver, reduced to what execution needs."""

    @property
    def columns(self) -> list[str]:
        """Column names of the result set, empty for statements without one."""
        ...

    async def fetchone(self) -> Sequence[Any] | None:
        """Fetch the next record, or None if exhausted."""
        ...

    async def close(self) -> None:
        """Release the cursor."""
        ...


@runtime_checkable
class Connector(Protocol):
    """A single-use connection to one backend.

    Lifecycle: construct, ``connect`` once, run one query, ``close``.
    Connectors are never shared between requests.
    """

    async def connect(self, credentials: Credentials) -> None:
        """Open the connection. Raises BackendConnectionError."""
        ...

    async def query(self, query: str) -> QueryResult:
        """Run a query verbatim. Raises QueryError."""
        ...

    async def query_with_pagination(
        self, query: str, limit: int | None = None, offset: int | None = None
    ) -> QueryResult:
        """Run a query with limit/offset applied where the backend supports it."""
        ...

    async def close(self) -> None:
        """Close the connection."""
        ...
