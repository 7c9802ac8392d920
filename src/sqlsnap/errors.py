"""Exception hierarchy for the query execution layer."""


class SQLSnapError(Exception):
    """Base class for every error surfaced to a caller."""


class UnsupportedBackendError(SQLSnapError):
    """The requested backend id is not registered."""

    def __init__(self, database: str) -> None:
        """Initialize with the rejected backend id."""
        super().__init__(f"Unsupported database type: {database}")
        self.database = database


class BackendConnectionError(SQLSnapError):
    """The connector could not establish a connection."""


class QueryError(SQLSnapError):
    """Execution, column metadata, row decoding, or iteration failed."""


class TokenizeError(QueryError):
    """A Redis command line has an unmatched quote."""

    def __init__(self, quote: str, position: int) -> None:
        """Initialize with the quote character and its 1-based position."""
        kind = "double" if quote == '"' else "single"
        super().__init__(f"syntax error: unmatched {kind} quote at: {position}")
        self.quote = quote
        self.position = position
