"""Inbound request models."""

from pydantic import BaseModel, ConfigDict, Field


class Credentials(BaseModel):
    """Connection settings for a single request. Passed through unvalidated."""

    model_config = ConfigDict(frozen=True)

    host: str = ""
    port: int = 0
    user: str = ""
    password: str = Field(default="", repr=False)
    dbname: str = ""


class QueryRequest(BaseModel):
    """One query against one backend, as received from the transport."""

    model_config = ConfigDict(frozen=True)

    database: str
    query: str
    config: Credentials = Field(default_factory=Credentials)
    limit: int | None = None
    offset: int | None = None

    @property
    def paginated(self) -> bool:
        """True if the caller asked for limit/offset handling."""
        return self.limit is not None or self.offset is not None
