"""Generic tabular result shared by every backend."""

from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field, model_validator


class QueryResult(BaseModel):
    """Columns plus rows, or an error message — never both.

    Cells are whatever scalar the driver produced (``None``, ``str``,
    ``int``, ``float``, ``bool``, decimals, dates, ...). Byte values are
    decoded to text before they get here.
    """

    model_config = ConfigDict(frozen=True)

    columns: list[str] = Field(default_factory=list)
    rows: list[list[Any]] = Field(default_factory=list)
    error: str | None = None

    @model_validator(mode="after")
    def check_shape(self) -> Self:
        if self.error is not None and (self.columns or self.rows):
            raise ValueError("error results carry no columns or rows")
        width = len(self.columns)
        for i, row in enumerate(self.rows):
            if len(row) != width:
                raise ValueError(f"row {i} has {len(row)} cells, expected {width}")
        return self

    @classmethod
    def failure(cls, message: str) -> Self:
        """Build an error result."""
        return cls(error=message)

    @property
    def ok(self) -> bool:
        """True unless this result carries an error."""
        return self.error is None
