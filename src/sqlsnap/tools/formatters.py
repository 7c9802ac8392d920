"""Compact text rendering of query results for MCP tool responses."""

from typing import Any

from sqlsnap.models.result import QueryResult

_MAX_CELL = 80


def format_cell(value: Any) -> str:
    """Render one cell: NULL for None, long values truncated."""
    if value is None:
        return "NULL"
    text = str(value).replace("\n", "\\n")
    if len(text) > _MAX_CELL:
        return text[: _MAX_CELL - 3] + "..."
    return text


def format_row_count(n: int) -> str:
    """Format: (1 row) / (3 rows)."""
    return f"({n} row)" if n == 1 else f"({n} rows)"


def format_result(result: QueryResult) -> str:
    """Pipe-separated table: header line, one line per row, row count."""
    if result.error is not None:
        return f"Error: {result.error}"
    if not result.columns:
        return "OK (no result set)"
    lines = [" | ".join(result.columns)]
    lines.extend(" | ".join(format_cell(v) for v in row) for row in result.rows)
    lines.append(format_row_count(len(result.rows)))
    return "\n".join(lines)
