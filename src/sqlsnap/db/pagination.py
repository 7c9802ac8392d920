"""Best-effort LIMIT/OFFSET injection for raw SQL strings.

There is no SQL parser here. A query that mentions ``limit`` or ``offset``
anywhere (keyword, column name, string literal) is assumed to paginate
itself and is left alone.
"""

from enum import StrEnum


class PagingStyle(StrEnum):
    """How the row-limiting clause is spelled for a dialect."""

    LIMIT = "limit"  # LIMIT n OFFSET m
    FETCH = "fetch"  # OFFSET m ROWS FETCH NEXT n ROWS ONLY


def strip_terminator(query: str) -> str:
    """Trim whitespace and drop a single trailing ``;``."""
    query = query.strip()
    query = query.removesuffix(";")
    return query.strip()


def has_pagination(query: str) -> bool:
    """Return True if the text already mentions limit or offset."""
    lowered = query.lower()
    return "limit" in lowered or "offset" in lowered


def paginate(
    query: str,
    limit: int | None = None,
    offset: int | None = None,
    *,
    style: PagingStyle = PagingStyle.LIMIT,
) -> str:
    """Append limit/offset clauses unless the query already has them.

    A limit <= 0 means no limit; an offset <= 0 means start at the first row.
    """
    query = strip_terminator(query)
    if has_pagination(query):
        return query

    want_limit = limit is not None and limit > 0
    want_offset = offset is not None and offset > 0

    if style is PagingStyle.FETCH:
        if want_offset:
            query = f"{query} OFFSET {offset} ROWS"
        if want_limit:
            query = f"{query} FETCH NEXT {limit} ROWS ONLY"
        return query

    if want_limit:
        query = f"{query} LIMIT {limit}"
    if want_offset:
        query = f"{query} OFFSET {offset}"
    return query
