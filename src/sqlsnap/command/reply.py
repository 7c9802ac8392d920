"""Normalize Redis replies into the tabular result shape."""

from enum import StrEnum
from typing import Any

from sqlsnap.models.result import QueryResult

_VALUE = ["value"]
_KEY_VALUE = ["key", "value"]


class ReplyShape(StrEnum):
    """Closed set of reply shapes the normalizer understands."""

    SCALAR = "scalar"
    LIST = "list"
    MAPPING = "mapping"
    OTHER = "other"


def classify_reply(reply: Any) -> ReplyShape:
    """Decide the shape of a raw reply from its runtime type."""
    # bool is an int subclass and lands here too
    if reply is None or isinstance(reply, str | bytes | int):
        return ReplyShape.SCALAR
    if isinstance(reply, list | tuple | set | frozenset):
        return ReplyShape.LIST
    if isinstance(reply, dict):
        return ReplyShape.MAPPING
    return ReplyShape.OTHER


def _scalar(value: Any) -> Any:
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return value


def _cell(value: Any) -> Any:
    """Decode bytes at any depth; nested arrays stay lists."""
    if isinstance(value, list | tuple | set | frozenset):
        return [_cell(item) for item in value]
    if isinstance(value, dict):
        return {_scalar(k): _cell(v) for k, v in value.items()}
    return _scalar(value)


def normalize_reply(reply: Any) -> QueryResult:
    """Convert a raw reply to a QueryResult. Never raises.

    Scalars and lists produce a single ``value`` column; mappings produce
    ``key``/``value`` rows in the mapping's iteration order. Anything else
    is rendered with ``str()``. Bytes are decoded as UTF-8, with invalid
    sequences replaced by U+FFFD.
    """
    shape = classify_reply(reply)
    if shape is ReplyShape.SCALAR:
        return QueryResult(columns=_VALUE, rows=[[_scalar(reply)]])
    if shape is ReplyShape.LIST:
        return QueryResult(columns=_VALUE, rows=[[_cell(item)] for item in reply])
    if shape is ReplyShape.MAPPING:
        return QueryResult(
            columns=_KEY_VALUE, rows=[[_scalar(k), _cell(v)] for k, v in reply.items()]
        )
    return QueryResult(columns=_VALUE, rows=[[str(reply)]])
