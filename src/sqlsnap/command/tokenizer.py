"""Shell-like tokenizer for Redis command lines.

Splits one line into arguments, honoring single/double quotes and
backslash escapes. Deliberately stricter than a shell: a closing quote
must be followed by a space or the end of the line, so ``"a"b`` is a
syntax error rather than ``ab``.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from sqlsnap.errors import TokenizeError

_QUOTES = frozenset("\"'")


@dataclass
class _ScanState:
    """Mutable state for a single forward scan."""

    quote: str = ""
    quote_pos: int = 0
    escaped: bool = False
    buf: list[str] = field(default_factory=list)


def split_command(line: str) -> list[str]:
    """Split a command line into its arguments.

    Raises TokenizeError on an unmatched quote, or on a closing quote that
    is immediately followed by something other than a space. Positions in
    the error are 1-based.
    """
    state = _ScanState()
    tokens: list[str] = []
    last = len(line) - 1

    for i, ch in enumerate(line):
        if state.escaped:
            state.escaped = False
            state.buf.append(ch)
            continue

        if ch in _QUOTES:
            if ch == state.quote:
                if i < last and line[i + 1] != " ":
                    raise TokenizeError(ch, i + 1)
                state.quote = ""
                continue
            if not state.quote:
                state.quote = ch
                state.quote_pos = i + 1
                continue
            # the other quote kind inside an open quote is literal

        if ch == "\\":
            state.escaped = True
            continue

        if ch == " " and not state.quote:
            if state.buf:
                tokens.append("".join(state.buf))
                state.buf.clear()
            continue

        state.buf.append(ch)

    if state.quote:
        raise TokenizeError(state.quote, state.quote_pos)

    if state.buf:
        tokens.append("".join(state.buf))

    return tokens
