"""Line encoding of a puzzle state.

Format::

    <move_count> <v(0,0)> <v(0,1)> ... <v(side-1,side-1)>

Tokens are whitespace separated; the cell values are row-major and must be
a permutation of ``0..side²-1``.  ``move_count`` may be any integer.
"""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Iterable

from slidingpuzzle.errors import MalformedEncodingError

logger = logging.getLogger(__name__)

_INT_RE = re.compile(r"[+-]?\d+")


def _parse_int(token: str, position: int) -> int:
    if not _INT_RE.fullmatch(token):
        raise MalformedEncodingError(
            f"Token {position} ({token!r}) is not an integer."
        )
    return int(token)


def parse_line(text: str) -> tuple[int, int, list[int]]:
    """Validate *text* and return ``(move_count, side, values)``.

    ``values`` is the flat row-major cell list.  Nothing is returned unless
    the whole line is valid.
    """
    tokens = text.split()
    try:
        if not tokens:
            raise MalformedEncodingError("Line is empty.")

        move_count = _parse_int(tokens[0], 0)

        count = len(tokens) - 1
        side = math.isqrt(count)
        if count == 0 or side * side != count:
            raise MalformedEncodingError(
                f"Line has {count} cell values, which is not a non-zero "
                f"perfect square."
            )

        limit = count
        seen: set[int] = set()
        values: list[int] = []
        for i, token in enumerate(tokens[1:], 1):
            val = _parse_int(token, i)
            if not 0 <= val < limit:
                raise MalformedEncodingError(
                    f"Value {val} at token {i} is outside [0, {limit})."
                )
            if val in seen:
                raise MalformedEncodingError(
                    f"Value {val} at token {i} appears more than once."
                )
            seen.add(val)
            values.append(val)
    except MalformedEncodingError as exc:
        logger.debug("Rejected line %r: %s", text, exc)
        raise

    return move_count, side, values


def format_line(move_count: int, values: Iterable[int]) -> str:
    """Join ``move_count`` and the row-major ``values`` with single spaces."""
    return " ".join(str(v) for v in (move_count, *values))
