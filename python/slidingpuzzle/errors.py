"""Exceptions raised by the puzzle state and its codec.

Every error derives from :class:`PuzzleError`.  Most also derive from the
matching built-in (``ValueError`` / ``IndexError``) so callers that only
know the standard hierarchy can still catch them.
"""

from __future__ import annotations


class PuzzleError(Exception):
    """Base class for all sliding puzzle errors."""


class InvalidArgumentError(PuzzleError, ValueError):
    """A constructor argument is unusable (e.g. a side of zero)."""


class IndexOutOfRangeError(PuzzleError, IndexError):
    """A coordinate lies outside ``[0, side)``."""


class ValueOutOfRangeError(PuzzleError, ValueError):
    """A tile value lies outside ``[0, side²)``."""


class MalformedEncodingError(PuzzleError, ValueError):
    """A line encoding failed structural or semantic validation."""


class InvalidStateError(PuzzleError, ValueError):
    """The cells are not a bijection or the blank cache is stale."""


class IllegalMoveError(PuzzleError):
    """The requested move would push the blank off the board.

    This is an expected outcome during search, not a programming error.
    """

    def __init__(self, direction: object, blank_pos: tuple[int, int]) -> None:
        self.direction = direction
        self.blank_pos = blank_pos
        super().__init__(
            f"Cannot move the blank {direction} from {blank_pos}."
        )
