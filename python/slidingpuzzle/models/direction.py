"""Directions of travel for the blank."""

from __future__ import annotations

from enum import StrEnum


class Direction(StrEnum):
    """Where the *blank* moves.

    ``Direction.UP`` moves the blank one row towards index 0, i.e. the tile
    above it slides down.  Declaration order is the order successors are
    generated in.
    """

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def offset(self) -> tuple[int, int]:
        """``(d_row, d_col)`` applied to the blank position."""
        return _OFFSETS[self]

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]


_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}

_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}
