"""Puzzle state model for the N×N sliding puzzle."""

from __future__ import annotations

import hashlib
from collections.abc import Iterator, Sequence
from functools import partialmethod

from slidingpuzzle import codec
from slidingpuzzle.errors import (
    IllegalMoveError,
    IndexOutOfRangeError,
    InvalidArgumentError,
    InvalidStateError,
    ValueOutOfRangeError,
)
from slidingpuzzle.models.direction import Direction
from slidingpuzzle.models.storage import (
    PackedStorage,
    Storage,
    StorageKind,
    make_storage,
)


class PuzzleState:
    """One board configuration plus the number of moves that led to it.

    Cells are addressed by ``(row, col)``; value 0 is the blank.  Equality
    and hashing look at the side and the cells only, so the same layout
    reached by different paths collapses to one search node.

    Moves come in two flavours: :meth:`move` mutates the receiver,
    :meth:`moved` returns a moved copy and leaves the receiver alone.
    """

    __slots__ = ("_side", "_size", "_cells", "_blank_row", "_blank_col", "_move_count")

    def __init__(
        self,
        side: int,
        cells: Storage,
        blank_pos: tuple[int, int],
        move_count: int = 0,
    ) -> None:
        # Low-level; use the ``solved`` / ``from_*`` constructors.
        _check_side(side)
        _check_move_count(move_count)
        self._side = side
        self._size = side * side
        self._cells = cells
        self._blank_row, self._blank_col = blank_pos
        self._move_count = move_count
        self._check_coords(self._blank_row, self._blank_col)
        if cells.get(self._blank_row * side + self._blank_col) != 0:
            raise InvalidStateError(
                f"Blank position {blank_pos} does not hold 0."
            )

    # -- construction helpers -------------------------------------------------

    @classmethod
    def solved(
        cls, side: int, storage: StorageKind | str | None = None
    ) -> PuzzleState:
        """Return the goal layout: ``1..side²-1`` row-major, blank last."""
        _check_side(side)
        size = side * side
        cells = make_storage(side, storage)
        for i in range(size - 1):
            cells.set(i, i + 1)
        cells.set(size - 1, 0)
        return cls(side, cells, (side - 1, side - 1))

    @classmethod
    def from_flat(
        cls,
        side: int,
        values: Sequence[int],
        move_count: int = 0,
        storage: StorageKind | str | None = None,
    ) -> PuzzleState:
        """Create a state from a flat row-major value list.

        Example::

            PuzzleState.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        _check_side(side)
        _check_move_count(move_count)
        size = side * side
        if len(values) != size:
            raise InvalidArgumentError(
                f"Expected {size} values for a {side}×{side} board, "
                f"got {len(values)}."
            )
        for i, v in enumerate(values):
            if not isinstance(v, int) or not 0 <= v < size:
                raise ValueOutOfRangeError(
                    f"Value {v!r} at index {i} is outside [0, {size})."
                )
        if len(set(values)) != size:
            raise InvalidStateError(
                f"Values are not a permutation of 0..{size - 1}."
            )
        return cls._build(side, values, move_count, storage)

    @classmethod
    def from_tiles(
        cls,
        tiles: Sequence[Sequence[int]],
        move_count: int = 0,
        storage: StorageKind | str | None = None,
    ) -> PuzzleState:
        """Create a state from a list of rows."""
        side = len(tiles)
        if any(len(row) != side for row in tiles):
            raise InvalidArgumentError("Tiles must form a square grid.")
        return cls.from_flat(
            side, [v for row in tiles for v in row], move_count, storage
        )

    @classmethod
    def from_line(
        cls, text: str, storage: StorageKind | str | None = None
    ) -> PuzzleState:
        """Parse the line encoding produced by :meth:`to_line`.

        Raises :class:`~slidingpuzzle.errors.MalformedEncodingError` on any
        structural or value problem.
        """
        move_count, side, values = codec.parse_line(text)
        return cls._build(side, values, move_count, storage)

    @classmethod
    def _build(
        cls,
        side: int,
        values: Sequence[int],
        move_count: int,
        storage: StorageKind | str | None,
    ) -> PuzzleState:
        # ``values`` is already known to be a permutation of 0..side²-1.
        cells = make_storage(side, storage)
        blank = 0
        for i, v in enumerate(values):
            cells.set(i, v)
            if v == 0:
                blank = i
        return cls(side, cells, divmod(blank, side), move_count)

    def copy(self) -> PuzzleState:
        """Return an independent state with the same cells and history."""
        return PuzzleState(
            self._side,
            self._cells.copy(),
            (self._blank_row, self._blank_col),
            self._move_count,
        )

    def __copy__(self) -> PuzzleState:
        return self.copy()

    def __deepcopy__(self, memo: dict) -> PuzzleState:
        return self.copy()

    # -- accessors ------------------------------------------------------------

    @property
    def side(self) -> int:
        return self._side

    @property
    def blank_row(self) -> int:
        return self._blank_row

    @property
    def blank_col(self) -> int:
        return self._blank_col

    @property
    def blank_pos(self) -> tuple[int, int]:
        return (self._blank_row, self._blank_col)

    @property
    def move_count(self) -> int:
        return self._move_count

    @move_count.setter
    def move_count(self, value: int) -> None:
        _check_move_count(value)
        self._move_count = value

    @property
    def storage_kind(self) -> StorageKind:
        return self._cells.kind

    @property
    def values(self) -> tuple[int, ...]:
        """All cell values, row-major."""
        return self._cells.values()

    @property
    def tiles(self) -> list[list[int]]:
        """A fresh list-of-rows snapshot of the board."""
        flat = self._cells.values()
        n = self._side
        return [list(flat[r * n : (r + 1) * n]) for r in range(n)]

    def absolute_position(self, row: int, col: int) -> int:
        """Row-major index of ``(row, col)``."""
        self._check_coords(row, col)
        return row * self._side + col

    def get_value(self, row: int, col: int) -> int:
        return self._cells.get(self.absolute_position(row, col))

    def set_value(self, value: int, row: int, col: int) -> None:
        """Write one cell.

        Only the coordinate and the value range are checked; keeping the
        cells a permutation is up to the caller (see :meth:`validate`).
        Writing 0 moves the blank cache to ``(row, col)``.
        """
        index = self.absolute_position(row, col)
        if not isinstance(value, int) or not 0 <= value < self._size:
            raise ValueOutOfRangeError(
                f"Value must be in [0, {self._size - 1}], got {value!r}."
            )
        self._cells.set(index, value)
        if value == 0:
            self._blank_row, self._blank_col = row, col

    def validate(self) -> None:
        """Raise InvalidStateError unless the cells are a permutation and
        the blank cache points at the 0 cell."""
        flat = self._cells.values()
        if sorted(flat) != list(range(self._size)):
            raise InvalidStateError(
                f"Cells are not a permutation of 0..{self._size - 1}: {flat}."
            )
        blank = flat.index(0)
        if divmod(blank, self._side) != self.blank_pos:
            raise InvalidStateError(
                f"Blank is at {divmod(blank, self._side)} but tracked at "
                f"{self.blank_pos}."
            )

    # -- queries --------------------------------------------------------------

    def is_solution(self) -> bool:
        """Check if all tiles are in their goal positions."""
        flat = self._cells.values()
        last = self._size - 1
        if flat[last] != 0:
            return False
        return all(flat[i] == i + 1 for i in range(last))

    def is_tile_correct(self, row: int, col: int) -> bool:
        """Check if a specific tile is in its goal position."""
        val = self.get_value(row, col)
        if val == 0:
            return row == self._side - 1 and col == self._side - 1
        return row * self._side + col == val - 1

    # -- moves ----------------------------------------------------------------

    def can_move(self, direction: Direction) -> bool:
        dr, dc = Direction(direction).offset
        r, c = self._blank_row + dr, self._blank_col + dc
        return 0 <= r < self._side and 0 <= c < self._side

    def move(self, direction: Direction) -> None:
        """Move the blank one cell in *direction*, in place.

        Raises IllegalMoveError, leaving the state untouched, when the blank
        would leave the board.
        """
        direction = Direction(direction)
        if not self.can_move(direction):
            raise IllegalMoveError(direction, self.blank_pos)
        dr, dc = direction.offset
        tr, tc = self._blank_row + dr, self._blank_col + dc
        n = self._side
        self._cells.swap(self._blank_row * n + self._blank_col, tr * n + tc)
        self._blank_row, self._blank_col = tr, tc
        self._move_count += 1

    def moved(self, direction: Direction) -> PuzzleState:
        """Return a copy with the blank moved; the receiver is unchanged."""
        direction = Direction(direction)
        if not self.can_move(direction):
            raise IllegalMoveError(direction, self.blank_pos)
        successor = self.copy()
        successor.move(direction)
        return successor

    move_up = partialmethod(move, Direction.UP)
    move_down = partialmethod(move, Direction.DOWN)
    move_left = partialmethod(move, Direction.LEFT)
    move_right = partialmethod(move, Direction.RIGHT)

    moved_up = partialmethod(moved, Direction.UP)
    moved_down = partialmethod(moved, Direction.DOWN)
    moved_left = partialmethod(moved, Direction.LEFT)
    moved_right = partialmethod(moved, Direction.RIGHT)

    def swap_cells(self, row1: int, col1: int, row2: int, col2: int) -> None:
        """Exchange two cells.  The blank cache is not updated."""
        a = self.absolute_position(row1, col1)
        b = self.absolute_position(row2, col2)
        self._cells.swap(a, b)

    def legal_directions(self) -> list[Direction]:
        """Directions the blank can move in, in UP, DOWN, LEFT, RIGHT order."""
        return [d for d in Direction if self.can_move(d)]

    def legal_moves(self) -> list[PuzzleState]:
        """Every successor state, one per legal direction."""
        return [self.moved(d) for d in self.legal_directions()]

    def successors(self) -> Iterator[tuple[Direction, PuzzleState]]:
        """Yield ``(direction, successor)`` pairs in legal-move order."""
        for d in self.legal_directions():
            yield d, self.moved(d)

    # -- canonical form -------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PuzzleState):
            return NotImplemented
        if self._side != other._side:
            return False
        a, b = self._cells, other._cells
        if isinstance(a, PackedStorage) and isinstance(b, PackedStorage):
            return a.word == b.word
        return a.values() == b.values()

    def __hash__(self) -> int:
        return hash((self._side, self._cells.values()))

    def digest(self) -> str:
        """SHA-256 of the side and cells, for keys shared across processes."""
        key = codec.format_line(self._side, self._cells.values())
        return hashlib.sha256(key.encode()).hexdigest()

    # -- text -----------------------------------------------------------------

    def to_line(self) -> str:
        return codec.format_line(self._move_count, self._cells.values())

    def __str__(self) -> str:
        width = len(str(self._size - 1))
        lines = [f"Level {self._move_count}"]
        for row in self.tiles:
            lines.append(" ".join(f"{v:>{width}}" for v in row))
        return "\n".join(lines) + "\n"

    def __repr__(self) -> str:
        return f"PuzzleState.from_line({self.to_line()!r})"

    # -- helpers --------------------------------------------------------------

    def _check_coords(self, row: int, col: int) -> None:
        if not (0 <= row < self._side and 0 <= col < self._side):
            raise IndexOutOfRangeError(
                f"Cell ({row}, {col}) is outside a {self._side}×{self._side} board."
            )


def _check_side(side: int) -> None:
    if not isinstance(side, int) or isinstance(side, bool) or side <= 0:
        raise InvalidArgumentError(f"Side size needs to be at least 1, got {side!r}.")


def _check_move_count(move_count: int) -> None:
    if not isinstance(move_count, int) or isinstance(move_count, bool):
        raise InvalidArgumentError(f"Move count must be an int, got {move_count!r}.")
