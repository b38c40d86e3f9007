"""Move engine: destructive and branching moves, legal move generation."""

from __future__ import annotations

import pytest

from slidingpuzzle import Direction, IllegalMoveError, PuzzleState, StorageKind
from slidingpuzzle.engine import PuzzleGenerator


# -- helpers ------------------------------------------------------------------


def _with_blank_at(side: int, row: int, col: int) -> PuzzleState:
    """Solved board with the blank walked to ``(row, col)``."""
    state = PuzzleState.solved(side)
    for _ in range(side - 1 - col):
        state.move_left()
    for _ in range(side - 1 - row):
        state.move_up()
    return state


def _snapshot(state: PuzzleState) -> tuple:
    return state.values, state.blank_pos, state.move_count


# -- the side-2 walkthrough ---------------------------------------------------


@pytest.mark.parametrize("storage", [StorageKind.ARRAY, StorageKind.PACKED], ids=str)
def test_side_two_walkthrough(storage: StorageKind) -> None:
    state = PuzzleState.from_line("0 1 2 3 0", storage=storage)
    assert state.blank_pos == (1, 1)

    left = state.moved_left()
    assert left.to_line() == "1 1 2 0 3"
    assert not left.is_solution()
    assert state.to_line() == "0 1 2 3 0"

    back = left.moved_right()
    assert back.to_line() == "2 1 2 3 0"
    assert back == state
    assert back.is_solution()


# -- destructive moves --------------------------------------------------------


@pytest.mark.parametrize(
    "direction, expected_blank",
    [
        (Direction.UP, (0, 1)),
        (Direction.DOWN, (2, 1)),
        (Direction.LEFT, (1, 0)),
        (Direction.RIGHT, (1, 2)),
    ],
    ids=str,
)
def test_move_in_place(direction: Direction, expected_blank: tuple[int, int]) -> None:
    state = _with_blank_at(3, 1, 1)
    count = state.move_count
    tile = state.get_value(*expected_blank)

    assert state.move(direction) is None

    assert state.blank_pos == expected_blank
    assert state.get_value(1, 1) == tile
    assert state.get_value(*expected_blank) == 0
    assert state.move_count == count + 1
    state.validate()


def test_move_accepts_direction_names() -> None:
    state = PuzzleState.solved(3)
    state.move("up")
    assert state.blank_pos == (1, 2)


@pytest.mark.parametrize(
    "row, col, direction",
    [
        (0, 1, Direction.UP),
        (2, 1, Direction.DOWN),
        (1, 0, Direction.LEFT),
        (1, 2, Direction.RIGHT),
    ],
    ids=lambda v: str(v),
)
def test_illegal_move_is_a_no_op(row: int, col: int, direction: Direction) -> None:
    state = _with_blank_at(3, row, col)
    before = _snapshot(state)

    with pytest.raises(IllegalMoveError) as info:
        state.move(direction)
    assert info.value.direction is direction
    assert info.value.blank_pos == (row, col)
    assert _snapshot(state) == before

    with pytest.raises(IllegalMoveError):
        state.moved(direction)
    assert _snapshot(state) == before


def test_move_up_on_top_row() -> None:
    state = PuzzleState.from_line("4 0 1 2 3")
    with pytest.raises(IllegalMoveError):
        state.move_up()
    assert state.to_line() == "4 0 1 2 3"
    assert state.blank_pos == (0, 0)


def test_single_cell_board_has_no_moves() -> None:
    state = PuzzleState.solved(1)
    for d in Direction:
        with pytest.raises(IllegalMoveError):
            state.move(d)
    assert state.legal_moves() == []


# -- branching moves ----------------------------------------------------------


def test_moved_leaves_receiver_untouched() -> None:
    state = PuzzleState.solved(4)
    before = _snapshot(state)
    successor = state.moved_up()

    assert _snapshot(state) == before
    assert successor.blank_pos == (2, 3)
    assert successor.move_count == 1

    successor.move_left()
    assert _snapshot(state) == before


@pytest.mark.parametrize("seed", range(5))
def test_move_then_opposite_restores_configuration(seed: int) -> None:
    state = PuzzleGenerator.generate(4, steps=40, seed=seed)
    state.move_count = 9
    for direction in state.legal_directions():
        there = state.moved(direction)
        back = there.moved(direction.opposite)
        assert back == state
        assert back.blank_pos == state.blank_pos
        assert back.move_count == state.move_count + 2


def test_per_direction_aliases() -> None:
    state = _with_blank_at(3, 1, 1)
    assert state.moved_up() == state.moved(Direction.UP)
    assert state.moved_down() == state.moved(Direction.DOWN)
    assert state.moved_left() == state.moved(Direction.LEFT)
    assert state.moved_right() == state.moved(Direction.RIGHT)


# -- legal move generation ----------------------------------------------------


@pytest.mark.parametrize(
    "row, col, expected",
    [
        (0, 0, [Direction.DOWN, Direction.RIGHT]),
        (0, 3, [Direction.DOWN, Direction.LEFT]),
        (3, 0, [Direction.UP, Direction.RIGHT]),
        (3, 3, [Direction.UP, Direction.LEFT]),
        (0, 1, [Direction.DOWN, Direction.LEFT, Direction.RIGHT]),
        (2, 0, [Direction.UP, Direction.DOWN, Direction.RIGHT]),
        (3, 2, [Direction.UP, Direction.LEFT, Direction.RIGHT]),
        (1, 3, [Direction.UP, Direction.DOWN, Direction.LEFT]),
        (1, 1, [Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT]),
        (2, 2, [Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT]),
    ],
)
def test_legal_directions_by_blank_position(
    row: int, col: int, expected: list[Direction]
) -> None:
    state = _with_blank_at(4, row, col)
    assert state.legal_directions() == expected
    assert [s for _, s in state.successors()] == state.legal_moves()
    assert len(state.legal_moves()) == len(expected)


def test_legal_moves_order_and_content() -> None:
    state = _with_blank_at(3, 1, 1)
    successors = state.legal_moves()
    assert [s.blank_pos for s in successors] == [(0, 1), (2, 1), (1, 0), (1, 2)]
    assert all(s.move_count == state.move_count + 1 for s in successors)
    assert len(set(successors)) == 4


def test_legal_moves_side_two_corners() -> None:
    for line in ("0 0 1 2 3", "0 1 0 2 3", "0 1 2 0 3", "0 1 2 3 0"):
        assert len(PuzzleState.from_line(line).legal_moves()) == 2


def test_direction_opposites() -> None:
    for d in Direction:
        assert d.opposite.opposite is d
        dr, dc = d.offset
        odr, odc = d.opposite.offset
        assert (dr + odr, dc + odc) == (0, 0)
