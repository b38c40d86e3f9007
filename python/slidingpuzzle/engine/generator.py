"""Generates scrambled sliding puzzle states."""

from __future__ import annotations

import logging
import random

from slidingpuzzle import settings
from slidingpuzzle.errors import InvalidArgumentError
from slidingpuzzle.models.direction import Direction
from slidingpuzzle.models.puzzle import PuzzleState
from slidingpuzzle.models.storage import StorageKind

logger = logging.getLogger(__name__)


class PuzzleGenerator:
    """Creates reachable puzzles by walking the blank from the solved state.

    Every generated state is a random walk away from the goal, so it is
    solvable without any parity check.
    """

    @staticmethod
    def solved(side: int, storage: StorageKind | str | None = None) -> PuzzleState:
        """Return the goal-state board (all tiles in order, blank bottom-right)."""
        return PuzzleState.solved(side, storage)

    @staticmethod
    def scramble(
        state: PuzzleState,
        steps: int | None = None,
        rng: random.Random | None = None,
    ) -> None:
        """Scramble *state* in-place using random legal moves.

        The walk never immediately undoes its previous move.  The move
        count is reset afterwards: a scrambled board is a new root.
        """
        if steps is None:
            steps = state.side * state.side * settings.SCRAMBLE_FACTOR
        rng = rng or random.Random()
        prev: Direction | None = None

        for _ in range(steps):
            options = state.legal_directions()
            if not options:
                break
            if prev is not None and prev.opposite in options and len(options) > 1:
                options.remove(prev.opposite)
            prev = rng.choice(options)
            state.move(prev)

        state.move_count = 0

    @staticmethod
    def generate(
        side: int,
        steps: int | None = None,
        seed: int | None = None,
        storage: StorageKind | str | None = None,
    ) -> PuzzleState:
        """Return a scrambled state of the given side.

        The result is never the solved layout, except for ``side == 1``
        where no other layout exists.
        """
        if steps is not None and steps < 1:
            raise InvalidArgumentError(f"Need at least one scramble step, got {steps}.")
        rng = random.Random(seed)
        state = PuzzleGenerator.solved(side, storage)
        if side == 1:
            return state

        PuzzleGenerator.scramble(state, steps, rng)
        if state.is_solution():
            # A 2×2 walk cycles back to the goal every 12 moves; one step
            # off the goal is never the goal.
            state.move(rng.choice(state.legal_directions()))
            state.move_count = 0

        logger.debug("Generated %d×%d puzzle: %s", side, side, state.to_line())
        return state
