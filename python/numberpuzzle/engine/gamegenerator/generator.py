"""Generates solvable number puzzle boards."""

from __future__ import annotations

import logging
import random

from numberpuzzle.engine.gamerules import SolvabilityChecker
from numberpuzzle.models.board import Board

logger = logging.getLogger(__name__)


class GameGenerator:
    """Creates solvable puzzles by permuting the tiles around a fixed blank."""

    @staticmethod
    def solved(size: int) -> Board:
        """Return the goal-state board (all tiles in order, blank bottom-right)."""
        return Board.solved(size)

    @staticmethod
    def shuffle_non_blank_tiles(board: Board, rng: random.Random) -> None:
        """Randomly permute every cell except the last one, in-place.

        The blank must already sit in the last cell; it is never touched.
        """
        n = board.num_cells - 1
        cells = board.cells
        while n > 1:
            r = rng.randrange(n)
            n -= 1
            cells[r], cells[n] = cells[n], cells[r]

    @staticmethod
    def new_game(board: Board, rng: random.Random | None = None) -> Board:
        """Reset and reshuffle *board* until it is solvable.

        A shuffle that lands back on the solved permutation is accepted.
        """
        if rng is None:
            rng = random.Random()

        attempts = 0
        while True:
            attempts += 1
            board.reset()
            GameGenerator.shuffle_non_blank_tiles(board, rng)
            if SolvabilityChecker.is_solvable(board):
                break
            logger.debug("Shuffle attempt %d is unsolvable, retrying", attempts)

        logger.debug(
            "Generated %d×%d board after %d attempt(s)",
            board.size, board.size, attempts,
        )
        return board

    @staticmethod
    def generate(size: int, rng: random.Random | None = None) -> Board:
        """Return a random *solvable* board of the given size."""
        return GameGenerator.new_game(GameGenerator.solved(size), rng)
