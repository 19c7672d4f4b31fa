"""Multi-tile slide: moves every tile between a target cell and the blank."""

from __future__ import annotations

import logging
from typing import NamedTuple

from numberpuzzle.engine.gamerules import SolvedChecker
from numberpuzzle.models.board import Board, Direction

logger = logging.getLogger(__name__)


class MoveResult(NamedTuple):
    moved: bool
    solved_now: bool


NOT_MOVED = MoveResult(moved=False, solved_now=False)


class SlideEngine:
    """Stateless; all methods are static."""

    @staticmethod
    def attempt_move(board: Board, target_index: int) -> MoveResult:
        """Slide tiles so the blank ends up on *target_index*.

        The target must share a row or a column with the blank; every
        tile in between shifts one cell toward the blank. Anything else,
        including clicking the blank itself, leaves the board untouched.
        """
        board.check_index(target_index)
        n = board.size

        c1, r1 = target_index % n, target_index // n
        c2, r2 = board.blank_index % n, board.blank_index // n

        if c1 == c2 and r1 != r2:
            step = n if r1 > r2 else -n
        elif r1 == r2 and c1 != c2:
            step = 1 if c1 > c2 else -1
        else:
            return NOT_MOVED

        cells = board.cells
        blank = board.blank_index
        while blank != target_index:
            cells[blank] = cells[blank + step]
            blank += step
        cells[blank] = 0
        board.blank_index = blank

        logger.debug("Blank slid from %d to %d", r2 * n + c2, blank)
        return MoveResult(moved=True, solved_now=SolvedChecker.is_solved(board))

    @staticmethod
    def target_for(board: Board, direction: Direction) -> int | None:
        """Return the index of the tile that would slide in *direction*.

        E.g. ``Direction.UP`` names the tile **below** the blank.
        Returns ``None`` when there is no such tile.
        """
        br, bc = board.position_of(board.blank_index)

        # UP   → tile at (br+1, bc) moves up
        # DOWN → tile at (br-1, bc) moves down
        # LEFT → tile at (br, bc+1) moves left
        # RIGHT→ tile at (br, bc-1) moves right
        offsets = {
            Direction.UP: (1, 0),
            Direction.DOWN: (-1, 0),
            Direction.LEFT: (0, 1),
            Direction.RIGHT: (0, -1),
        }
        dr, dc = offsets[direction]
        tr, tc = br + dr, bc + dc

        if not (0 <= tr < board.size and 0 <= tc < board.size):
            return None
        return board.index_of(tr, tc)
