"""Win and solvability rules."""

from __future__ import annotations

from numberpuzzle.models.board import Board


class SolvedChecker:
    """Stateless; all methods are static."""

    @staticmethod
    def is_solved(board: Board) -> bool:
        """Check if all tiles are in their goal positions."""
        last = board.num_cells - 1
        if board.tile_at(last) != 0:
            return False
        for i in range(last - 1, -1, -1):
            if board.tile_at(i) != i + 1:
                return False
        return True


class SolvabilityChecker:
    """Inversion-parity test for boards whose blank is in the last cell.

    The general 15-puzzle rule combines the inversion parity with the
    blank's row distance from its goal row. Shuffles here only permute
    the non-blank tiles and leave the blank in the last cell, so that
    distance is always zero and parity alone decides. A shuffle that
    moves the blank would need the row term back.
    """

    @staticmethod
    def count_inversions(board: Board) -> int:
        """Count pairs ``j < i < N²-1`` where the tile at ``j`` is larger."""
        num_tiles = board.num_cells - 1
        inversions = 0
        for i in range(num_tiles):
            for j in range(i):
                if board.tile_at(j) > board.tile_at(i):
                    inversions += 1
        return inversions

    @staticmethod
    def is_solvable(board: Board) -> bool:
        """Return True if *board* can reach the goal state."""
        return SolvabilityChecker.count_inversions(board) % 2 == 0
