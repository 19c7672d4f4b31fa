"""Multi-tile slides on a bare board."""

from __future__ import annotations

import pytest

from numberpuzzle.engine.gameplay import MoveResult, SlideEngine
from numberpuzzle.models.board import Board, Direction, InvalidIndexError


def _is_consistent(board: Board) -> bool:
    return (
        sorted(board.cells) == list(range(board.num_cells))
        and board.cells[board.blank_index] == 0
    )


def test_slide_three_tiles_along_row(solved_4x4: Board) -> None:
    result = SlideEngine.attempt_move(solved_4x4, 12)

    assert result == MoveResult(moved=True, solved_now=False)
    assert solved_4x4.cells[12:] == [0, 13, 14, 15]
    assert solved_4x4.blank_index == 12
    assert _is_consistent(solved_4x4)


def test_slide_three_tiles_along_column(solved_4x4: Board) -> None:
    SlideEngine.attempt_move(solved_4x4, 3)

    assert [solved_4x4.cells[i] for i in (3, 7, 11, 15)] == [0, 4, 8, 12]
    assert solved_4x4.blank_index == 3
    assert _is_consistent(solved_4x4)


def test_single_step_slide() -> None:
    board = Board.from_flat(3, [1, 2, 3, 4, 0, 5, 7, 8, 6])
    SlideEngine.attempt_move(board, 5)
    assert board.cells == [1, 2, 3, 4, 5, 0, 7, 8, 6]
    assert board.blank_index == 5


@pytest.mark.parametrize("target", [15, 0, 5, 10, 6])
def test_blank_or_misaligned_target_is_noop(solved_4x4: Board, target: int) -> None:
    before = solved_4x4.copy()
    result = SlideEngine.attempt_move(solved_4x4, target)

    assert result == MoveResult(moved=False, solved_now=False)
    assert solved_4x4 == before


@pytest.mark.parametrize("target", [-1, 16])
def test_out_of_range_target_raises(solved_4x4: Board, target: int) -> None:
    before = solved_4x4.copy()
    with pytest.raises(InvalidIndexError):
        SlideEngine.attempt_move(solved_4x4, target)
    assert solved_4x4 == before


@pytest.mark.parametrize("target", [0, 3, 8, 12, 13, 14])
def test_inverse_move_restores_board(target: int) -> None:
    board = Board.from_flat(4, [5, 1, 2, 3, 9, 6, 7, 4, 13, 10, 11, 8, 14, 15, 12, 0])
    before = board.copy()
    origin = board.blank_index

    if SlideEngine.attempt_move(board, target).moved:
        SlideEngine.attempt_move(board, origin)
    assert board == before


def test_move_that_solves_reports_it() -> None:
    board = Board.from_flat(4, [1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 0, 13, 14, 15])
    assert SlideEngine.attempt_move(board, 15) == MoveResult(moved=True, solved_now=True)


def test_target_for_directions(solved_4x4: Board) -> None:
    assert SlideEngine.target_for(solved_4x4, Direction.DOWN) == 11
    assert SlideEngine.target_for(solved_4x4, Direction.RIGHT) == 14
    assert SlideEngine.target_for(solved_4x4, Direction.UP) is None
    assert SlideEngine.target_for(solved_4x4, Direction.LEFT) is None
