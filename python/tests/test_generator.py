"""Shuffling and new-game generation."""

from __future__ import annotations

import random

import pytest

from numberpuzzle.engine.gamegenerator import GameGenerator
from numberpuzzle.engine.gamerules import SolvabilityChecker
from numberpuzzle.models.board import Board


@pytest.mark.parametrize("size", [2, 3, 4, 6])
def test_generated_board_is_solvable_permutation(size: int, rng: random.Random) -> None:
    board = GameGenerator.generate(size, rng)
    assert sorted(board.cells) == list(range(size * size))
    assert board.blank_index == size * size - 1
    assert board.cells[board.blank_index] == 0
    assert SolvabilityChecker.is_solvable(board)


def test_shuffle_never_moves_blank(rng: random.Random) -> None:
    board = Board.solved(4)
    for _ in range(50):
        GameGenerator.shuffle_non_blank_tiles(board, rng)
        assert board.cells[15] == 0
        assert board.blank_index == 15
        assert sorted(board.cells) == list(range(16))


def test_shuffle_draws_shrinking_bounds() -> None:
    class Recorder(random.Random):
        def __init__(self) -> None:
            super().__init__(0)
            self.bounds: list[int] = []

        def randrange(self, *args, **kwargs):  # type: ignore[override]
            self.bounds.append(args[0])
            return args[0] - 1  # always swap in place

    recorder = Recorder()
    board = Board.solved(3)
    GameGenerator.shuffle_non_blank_tiles(board, recorder)
    assert recorder.bounds == [8, 7, 6, 5, 4, 3, 2]
    assert board.cells == [1, 2, 3, 4, 5, 6, 7, 8, 0]


def test_same_seed_same_game() -> None:
    first = GameGenerator.generate(4, random.Random(42))
    second = GameGenerator.generate(4, random.Random(42))
    assert first.cells == second.cells


def test_new_game_retries_until_solvable() -> None:
    # 2×2 boards only have three tiles; half of their shuffles are odd.
    rng = random.Random(7)
    for _ in range(20):
        board = GameGenerator.new_game(Board.solved(2), rng)
        assert SolvabilityChecker.is_solvable(board)


def test_solved_shuffle_is_accepted() -> None:
    class Identity(random.Random):
        def randrange(self, *args, **kwargs):  # type: ignore[override]
            return args[0] - 1

    board = GameGenerator.generate(4, Identity())
    assert board.cells == Board.solved(4).cells


def test_size_one_board() -> None:
    board = GameGenerator.generate(1, random.Random(0))
    assert board.cells == [0]
