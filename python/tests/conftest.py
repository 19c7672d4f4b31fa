"""Shared fixtures. Seeded randomness keeps shuffles reproducible."""

from __future__ import annotations

import random

import pytest

from numberpuzzle.models.board import Board


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def solved_4x4() -> Board:
    return Board.solved(4)
