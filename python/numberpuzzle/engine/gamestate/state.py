"""Tracks the mutable state of one game session."""

from __future__ import annotations

import random
import time

from numberpuzzle.models.board import Board


class GameSession:
    """Holds the board, the game-over flag, the move counter and the clock.

    A fresh session shows the solved board with ``game_over`` set: no game
    is in progress until a shuffled board is installed.
    """

    def __init__(self, size: int, rng: random.Random | None = None) -> None:
        self.size = size
        self.board = Board.solved(size)
        self.rng = rng if rng is not None else random.Random()
        self.game_over: bool = True
        self.moves: int = 0
        self._start_time: float = time.time()
        self._elapsed_banked: float = 0.0
        self._running: bool = False

    # -- lifecycle ------------------------------------------------------------

    def begin(self) -> None:
        """Mark a freshly shuffled board as the game in progress."""
        self.game_over = False
        self.moves = 0
        self._elapsed_banked = 0.0
        self._start_time = time.time()
        self._running = True

    def finish(self) -> None:
        self.game_over = True
        self.pause()

    # -- time tracking --------------------------------------------------------

    @property
    def elapsed_time(self) -> float:
        if self._running:
            return self._elapsed_banked + (time.time() - self._start_time)
        return self._elapsed_banked

    def pause(self) -> None:
        if self._running:
            self._elapsed_banked += time.time() - self._start_time
            self._running = False

    # -- moves ----------------------------------------------------------------

    def increment_moves(self) -> None:
        self.moves += 1
