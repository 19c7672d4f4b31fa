"""Core gameplay logic: processes moves and tracks the win condition."""

from __future__ import annotations

import logging
import random

from numberpuzzle.engine.gamegenerator import GameGenerator
from numberpuzzle.engine.gameplay.slide import NOT_MOVED, MoveResult, SlideEngine
from numberpuzzle.engine.gamerules import SolvedChecker
from numberpuzzle.engine.gamestate import GameSession
from numberpuzzle.models.board import Board, Direction

logger = logging.getLogger(__name__)


# -- session API --------------------------------------------------------------


def new_game(size: int, rng: random.Random | None = None) -> GameSession:
    """Create a session of the given size with a freshly shuffled board."""
    return start_game(GameSession(size, rng))


def start_game(session: GameSession) -> GameSession:
    """Reshuffle *session*'s board and put a new game in progress."""
    GameGenerator.new_game(session.board, session.rng)
    session.begin()
    return session


def attempt_move(session: GameSession, target_index: int) -> MoveResult:
    """Slide toward *target_index*; ignored while the game is over."""
    session.board.check_index(target_index)
    if session.game_over:
        return NOT_MOVED

    result = SlideEngine.attempt_move(session.board, target_index)
    if result.moved:
        session.increment_moves()
    return _settle(session, result)


def move(session: GameSession, direction: Direction) -> MoveResult:
    """Slide the tile next to the blank in *direction*, if there is one."""
    target = SlideEngine.target_for(session.board, direction)
    if target is None:
        if session.game_over:
            return NOT_MOVED
        return _settle(session, NOT_MOVED)
    return attempt_move(session, target)


def _settle(session: GameSession, result: MoveResult) -> MoveResult:
    """End the game once any gesture, even a no-op, finds the board solved."""
    if not SolvedChecker.is_solved(session.board):
        return result
    session.finish()
    logger.info("Puzzle solved in %d moves", session.moves)
    return result._replace(solved_now=True)


def is_game_over(session: GameSession) -> bool:
    return session.game_over


def tile_at(session: GameSession, index: int) -> int:
    """Return the tile at *index* (0 = blank)."""
    return session.board.tile_at(index)


# -- object facade ------------------------------------------------------------


class GamePlay:
    """Orchestrates a single game session for a frontend."""

    def __init__(self, size: int, rng: random.Random | None = None) -> None:
        self.size = size
        self.state = new_game(size, rng)

    @classmethod
    def from_board(cls, board: Board) -> GamePlay:
        """Create a game from an existing board; a solved board is already over."""
        obj = object.__new__(cls)
        obj.size = board.size
        obj.state = GameSession(board.size)
        obj.state.board = board
        obj.state.begin()
        if SolvedChecker.is_solved(board):
            obj.state.finish()
        return obj

    @property
    def board(self) -> Board:
        return self.state.board

    @property
    def is_game_over(self) -> bool:
        return is_game_over(self.state)

    def restart(self) -> None:
        start_game(self.state)

    def attempt_move(self, target_index: int) -> MoveResult:
        return attempt_move(self.state, target_index)

    def move(self, direction: Direction) -> MoveResult:
        return move(self.state, direction)

    def tile_at(self, index: int) -> int:
        return tile_at(self.state, index)
