from numberpuzzle.engine.gamegenerator import GameGenerator
from numberpuzzle.engine.gameplay import (
    GamePlay,
    MoveResult,
    SlideEngine,
    attempt_move,
    is_game_over,
    move,
    new_game,
    start_game,
    tile_at,
)
from numberpuzzle.engine.gamerules import SolvabilityChecker, SolvedChecker
from numberpuzzle.engine.gamestate import GameSession

__all__ = [
    "GameGenerator",
    "GamePlay",
    "GameSession",
    "MoveResult",
    "SlideEngine",
    "SolvabilityChecker",
    "SolvedChecker",
    "attempt_move",
    "is_game_over",
    "move",
    "new_game",
    "start_game",
    "tile_at",
]
