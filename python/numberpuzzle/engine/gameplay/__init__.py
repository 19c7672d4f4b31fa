from numberpuzzle.engine.gameplay.game import (
    GamePlay,
    attempt_move,
    is_game_over,
    move,
    new_game,
    start_game,
    tile_at,
)
from numberpuzzle.engine.gameplay.slide import MoveResult, SlideEngine

__all__ = [
    "GamePlay",
    "MoveResult",
    "SlideEngine",
    "attempt_move",
    "is_game_over",
    "move",
    "new_game",
    "start_game",
    "tile_at",
]
