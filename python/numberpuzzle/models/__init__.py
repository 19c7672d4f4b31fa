from numberpuzzle.models.board import Board, Direction, InvalidIndexError

__all__ = ["Board", "Direction", "InvalidIndexError"]
