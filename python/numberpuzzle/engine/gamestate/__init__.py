from numberpuzzle.engine.gamestate.state import GameSession

__all__ = ["GameSession"]
