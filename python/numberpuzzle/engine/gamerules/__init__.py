from numberpuzzle.engine.gamerules.rules import SolvabilityChecker, SolvedChecker

__all__ = ["SolvabilityChecker", "SolvedChecker"]
