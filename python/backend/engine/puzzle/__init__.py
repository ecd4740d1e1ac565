from backend.engine.puzzle.puzzle import Puzzle

__all__ = ["Puzzle"]
