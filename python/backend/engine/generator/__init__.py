from backend.engine.generator.generator import PuzzleGenerator

__all__ = ["PuzzleGenerator"]
