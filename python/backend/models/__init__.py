from backend.models.node import SearchNode
from backend.models.solution import Solution
from backend.models.tiles import Direction, TileSequence

__all__ = ["Direction", "SearchNode", "Solution", "TileSequence"]
