"""The puzzle: validated tiles plus the search tree built from them."""

from __future__ import annotations

from collections.abc import Sequence

from backend.engine.enumerator import SolutionEnumerator
from backend.engine.explorer import PathExplorer
from backend.logging_config import logger
from backend.models.node import SearchNode
from backend.models.solution import Solution
from backend.models.tiles import TileSequence


class Puzzle:
    """Validates the tiles and searches them once, on construction.

    Raises :class:`backend.errors.InvalidPuzzleError` before any search
    when the tiles are absent, empty, out of range, or do not end in 0.
    """

    def __init__(self, tiles: Sequence[int] | None) -> None:
        self.tiles: TileSequence = TileSequence.from_values(tiles)
        self.root: SearchNode = PathExplorer.build(self.tiles)
        logger.info("Built search tree for {}", list(self.tiles.values))

    @classmethod
    def from_sequence(cls, tiles: TileSequence) -> "Puzzle":
        """Create a puzzle from an already validated tile sequence."""
        return cls(tiles.values)

    # -- queries --------------------------------------------------------------

    def solutions(self) -> list[Solution]:
        """All solutions, shortest first."""
        return SolutionEnumerator.enumerate(self.tiles, self.root)

    def solution_texts(self) -> list[str]:
        """All solutions, each joined into one multi-line block."""
        return [s.text for s in self.solutions()]

    def count(self) -> int:
        return len(self.solutions())
