"""Search tree node produced by the path explorer."""

from __future__ import annotations

from dataclasses import dataclass

from backend.models.tiles import Direction


@dataclass
class SearchNode:
    """One step of a candidate path.

    Children are only attached when that branch reaches the terminal
    index, so every leaf of a built tree is a terminal node (except a
    childless root when the puzzle has no solution).
    """

    index: int
    is_terminal: bool = False
    left: SearchNode | None = None
    right: SearchNode | None = None

    def children(self) -> list[tuple[Direction, SearchNode]]:
        """Present children, left before right."""
        out: list[tuple[Direction, SearchNode]] = []
        if self.left is not None:
            out.append((Direction.LEFT, self.left))
        if self.right is not None:
            out.append((Direction.RIGHT, self.right))
        return out
