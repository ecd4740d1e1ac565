"""Walks the search tree level by level to list solutions, shortest first."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass

from backend.engine.formatting import format_step
from backend.logging_config import logger
from backend.models.node import SearchNode
from backend.models.solution import Solution
from backend.models.tiles import Direction, TileSequence


@dataclass(frozen=True)
class _Step:
    index: int
    direction: Direction
    line: str


class SolutionEnumerator:
    """Stateless enumerator — all methods are static."""

    @staticmethod
    def enumerate(tiles: TileSequence, root: SearchNode) -> list[Solution]:
        """Return every solution under *root* in non-decreasing length.

        The queue is FIFO and each edge adds one step, so all solutions of
        a given depth are emitted before any deeper one.
        """
        pending: deque[tuple[SearchNode, tuple[_Step, ...]]] = deque()
        pending.append((root, ()))
        solutions: list[Solution] = []

        while pending:
            node, path = pending.popleft()

            if node.is_terminal:
                # Only the single-tile puzzle reaches here with an empty path.
                if not path:
                    path = (
                        _Step(
                            node.index,
                            Direction.NONE,
                            format_step(tiles, node.index, Direction.NONE),
                        ),
                    )
                solutions.append(SolutionEnumerator._to_solution(path))
                continue

            for direction, child in node.children():
                step = _Step(
                    node.index, direction, format_step(tiles, node.index, direction)
                )
                # Tuples give each branch its own copy of the path.
                pending.append((child, path + (step,)))

        logger.debug("Enumerated {} solutions", len(solutions))
        return solutions

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _to_solution(path: tuple[_Step, ...]) -> Solution:
        return Solution(
            lines=tuple(s.line for s in path),
            indices=tuple(s.index for s in path),
            directions=tuple(s.direction for s in path),
        )
