"""Builds the pruned tree of jump paths that reach the terminal tile."""

from __future__ import annotations

import sys

from backend.logging_config import logger
from backend.models.node import SearchNode
from backend.models.tiles import Direction, TileSequence

# Frames kept free for the caller on top of one frame per tile.
STACK_MARGIN = 1000


class PathExplorer:
    """Stateless explorer — all methods are static."""

    @staticmethod
    def build(tiles: TileSequence) -> SearchNode:
        """Return the search tree rooted at index 0.

        The root is kept even when no path reaches the terminal tile; it
        simply has no children in that case.
        """
        # A path visits each index at most once, so depth is bounded by len.
        needed = len(tiles) + STACK_MARGIN
        if sys.getrecursionlimit() < needed:
            sys.setrecursionlimit(needed)

        root, solvable = PathExplorer.explore(tiles, 0, ())
        logger.debug(
            "Explored {} tiles from index 0, solvable={}", len(tiles), solvable
        )
        return root if root is not None else SearchNode(index=0)

    @staticmethod
    def explore(
        tiles: TileSequence, start_index: int, visited: tuple[int, ...]
    ) -> tuple[SearchNode | None, bool]:
        """Explore every jump path leaving *start_index*.

        *visited* holds the indices on the path above this node. Returns
        the subtree and whether it contains a solution; the subtree is
        ``None`` for branches that never reach the terminal tile.
        """
        if not tiles.in_bounds(start_index):
            return None, False

        if start_index == tiles.last_index:
            return SearchNode(index=start_index, is_terminal=True), True

        # Revisiting an index means the path loops.
        if start_index in visited:
            return None, False

        if tiles[start_index] == 0:
            return None, False

        node = SearchNode(index=start_index)
        path = visited + (start_index,)

        left, has_left = PathExplorer.explore(
            tiles, tiles.jump(start_index, Direction.LEFT), path
        )
        if has_left:
            node.left = left

        right, has_right = PathExplorer.explore(
            tiles, tiles.jump(start_index, Direction.RIGHT), path
        )
        if has_right:
            node.right = right

        if has_left or has_right:
            return node, True
        return None, False
