"""Generates random number line puzzles."""

from __future__ import annotations

import random

from backend.engine.explorer import PathExplorer
from backend.models.tiles import MAX_TILE, MIN_TILE, TileSequence

MAX_ATTEMPTS = 1000


class PuzzleGenerator:
    """Creates puzzles by drawing each interior tile at random."""

    @staticmethod
    def generate(
        length: int, max_tile: int = 9, seed: int | None = None
    ) -> TileSequence:
        """Return a random tile sequence of *length* ending in 0."""
        return PuzzleGenerator._draw(length, max_tile, random.Random(seed))

    @staticmethod
    def solvable(
        length: int, max_tile: int = 9, seed: int | None = None
    ) -> TileSequence:
        """Return a random tile sequence with at least one way through."""
        rng = random.Random(seed)
        for _ in range(MAX_ATTEMPTS):
            tiles = PuzzleGenerator._draw(length, max_tile, rng)
            root = PathExplorer.build(tiles)
            if root.is_terminal or root.children():
                return tiles
        raise RuntimeError(
            f"No solvable {length}-tile puzzle found in {MAX_ATTEMPTS} attempts."
        )

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _draw(length: int, max_tile: int, rng: random.Random) -> TileSequence:
        if length < 1:
            raise ValueError(f"A puzzle needs at least one tile, got {length}.")
        if not MIN_TILE <= max_tile <= MAX_TILE:
            raise ValueError(
                f"max_tile must be between {MIN_TILE} and {MAX_TILE}, got {max_tile}."
            )
        interior = [rng.randint(MIN_TILE, max_tile) for _ in range(length - 1)]
        return TileSequence.from_values(interior + [0])
