"""Renders one step of a solution as a line of text."""

from __future__ import annotations

from backend.models.tiles import Direction, TileSequence

SINGLE_TILE_STEP = "[ 0 ]"
_TERMINAL_SEGMENT = ",  0 ]"


def format_step(tiles: TileSequence, index: int, direction: Direction) -> str:
    """Return the board with the tile at *index* marked by *direction*.

    Looks like ``[ 3 ,  4 , 11 ,  2L, 25 ,  0 ]``. The terminal tile is
    never marked since no jump is taken from it.
    """
    if len(tiles) == 1:
        return SINGLE_TILE_STEP

    segments: list[str] = []
    for i in range(tiles.last_index):
        mark = direction.value if i == index else " "
        segments.append(f"{tiles[i]:2d}{mark}")
    return "[" + ", ".join(segments) + _TERMINAL_SEGMENT
