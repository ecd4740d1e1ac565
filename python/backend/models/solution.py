"""A single way through the puzzle."""

from __future__ import annotations

from dataclasses import dataclass

from backend.models.tiles import Direction


@dataclass(frozen=True)
class Solution:
    lines: tuple[str, ...]
    indices: tuple[int, ...]
    directions: tuple[Direction, ...]

    def __len__(self) -> int:
        return len(self.lines)

    @property
    def text(self) -> str:
        return "\n".join(self.lines)
