"""Tile sequence model for the number line puzzle."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import StrEnum

from backend.errors import InvalidPuzzleError

MIN_TILE = 0
MAX_TILE = 99


class Direction(StrEnum):
    LEFT = "L"
    RIGHT = "R"
    NONE = " "

    @property
    def sign(self) -> int:
        """Multiplier applied to a tile value when jumping this way."""
        return {Direction.LEFT: -1, Direction.RIGHT: 1}.get(self, 0)


@dataclass(frozen=True)
class TileSequence:
    """The board: jump distances ending in a terminal zero.

    Instances are only built through :meth:`from_values`, which enforces
    the invariants (non-empty, values in [0, 99], last value 0).
    """

    values: tuple[int, ...]

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_values(cls, values: Sequence[int] | None) -> TileSequence:
        """Validate *values* and wrap them.

        Example::

            TileSequence.from_values([3, 1, 2, 1, 0])
        """
        if values is None:
            raise InvalidPuzzleError(
                "Cannot instantiate a puzzle with a null tiles array."
            )
        if len(values) == 0:
            raise InvalidPuzzleError("Cannot instantiate a puzzle with no tiles.")
        if values[-1] != 0:
            raise InvalidPuzzleError("The last tile must have a value of 0.")
        for v in values:
            if v < MIN_TILE:
                raise InvalidPuzzleError(
                    "ERROR: the puzzle values have to be positive integers."
                )
            if v > MAX_TILE:
                raise InvalidPuzzleError(
                    "ERROR: the puzzle values have to be less than 100."
                )
        return cls(values=tuple(values))

    # -- queries --------------------------------------------------------------

    def __len__(self) -> int:
        return len(self.values)

    def __getitem__(self, index: int) -> int:
        return self.values[index]

    @property
    def last_index(self) -> int:
        return len(self.values) - 1

    def in_bounds(self, index: int) -> bool:
        return 0 <= index <= self.last_index

    def jump(self, index: int, direction: Direction) -> int:
        """Return the index reached by jumping from *index* in *direction*."""
        return index + direction.sign * self.values[index]
