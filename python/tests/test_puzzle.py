"""Construction, tree shape, and step formatting."""

from __future__ import annotations

import pytest

from backend.engine.explorer import PathExplorer
from backend.engine.formatting import SINGLE_TILE_STEP, format_step
from backend.engine.puzzle import Puzzle
from backend.errors import InvalidPuzzleError, PuzzleError
from backend.models.tiles import Direction, TileSequence


# -- construction -------------------------------------------------------------


@pytest.mark.parametrize(
    ("tiles", "message"),
    [
        (None, "Cannot instantiate a puzzle with a null tiles array."),
        ([], "Cannot instantiate a puzzle with no tiles."),
        ([1, 2, 3], "The last tile must have a value of 0."),
        ([2, -1, 0], "ERROR: the puzzle values have to be positive integers."),
        ([2, 100, 0], "ERROR: the puzzle values have to be less than 100."),
    ],
    ids=[
        "none",
        "empty",
        "last-not-zero",
        "negative",
        "above-99-reports-less-than-100",
    ],
)
def test_invalid_construction(tiles: list[int] | None, message: str) -> None:
    with pytest.raises(InvalidPuzzleError) as excinfo:
        Puzzle(tiles)
    assert str(excinfo.value) == message


def test_invalid_puzzle_is_a_value_error() -> None:
    assert issubclass(InvalidPuzzleError, PuzzleError)
    assert issubclass(InvalidPuzzleError, ValueError)


def test_boundary_values_accepted() -> None:
    puzzle = Puzzle([99, 0, 0])
    assert puzzle.tiles.values == (99, 0, 0)
    assert puzzle.solutions() == []


def test_tiles_are_copied() -> None:
    raw = [1, 1, 0]
    puzzle = Puzzle(raw)
    raw[0] = 5
    assert puzzle.tiles.values == (1, 1, 0)


def test_from_sequence() -> None:
    tiles = TileSequence.from_values([1, 1, 0])
    assert Puzzle.from_sequence(tiles).count() == 1


# -- tree shape ---------------------------------------------------------------


def test_single_tile_root_is_terminal() -> None:
    root = PathExplorer.build(TileSequence.from_values([0]))
    assert root.index == 0
    assert root.is_terminal
    assert root.children() == []


def test_unsolvable_root_has_no_children() -> None:
    root = PathExplorer.build(TileSequence.from_values([3, 1, 0]))
    assert root.index == 0
    assert not root.is_terminal
    assert root.left is None and root.right is None


def test_dead_branches_are_pruned() -> None:
    # Paths: 0 -> 3 -> 4 and 0 -> 3 -> 2 -> 4. Index 2 jumping left
    # returns to 0 and is dropped.
    root = PathExplorer.build(TileSequence.from_values([3, 1, 2, 1, 0]))
    assert root.left is None
    middle = root.right
    assert middle is not None and middle.index == 3
    assert middle.right is not None and middle.right.is_terminal
    assert middle.left is not None and middle.left.index == 2
    assert middle.left.left is None
    assert middle.left.right is not None and middle.left.right.is_terminal


@pytest.mark.parametrize(
    ("start", "visited", "expected"),
    [
        (-1, (), False),
        (3, (), False),
        (2, (), True),
        (1, (1,), False),
    ],
    ids=["left-of-board", "right-of-board", "terminal", "cycle"],
)
def test_explore_base_cases(
    start: int, visited: tuple[int, ...], expected: bool
) -> None:
    tiles = TileSequence.from_values([1, 1, 0])
    node, found = PathExplorer.explore(tiles, start, visited)
    assert found is expected
    assert (node is not None) is expected


def test_explore_interior_zero_is_dead_end() -> None:
    tiles = TileSequence.from_values([1, 0, 0])
    assert PathExplorer.explore(tiles, 1, (0,)) == (None, False)


# -- formatting ---------------------------------------------------------------


@pytest.mark.parametrize(
    ("index", "direction", "expected"),
    [
        (0, Direction.RIGHT, "[ 3R,  6 , 14 ,  0 ]"),
        (1, Direction.LEFT, "[ 3 ,  6L, 14 ,  0 ]"),
        (2, Direction.RIGHT, "[ 3 ,  6 , 14R,  0 ]"),
        (3, Direction.NONE, "[ 3 ,  6 , 14 ,  0 ]"),
    ],
    ids=["first", "middle", "two-digit", "terminal"],
)
def test_format_step(index: int, direction: Direction, expected: str) -> None:
    tiles = TileSequence.from_values([3, 6, 14, 0])
    assert format_step(tiles, index, direction) == expected


def test_format_single_tile() -> None:
    tiles = TileSequence.from_values([0])
    assert format_step(tiles, 0, Direction.NONE) == SINGLE_TILE_STEP == "[ 0 ]"
