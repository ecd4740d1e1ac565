"""Vanilla terminal frontend — plain print(), no styling library.

Prints each solution as plain text followed by a one-line summary.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence

from backend.engine.puzzle import Puzzle
from backend.errors import InvalidPuzzleError
from backend.logging_config import logger
from frontend.cli.messages import summary_line


def run(tiles: Sequence[int]) -> None:
    """Solve *tiles* and print every way through, shortest first."""
    try:
        puzzle = Puzzle(tiles)
    except InvalidPuzzleError as exc:
        logger.debug("Rejected tiles {}", list(tiles))
        print(exc, file=sys.stderr)
        return

    texts = puzzle.solution_texts()
    for text in texts:
        print(text)
        print()

    # The plural summary has no trailing newline.
    end = "" if len(texts) > 1 else "\n"
    print(summary_line(len(texts)), end=end)
    sys.stdout.flush()
