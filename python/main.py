#!/usr/bin/env python3
"""Number Line Puzzle solver.

Usage::

    python main.py 3 6 4 1 3 4 2 5 3 0   # list every way through
    python main.py -f rich 1 1 0         # Rich terminal panels
    python main.py --random 8 --seed 7   # solve a generated puzzle
"""

import importlib
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.engine.generator import PuzzleGenerator  # noqa: E402
from backend.errors import MalformedInputError  # noqa: E402
from backend.logging_config import enable_console_logging, logger  # noqa: E402
from frontend.cli.input_handler import parse_tiles  # noqa: E402


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


_RUNNERS = {
    Frontend.vanilla: "frontend.cli.vanilla.app",
    Frontend.rich: "frontend.cli.rich.app",
}


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command(context_settings={"ignore_unknown_options": True})
def main(
    tiles: Optional[list[str]] = typer.Argument(
        None,
        metavar="TILES...",
        help="Puzzle tiles, left to right. The last tile must be 0.",
        show_default=False,
    ),
    frontend: Frontend = typer.Option(
        Frontend.vanilla, "-f", "--frontend",
        envvar="WAYFINDER_FRONTEND",
        help="Output frontend.",
    ),
    random_length: Optional[int] = typer.Option(
        None, "--random",
        min=1, max=20,
        help="Solve a random solvable puzzle of this many tiles. Cannot be combined with TILES.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed for --random.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log search progress to stderr.",
    ),
) -> None:
    """Number Line Puzzle solver."""
    if verbose:
        enable_console_logging("DEBUG")

    if random_length is not None:
        if tiles:
            raise typer.BadParameter(
                "cannot be combined with --random.", param_hint="TILES"
            )
        values = list(PuzzleGenerator.solvable(random_length, seed=seed).values)
        logger.info("Generated puzzle {}", values)
    else:
        try:
            values = parse_tiles(tiles)
        except MalformedInputError as exc:
            typer.echo(str(exc), err=True)
            return

    mod = importlib.import_module(_RUNNERS[frontend])
    mod.run(values)


if __name__ == "__main__":
    app()
