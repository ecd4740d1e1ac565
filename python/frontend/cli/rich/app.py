"""Rich terminal frontend — one panel per solution.

Uses the ``rich`` library for styled output while sharing the same
backend and summary text as the vanilla CLI.
"""

from __future__ import annotations

from collections.abc import Sequence

import rich.box
from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

from backend.engine.puzzle import Puzzle
from backend.errors import InvalidPuzzleError
from backend.models.solution import Solution
from backend.models.tiles import Direction
from frontend.cli.messages import summary_line

console = Console()
err_console = Console(stderr=True)

_DIRECTION_STYLE = {
    Direction.LEFT: "bold yellow",
    Direction.RIGHT: "bold cyan",
    Direction.NONE: "bold green",
}


# -- solution rendering -------------------------------------------------------


def _render_step(line: str, direction: Direction) -> Text:
    """Return a step line with its marked tile highlighted."""
    text = Text(line, style="white")
    if direction is not Direction.NONE:
        marker = line.find(direction.value)
        if marker != -1:
            text.stylize(_DIRECTION_STYLE[direction], marker - 2, marker + 1)
    return text


def _render_solution(solution: Solution, number: int, total: int) -> Panel:
    steps = [
        _render_step(line, direction)
        for line, direction in zip(solution.lines, solution.directions)
    ]
    noun = "step" if len(solution) == 1 else "steps"
    return Panel(
        Group(*steps),
        title=f"[bold]Way {number}/{total}[/bold]",
        subtitle=f"[dim]{len(solution)} {noun}[/dim]",
        box=rich.box.ROUNDED,
        border_style="bright_blue",
        expand=False,
        padding=(0, 1),
    )


# -- public API ----------------------------------------------------------------


def run(tiles: Sequence[int]) -> None:
    """Solve *tiles* and render every way through, shortest first."""
    try:
        puzzle = Puzzle(tiles)
    except InvalidPuzzleError as exc:
        err_console.print(Text(str(exc), style="bold red"))
        return

    solutions = puzzle.solutions()
    for number, solution in enumerate(solutions, 1):
        console.print(_render_solution(solution, number, len(solutions)))
        console.print()

    style = "yellow" if not solutions else "bold green"
    console.print(Text(summary_line(len(solutions)), style=style))
