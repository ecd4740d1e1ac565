"""Text shared by the CLI frontends."""

from __future__ import annotations


def summary_line(count: int) -> str:
    """The closing line reporting how many ways were found."""
    if count == 0:
        return "No way through this puzzle."
    if count == 1:
        return "There is 1 way through the puzzle."
    return f"There are {count} ways through the puzzle."
