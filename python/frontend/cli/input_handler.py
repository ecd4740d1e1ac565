"""Turns command-line tokens into puzzle tiles for the CLI frontends."""

from __future__ import annotations

import re
from collections.abc import Sequence

from backend.errors import MalformedInputError

# Plain base-10 digits with an optional sign; no spaces or underscores.
_INTEGER = re.compile(r"[+-]?[0-9]+")


def parse_tiles(tokens: Sequence[str] | None) -> list[int]:
    """Parse each token as a base-10 integer.

    Range and terminal-zero checks are left to puzzle construction, so
    ``"-3"`` parses here and is rejected later.
    """
    if not tokens:
        raise MalformedInputError(
            "ERROR: You must provide the puzzle tiles as command line arguments."
        )
    if not all(_INTEGER.fullmatch(token) for token in tokens):
        raise MalformedInputError("ERROR: All puzzle tiles must be integers.")
    return [int(token, 10) for token in tokens]
