"""Error types raised while reading and building puzzles."""


class PuzzleError(ValueError):
    """Base class for caller-facing puzzle failures."""


class MalformedInputError(PuzzleError):
    """The raw input could not be turned into a list of tiles."""


class InvalidPuzzleError(PuzzleError):
    """The tiles do not describe a legal puzzle."""
