"""Loguru setup shared by the engine and the CLI frontends."""

from __future__ import annotations

import sys

from loguru import logger

# Silent by default; the CLI opts in with enable_console_logging().
logger.remove()

_console_sink: int | None = None


def enable_console_logging(level: str = "INFO") -> None:
    """Send log records at *level* or above to stderr."""
    global _console_sink
    if _console_sink is not None:
        logger.remove(_console_sink)
    _console_sink = logger.add(
        sys.stderr, format="{time:HH:mm:ss} | {level} | {message}", level=level
    )


__all__ = ["logger", "enable_console_logging"]
