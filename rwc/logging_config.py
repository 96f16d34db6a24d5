"""Centralized logging configuration for rwc."""

import logging
import sys


def setup_logging(
    level: int | str = logging.WARNING,
    format_string: str | None = None,
) -> None:
    """
    Configure logging for rwc.

    Log records go to STDERR so they never mix with counts on STDOUT.

    Args:
        level: Logging level, as a number or a name such as "DEBUG" (default WARNING)
        format_string: Optional custom format string
    """
    if format_string is None:
        format_string = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

    if isinstance(level, str):
        name = level
        level = logging.getLevelName(name.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown logging level: {name}")

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(format_string))

    logger = logging.getLogger("rwc")
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
