"""Loguru helpers shared by the CLI and embedding applications."""

from __future__ import annotations

import sys

from loguru import logger

DEFAULT_FORMAT = "<dim>{time:HH:mm:ss.SSS}</dim> | <level>{level: <8}</level> | <level>{message}</level>"


def configure_logging(level: str = "INFO", *, sink=None) -> int:
    """Replace all loguru sinks with a single one and return its id."""
    logger.remove()
    return logger.add(sink or sys.stderr, level=level.upper(), format=DEFAULT_FORMAT)
