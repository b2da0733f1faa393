"""Logging and console helpers for tinygraph."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "tinygraph"


def get_logger() -> logging.Logger:
    """Return the package logger, attaching a rich handler on first use."""
    logger = logging.getLogger(LOGGER_NAME)
    if not logger.handlers:
        handler = RichHandler(rich_tracebacks=True, show_path=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.setLevel(logging.INFO)
        logger.addHandler(handler)
    return logger


logger = get_logger()


def set_log_level(level: str) -> None:
    """Allow callers (e.g. CLI) to adjust logging verbosity at runtime."""

    level_value = getattr(logging, level.upper(), logging.INFO)
    if not isinstance(level_value, int):
        level_value = logging.INFO
    logger.setLevel(level_value)


console = Console()


__all__ = ["LOGGER_NAME", "console", "get_logger", "logger", "set_log_level"]
