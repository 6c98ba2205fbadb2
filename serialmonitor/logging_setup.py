"""Logging configuration for the serial monitor."""

import logging
import os

from rich.logging import RichHandler

LOG_LEVEL_ENV = "SERIALMONITOR_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(name)s: %(message)s"


def get_level_from_env() -> str:
    """Read the log level from ``SERIALMONITOR_LOG_LEVEL``.

    Unknown names fall back to WARNING.
    """
    level = os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).strip().upper()
    if level not in logging.getLevelNamesMapping():
        return DEFAULT_LOG_LEVEL
    return level


def setup_logging(verbose: bool = False) -> None:
    """Configure root logging through rich.

    Args:
        verbose: Log at DEBUG regardless of the environment.
    """
    level = "DEBUG" if verbose else get_level_from_env()

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
        force=True,
    )


def setup_logging_from_env() -> None:
    """Configure logging at the level named by ``SERIALMONITOR_LOG_LEVEL``."""
    setup_logging(verbose=False)
