"""Simple logger utilities for the library."""

from __future__ import annotations
import logging
from typing import IO, Optional

LIB_LOGGER_NAME = "kandilli_quake"

def get_logger() -> logging.Logger:
    """
    Return the library logger. By default it has a NullHandler attached so it won't
    spam user applications unless they opt-in.
    """
    logger = logging.getLogger(LIB_LOGGER_NAME)
    if not logger.handlers:
        logger.addHandler(logging.NullHandler())
    return logger

def configure_logging(
    level: int = logging.INFO,
    fmt: Optional[str] = None,
    stream: Optional[IO[str]] = None,
) -> None:
    """
    Attach a StreamHandler to the library logger for quick visibility.

    Parameters
    ----------
    level : int
        Logging level (e.g., logging.WARNING).
    fmt : Optional[str]
        Custom format string. If None, a short default is used.
    stream : Optional[IO[str]]
        Where records go. Defaults to stderr, the CLI passes stdout.

    Examples
    --------
    >>> import sys
    >>> from kandilli_quake.logger import configure_logging
    >>> configure_logging(stream=sys.stdout)
    """
    logger = logging.getLogger(LIB_LOGGER_NAME)
    logger.handlers.clear()

    handler = logging.StreamHandler(stream)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(
        fmt or "[%(asctime)s] %(levelname)s %(name)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    ))

    logger.setLevel(level)
    logger.addHandler(handler)
