"""Logging configuration.

The library only emits DEBUG records through module loggers under "cline".
Host applications that want to see them call configure_logging().
"""
from __future__ import annotations

import logging
import sys
from typing import IO, Optional

LOGGER_NAME = "cline"

# Module-level state
_handler: Optional[logging.Handler] = None


def configure_logging(
    level: int | str = logging.DEBUG,
    stream: IO[str] | None = None,
) -> logging.Handler:
    """Attach a stream handler to the cline logger.

    Calling it again replaces the previous handler, so records are never
    emitted twice.

    Args:
        level: Logging level (int or level name such as "DEBUG")
        stream: Output stream (default stderr)

    Returns:
        The installed handler
    """
    global _handler

    if isinstance(level, str):
        name = level
        level = logging.getLevelName(name.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {name}")

    close_logging()

    _handler = logging.StreamHandler(stream or sys.stderr)
    _handler.setLevel(level)
    _handler.setFormatter(logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))

    logger = logging.getLogger(LOGGER_NAME)
    logger.addHandler(_handler)
    logger.setLevel(level)
    return _handler


def close_logging() -> None:
    """Remove the handler installed by configure_logging()."""
    global _handler

    if _handler is not None:
        logging.getLogger(LOGGER_NAME).removeHandler(_handler)
        _handler.close()
        _handler = None
