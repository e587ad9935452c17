"""Logging utilities for the jumble engine.

Modules log through :func:`get_logger`; nothing is printed until the CLI (or
an embedding application) calls :func:`configure_logging`.
"""

from __future__ import annotations

import logging
from typing import Optional, TextIO

PACKAGE_LOGGER = "jumble"
LOG_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"
DATE_FORMAT = "%H:%M:%S"

logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())

_console_handler: Optional[logging.Handler] = None


def configure_logging(level: int = logging.INFO, stream: Optional[TextIO] = None) -> logging.Logger:
    """Attach a single console handler to the package logger.

    Calling it again replaces the previous handler instead of stacking a
    second one. The root logger is left alone.
    """

    global _console_handler

    logger = logging.getLogger(PACKAGE_LOGGER)
    if _console_handler is not None:
        logger.removeHandler(_console_handler)

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level)
    _console_handler = handler
    return logger


def level_from_name(name: Optional[str], default: int = logging.INFO) -> int:
    """Map ``"debug"``/``"WARNING"``/... to a logging level, falling back to ``default``."""

    if not name:
        return default
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else default


def get_logger(name: Optional[str] = None) -> logging.Logger:
    return logging.getLogger(name or PACKAGE_LOGGER)
