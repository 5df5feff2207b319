"""Logging setup for the mad-lib CLI and library."""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

LOG_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"
LOG_DATEFMT = "%H:%M:%S"
ROOT_LOGGER_NAME = "madlib"


def configure_logging(level: int = logging.INFO, stream: Optional[TextIO] = None) -> None:
    """Route all diagnostics to stderr at ``level``.

    stdout carries only the ``Output file: ...`` confirmation, so the single
    root handler writes to ``stream`` (the current ``sys.stderr`` by default).
    Calling again replaces the handler, which lets ``main`` apply
    ``MADLIB_LOG_LEVEL`` after module-level loggers already exist.
    """

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)


def parse_level(name: Optional[str], default: int = logging.WARNING) -> int:
    """Translate a level name such as ``"debug"`` into a logging constant."""

    if not name:
        return default
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else default


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger under the ``madlib`` namespace.

    Importing any ``madlib`` module before ``main`` runs still gets a working
    stderr handler at INFO.
    """

    if not logging.getLogger().handlers:
        configure_logging()
    return logging.getLogger(name or ROOT_LOGGER_NAME)
