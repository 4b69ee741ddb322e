"""Logging configuration for the ``shopcart`` logger tree.

Modules log through ``logging.getLogger(__name__)``; this module only
decides where those records go and how they look.
"""

from __future__ import annotations

import logging

LOGGER_NAME = "shopcart"

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

_RESET = "\x1b[0m"

# ANSI SGR code per level. Levels in between use the nearest lower entry.
LEVEL_COLORS: dict[int, str] = {
    logging.DEBUG: "\x1b[2m",
    logging.INFO: "\x1b[36m",
    logging.WARNING: "\x1b[33m",
    logging.ERROR: "\x1b[31m",
    logging.CRITICAL: "\x1b[1;31m",
}


class ColorizedFormatter(logging.Formatter):
    """Wraps each formatted record in the colour of its level."""

    def __init__(self, fmt: str = LOG_FORMAT) -> None:
        super().__init__(fmt)
        self._by_level = {
            level: logging.Formatter(f"{code}{fmt}{_RESET}")
            for level, code in LEVEL_COLORS.items()
        }

    def format(self, record: logging.LogRecord) -> str:
        levels = [level for level in self._by_level if level <= record.levelno]
        if not levels:
            return super().format(record)
        return self._by_level[max(levels)].format(record)


def setup_logging(debug: bool) -> logging.Logger:
    """(Re)configure the package logger.

    Safe to call more than once: previously installed handlers are
    replaced, so the stream handler always points at the current stderr.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.propagate = False
    logger.setLevel(logging.DEBUG if debug else logging.WARNING)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(ColorizedFormatter())
    logger.addHandler(stream_handler)
    return logger
