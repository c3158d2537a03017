"""
    Logging setup for the sexpr command line.  Severity names are coloured
    on VT-100 terminals; an optional file handler keeps a plain copy.
"""

from __future__ import annotations

import logging
import sys
from typing import IO

LOGGER_NAME = "sexpr_core"

# \033[1;<30+color>m ... \033[0m
RESET_SEQ = "\033[0m"
COLOR_SEQ = "\033[1;%dm"


def has_a_tty(stream: IO[str]) -> bool:
    """True when *stream* is attached to a terminal."""
    try:
        return stream.isatty()
    except (AttributeError, ValueError):
        return False


def color_me(color: int):
    """Return a function that wraps a message in the given ANSI colour."""
    color_seq = COLOR_SEQ % (30 + color)

    def closure(msg: str) -> str:
        return color_seq + msg + RESET_SEQ
    return closure


class ColoredFormatter(logging.Formatter):
    """Pads and colours the level name: 1 = red, 2 = green, 3 = yellow, 4 = blue."""

    BLACK, RED, GREEN, YELLOW, BLUE, MAGENTA, CYAN, WHITE = range(8)

    colors = {
        'WARNING': color_me(YELLOW),
        'DEBUG': color_me(BLUE),
        'CRITICAL': color_me(RED),
        'ERROR': color_me(RED),
        'INFO': color_me(GREEN)
    }

    def __init__(self, msg: str, use_color: bool = True, datefmt: str | None = None) -> None:
        super().__init__(msg, datefmt=datefmt)
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        # other handlers share the record; format a copy
        orig = record.__dict__
        record.__dict__ = record.__dict__.copy()
        levelname = record.levelname
        prn_name = levelname + ' ' * (8 - len(levelname))

        if self.use_color and levelname in self.colors:
            record.levelname = self.colors[levelname](prn_name)
        else:
            record.levelname = prn_name

        try:
            return super().format(record)
        finally:
            record.__dict__ = orig


LOG_FORMAT = '%(asctime)s - %(levelname)s - %(name)-8s - %(message)s'


def setup_loggers(def_level: int = logging.WARNING, log_fname: str | None = None) -> logging.Logger:
    """Attach a coloured stream handler (and a file handler if asked) to the
    ``sexpr_core`` logger.  Calling it again replaces the earlier handlers."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    stream = sys.stderr
    sh = logging.StreamHandler(stream)
    sh.setLevel(def_level)
    sh.setFormatter(ColoredFormatter(LOG_FORMAT, use_color=has_a_tty(stream), datefmt="%H:%M:%S"))
    logger.addHandler(sh)

    if log_fname is not None:
        fh = logging.FileHandler(log_fname)
        fh.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))
        fh.setLevel(logging.DEBUG)
        logger.addHandler(fh)

    return logger
