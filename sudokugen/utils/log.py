# -*- coding: utf-8 -*-
"""Logging utilities."""
import logging
import sys
from typing import Optional, Union

_FORMAT = "%(levelname)s %(asctime)s %(filename)s:%(lineno)d] %(message)s"
_DATE_FORMAT = "%m-%d %H:%M:%S"

_root_level = logging.INFO


class NewLineFormatter(logging.Formatter):
    """Adds the logging prefix to newlines to align multi-line messages."""

    def __init__(self, fmt, datefmt=None):
        logging.Formatter.__init__(self, fmt, datefmt)

    def format(self, record):
        msg = logging.Formatter.format(self, record)
        if record.message != "":
            parts = msg.split(record.message)
            msg = msg.replace("\n", "\r\n" + parts[0])
        return msg


def set_log_level(level: Union[int, str]) -> None:
    """Set the level of every logger created through `get_logger`."""
    global _root_level
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    _root_level = level
    logging.getLogger("sudokugen").setLevel(level)


def get_logger(name: Optional[str] = None, level: Optional[int] = None) -> logging.Logger:
    """Get a logger with a single stdout handler.

    Args:
        name (Optional[str]): The name of the logger, usually `__name__`.
        level (Optional[int]): The logging level. Defaults to the level set by
            `set_log_level` (INFO if never set).

    Returns:
        logging.Logger: The configured logger.
    """
    if name is not None and not name.startswith("sudokugen"):
        name = f"sudokugen.{name}"
    logger = logging.getLogger(name or "sudokugen")
    if level is not None:
        logger.setLevel(level)

    root = logging.getLogger("sudokugen")
    if not root.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(NewLineFormatter(_FORMAT, datefmt=_DATE_FORMAT))
        root.addHandler(handler)
        root.setLevel(_root_level)
        root.propagate = False
    return logger
