"""
Console logging for the genconvert command line.

Library modules only ever call logging.getLogger(__name__); handlers are
attached here, once, by the CLI.
"""
from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

LOGGER_NAME = "genconvert"

_FORMATS = {
    logging.DEBUG: "%(message)s",
    logging.INFO: "%(message)s",
    logging.WARNING: "Warning: %(message)s",
    logging.ERROR: "Error: %(message)s",
    logging.CRITICAL: "Error: %(message)s",
}


class ConsoleFormatter(logging.Formatter):
    """Plain one-line messages, prefixed by severity for warnings and errors."""

    def format(self, record: logging.LogRecord) -> str:
        fmt = _FORMATS.get(record.levelno, "%(levelname)s: %(message)s")
        return logging.Formatter(fmt).format(record)


def level_for(verbose: bool = False, quiet: bool = False) -> int:
    """quiet -> nothing at all, verbose -> DEBUG, otherwise INFO."""
    if quiet:
        return logging.CRITICAL + 1
    if verbose:
        return logging.DEBUG
    return logging.INFO


def setup_logging(verbose: bool = False, quiet: bool = False,
                  stream: Optional[TextIO] = None) -> logging.Logger:
    """
    Configure the package logger with a single console handler.
    Safe to call repeatedly; previous handlers are replaced.
    """
    level = level_for(verbose, quiet)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    # Clear existing handlers
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(ConsoleFormatter())
    logger.addHandler(handler)
    return logger
