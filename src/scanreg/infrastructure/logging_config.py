"""Logging setup for the scan registry."""

from __future__ import annotations

import logging
import sys

LOGGER_NAME = "scanreg"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(level: int = logging.WARNING) -> logging.Logger:
    """Send the package logger to stderr at *level*.

    Safe to call repeatedly: the logger always ends up with exactly one
    handler, bound to whatever ``sys.stderr`` is at call time.
    """
    log = logging.getLogger(LOGGER_NAME)
    log.setLevel(level)
    for existing in list(log.handlers):
        log.removeHandler(existing)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    log.addHandler(handler)
    return log
