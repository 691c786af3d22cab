"""Logging setup for the depositos backend."""

import logging
import sys

from depositos.core.config import settings


def setup_logger(name: str = "depositos", level: str | int | None = None) -> logging.Logger:
    """
    Configure the package logger once and return it.

    Module loggers (``logging.getLogger(__name__)``) propagate here.
    """
    log = logging.getLogger(name)
    if log.handlers:
        return log

    log.setLevel(level or settings.LOG_LEVEL)
    fmt = logging.Formatter(
        "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    h = logging.StreamHandler(sys.stderr)
    h.setFormatter(fmt)
    log.addHandler(h)
    return log
