"""Structured logger setup shared across services."""

import logging
import os
from typing import Set

from pythonjsonlogger import jsonlogger

_configured: Set[str] = set()


def get_logger(name: str) -> logging.Logger:
    """
    Configure a JSON logger once and reuse it.

    Log records go to stderr so they never interleave with the
    human-readable output channel on stdout.
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    handler = logging.StreamHandler()
    formatter = jsonlogger.JsonFormatter(
        "%(levelname)s %(name)s %(message)s %(asctime)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.setLevel(os.environ.get("LOG_LEVEL", "INFO").upper())
    logger.propagate = False
    _configured.add(name)
    return logger


def set_level(level: str) -> None:
    """Apply a level to every logger created through get_logger."""
    for name in _configured:
        logging.getLogger(name).setLevel(level.upper())
