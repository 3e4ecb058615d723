"""Logging setup.

Loggers share one stderr handler per name. The level is read from the
``TINYBASIC_LOG_LEVEL`` environment variable and defaults to ``WARNING``.


File: log.py
Version: 0.1.0
License: MIT
"""

import logging
import os
import sys


LOG_LEVEL_ENV = "TINYBASIC_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def get_logger(name: str = "tinybasic") -> logging.Logger:
    """
    Return a configured logger, adding a handler only on first use.
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger
    level = logging.getLevelName(os.environ.get(LOG_LEVEL_ENV, "WARNING").upper())
    logger.setLevel(level if isinstance(level, int) else logging.WARNING)
    handler = logging.StreamHandler(stream=sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    return logger
