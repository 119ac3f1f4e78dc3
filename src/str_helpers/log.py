"""str_helpers.log

Logger setup for the package and its command-line tool.
"""
from __future__ import annotations

import logging
from typing import Union

LOGGER_NAME = "str_helpers"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logger(level: Union[int, str] = logging.WARNING) -> logging.Logger:
    """Attach a stream handler to the ``str_helpers`` logger (once) and set its level."""
    logger = logging.getLogger(LOGGER_NAME)
    if not logger.handlers:
        h = logging.StreamHandler()
        h.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(h)
        logger.propagate = False
    logger.setLevel(level)
    return logger
