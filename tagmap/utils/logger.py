"""Utilities for logging.

Authors: tagmap contributors
"""

import logging
import sys
from datetime import datetime, timezone
from logging import Logger

LOGGER_NAME = "tagmap-logger"


class UTCFormatter(logging.Formatter):
    """Formatter that stamps records with UTC time."""

    def formatTime(self, record, datefmt=None):
        dt = datetime.fromtimestamp(record.created, tz=timezone.utc)
        if datefmt:
            return dt.strftime(datefmt)
        return dt.strftime("%Y-%m-%d %H:%M:%S")


def get_logger() -> Logger:
    """Get the main logger.

    All modules share a single named logger writing to stdout.

    Log format:
        "2025-10-28 00:00:45 [tag_map.py] INFO: message"

    Returns:
        Logger: Configured logger instance
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.INFO)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        fmt = "%(asctime)s [%(filename)s] %(levelname)s: %(message)s"
        handler.setFormatter(UTCFormatter(fmt, datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(handler)

    return logger
