"""
Logging configuration for services using the error helpers.

Sets up structured logging with a consistent format.
Logging must not change program behavior.
Never logs request bodies or error payloads.
"""

import logging
import sys
from typing import Optional

from swerrors.core.config import settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: Optional[str] = None) -> None:
    """Configure structured logging.

    Args:
        level: The log level string (DEBUG, INFO, WARNING, ERROR).
            Defaults to ``settings.log_level``. Unknown values fall
            back to INFO.
    """
    level = level or settings.log_level
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )
