"""
Logging setup for applications embedding gpxparser.

The library itself only creates module loggers; call setup_logging()
from the application entry point.
"""

import logging
import sys
from typing import Optional

from gpxparser.config import settings

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: Optional[str] = None) -> None:
    """
    Configure root logging to stdout.

    Args:
        level: Level name; defaults to settings.log_level, or DEBUG when
            settings.debug is set
    """
    if level is None:
        level = "DEBUG" if settings.debug else settings.log_level

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format=LOG_FORMAT,
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
        force=True,
    )
