"""
Logging setup for the Parcel Tracker.

Store and service modules log through child loggers of ``parcel_tracker``
and attach structured context via ``extra``.
"""

import logging
from typing import Optional

from parcel_tracker.app.core.config import settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Package root logger
logger = logging.getLogger("parcel_tracker")


def configure_logging(level: Optional[str] = None) -> None:
    """Configure logging based on LOG_LEVEL setting (or an explicit level)."""
    level_name = (level or settings.log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
    )
    logger.setLevel(getattr(logging, level_name, logging.INFO))
