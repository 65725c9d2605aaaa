"""Logging setup"""

import logging
from typing import Optional

from app.config import get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """
    Configure root logging for the application.

    Args:
        level: Level name override; defaults to settings.log_level
    """
    log_level = level or get_settings().log_level
    logging.basicConfig(level=log_level.upper(), format=LOG_FORMAT, force=True)
