"""Logging setup shared by the CLI and embedding applications."""

import logging
from typing import Optional

from labyrinth.config import Settings, get_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(settings: Optional[Settings] = None) -> logging.Logger:
    """Configure root logging from settings and return the package logger."""
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.effective_log_level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
    )
    logger = logging.getLogger("labyrinth")
    logger.setLevel(settings.effective_log_level)
    return logger
