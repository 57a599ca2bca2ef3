"""Shared logger for the storefront."""
from __future__ import annotations

import logging
import os

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str | None = None) -> logging.Logger:
    """Configure the root handler once and return the storefront logger."""
    level_name = (level or os.getenv("LOG_LEVEL", "INFO")).strip().upper()
    log_level = getattr(logging, level_name, logging.INFO)

    logging.basicConfig(level=log_level, format=LOG_FORMAT)

    storefront_logger = logging.getLogger("storefront")
    storefront_logger.setLevel(log_level)
    return storefront_logger


logger = setup_logging()
