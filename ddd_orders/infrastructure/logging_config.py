import logging
from typing import Optional

from .config import LoggingConfig

PACKAGE_LOGGER = "ddd_orders"


def setup_logging(config: Optional[LoggingConfig] = None) -> logging.Logger:
    """Configure the package logger; calling it again only updates the level."""
    config = config or LoggingConfig()
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(config.level)

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(config.format))
        logger.addHandler(handler)

    return logger
