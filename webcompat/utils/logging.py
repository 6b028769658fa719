"""
Logging utilities for webcompat
Provides consistent logging configuration and the category logging collaborator
"""

import logging
import sys
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

_CATEGORY_LEVELS = {
    'error': logging.ERROR,
    'warning': logging.WARNING,
    'debug': logging.DEBUG,
}


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a logger instance with consistent configuration"""
    logger_name = name or __name__
    logger = logging.getLogger(logger_name)

    if not logger.handlers:
        # Configure logger if not already configured
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)

    return logger


def setup_logging(level: str = 'INFO') -> None:
    """Setup logging configuration for the entire application"""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)]
    )


class CategoryLog:
    """Logging collaborator called as ``log(message, category)``.

    The category picks the logger (``webcompat.<category>``) and the level.
    Unknown categories are logged at INFO.
    """

    def __init__(self, prefix: str = 'webcompat'):
        self.prefix = prefix

    def level_for(self, category: str) -> int:
        return _CATEGORY_LEVELS.get(category.lower(), logging.INFO)

    def __call__(self, message: str, category: str = 'General') -> None:
        logger = get_logger(f"{self.prefix}.{category.lower()}")
        logger.log(self.level_for(category), message)


default_log = CategoryLog()
