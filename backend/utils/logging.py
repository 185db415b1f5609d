"""
Logging utilities for the Infinity landing-site backend.

Provides standardized logger configuration following privacy rules.

CRITICAL PRIVACY RULES:
- NEVER log submitted names, email addresses or message bodies
- NEVER log the rendered notification email (it contains all of the above)
- NEVER log the Resend API key or the admin address

Acceptable logging:
- High-level events (e.g., "Contact submission accepted", "Notification sent")
- Non-sensitive metadata (e.g., "lang='en'", "skills=3", field names that failed)
- Provider message ids and exception type names (never exception messages)
"""

import logging
from typing import Optional

from backend.config import settings


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """
    Get a configured logger for the specified module.

    Args:
        name: Module name (typically __name__)
        level: Optional logging level (defaults to LOG_LEVEL from settings)

    Returns:
        Configured logger instance

    Usage:
        >>> from backend.utils.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.info("High-level event occurred")
    """
    logger = logging.getLogger(name)

    if level is None:
        level = logging.getLevelName(settings.LOG_LEVEL.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logger.setLevel(level)

    # Add handler if not already configured (avoid duplicate handlers)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            fmt='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger
