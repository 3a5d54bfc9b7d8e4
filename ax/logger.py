"""Logging configuration for ax."""

import logging
from typing import Optional

from .config import Config

# Global flag to track if logging has been initialized
_logging_initialized = False


def setup_logger(log_level: Optional[str] = None) -> None:
    """Configure the logging system globally.

    This should be called once at the start of the process. Without a level
    (argument or AX_LOG_LEVEL) nothing is installed and log records go nowhere,
    so command output on stderr stays clean.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    global _logging_initialized

    if _logging_initialized:
        return

    log_level = log_level or Config.LOG_LEVEL
    if not log_level:
        return

    level = getattr(logging, log_level.upper(), logging.DEBUG)
    logger = logging.getLogger("ax")
    logger.setLevel(level)

    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(name)s: %(levelname)s: %(message)s"))
    logger.addHandler(handler)

    _logging_initialized = True

    logger.debug("Logging initialized. Level: %s", log_level)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for a module.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
