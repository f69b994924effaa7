"""
Logging configuration.

Resets loguru sinks to a single stderr sink with a consistent format.
Logging must not change program behavior.
"""

import sys

from loguru import logger

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>"
)


def configure_logging(level: str = "INFO", colorize: bool | None = None) -> int:
    """Configure loguru for the application.

    Args:
        level: The log level name (TRACE, DEBUG, INFO, SUCCESS, WARNING, ERROR).
        colorize: Force or disable ANSI colors; None lets loguru decide.

    Returns:
        The id of the installed sink.
    """
    logger.remove()
    return logger.add(sys.stderr, level=level.upper(), format=LOG_FORMAT, colorize=colorize)
