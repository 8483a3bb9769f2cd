"""
Logging Setup
Configures loguru sinks for the command-line entry points
"""

import sys
from typing import Optional
from loguru import logger


CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function} - {message}"


def configure_logging(level: str = "INFO", log_file: Optional[str] = None):
    """
    Replace loguru's default sink

    Logs always go to stderr so stdout carries only the command's result.

    Args:
        level: Minimum level for the stderr sink
        log_file: Optional path for a rotating DEBUG-level file sink
    """
    logger.remove()
    # No local variables in tracebacks
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level, diagnose=False)

    if log_file:
        logger.add(
            log_file,
            rotation="1 day",
            retention="7 days",
            format=FILE_FORMAT,
            level="DEBUG",
            diagnose=False
        )
