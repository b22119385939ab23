"""
Loguru setup for the pairwise ranker.

The console is shared with the interactive judge's prompts, so it only shows
warnings unless asked otherwise. A log file, when given, records the whole
session at INFO (or DEBUG in debug mode).
"""

import sys
from typing import Any

from loguru import logger

CONSOLE_FORMAT = "<level>{level: <8}</level> | <cyan>{extra[name]}</cyan> - <level>{message}</level>"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {extra[name]}:{function}:{line} - {message}"

# Every record carries a component name, bound ones override this
logger.configure(extra={"name": "pairwise_ranker"})


def setup_logging(level: str = "WARNING", debug: bool = False, log_file: str | None = None) -> None:
    """
    Replace loguru's sinks with the ranker's console and file sinks.

    Args:
        level: Console log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        debug: Log DEBUG records to both the console and the log file
        log_file: Append the session log to this path, rotated at 10 MB
    """
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if debug else level, format=CONSOLE_FORMAT)

    if log_file:
        logger.add(
            log_file,
            level="DEBUG" if debug else "INFO",
            format=FILE_FORMAT,
            rotation="10 MB",
            retention=5,
        )


def get_logger(name: str | None = None) -> Any:
    """Logger with ``name`` bound as the component shown in every record."""
    if name:
        return logger.bind(name=name)
    return logger
