"""
@file: logger.py
@description:
Unified logging for the sports prediction data layer, supporting:
- Color-coded console output for different log levels
- A consistent logging format across the package
- Log levels configured from settings

Every module creates its own component logger through setup_logger(),
e.g. setup_logger("sportpredict.services.record_service").

@dependencies:
- logging: Standard Python logging module
- colorama: For cross-platform colored terminal text
- sportpredict.core.config: For the default log level

@notes:
- Handlers are attached only once per logger name
- Loggers do not propagate to the root logger
"""

import logging
import sys
from typing import Optional

from colorama import Back, Fore, Style, init

from sportpredict.core.config import settings

# Initialize colorama
init(autoreset=True)

DEFAULT_LOG_LEVEL = settings.LOG_LEVEL
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class ColoredFormatter(logging.Formatter):
    """
    Formatter that colors the level name and message based on the record level.
    """

    COLORS = {
        logging.DEBUG: Fore.CYAN,
        logging.INFO: Fore.GREEN,
        logging.WARNING: Fore.YELLOW,
        logging.ERROR: Fore.RED,
        logging.CRITICAL: Fore.WHITE + Back.RED,
    }

    def format(self, record: logging.LogRecord) -> str:
        """
        Format the log record with the color for its level.

        The record is copied first so other handlers see the uncolored values.

        Args:
            record: The log record to format

        Returns:
            str: The colored formatted log message
        """
        color = self.COLORS.get(record.levelno, "")
        colored = logging.makeLogRecord(record.__dict__)
        colored.levelname = f"{color}{record.levelname}{Style.RESET_ALL}"
        colored.msg = f"{color}{record.getMessage()}{Style.RESET_ALL}"
        colored.args = None
        return super().format(colored)


def get_console_handler() -> logging.StreamHandler:
    """
    Create a console handler with colored output.

    Returns:
        logging.StreamHandler: Configured console handler
    """
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(ColoredFormatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    return console_handler


def get_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """
    Get or create a logger with the specified name and level.

    Args:
        name: The logger name, typically a module path
        level: The logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
               If None, uses the level from settings

    Returns:
        logging.Logger: Configured logger instance

    Raises:
        ValueError: If the level name is not a logging level
    """
    if level is None:
        level = DEFAULT_LOG_LEVEL

    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {level}")

    logger = logging.getLogger(name)

    # Only add handlers if this logger doesn't have any
    if not logger.handlers:
        logger.setLevel(numeric_level)
        logger.addHandler(get_console_handler())
        logger.propagate = False

    return logger


def setup_logger(name: str = "sportpredict", level: Optional[str] = None) -> logging.Logger:
    """
    Set up a logger with colored output.

    This is the function modules call to create their component loggers.
    """
    return get_logger(name, level)


# Create default package logger
logger = setup_logger()


__all__ = ["setup_logger", "get_logger", "logger", "ColoredFormatter"]
