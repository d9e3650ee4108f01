"""
Constants for the logging system.

Format strings, default values and custom log level definitions.
"""

import logging


class LogConstants:
    """Constants for the logging system."""

    # Default format strings
    DEFAULT_FORMAT: str = "[%(asctime)s] [%(levelname).1s] %(message)s"
    DEFAULT_DATEFMT: str = "%H:%M:%S"

    # Custom log levels
    CUSTOM_LEVELS: dict[str, int] = {"TRACE": 5}

    # Log level names for resolution
    LEVEL_NAMES: dict[str, int | bool] = {
        "critical": logging.CRITICAL,
        "error": logging.ERROR,
        "warning": logging.WARNING,
        "info": logging.INFO,
        "debug": logging.DEBUG,
        "trace": CUSTOM_LEVELS["TRACE"],
        "false": False,  # Special value to disable all logging
    }

    # ANSI escape sequences
    RESET: str = "\x1b[0m"

    # Color per level
    COLORS: dict[int, str] = {
        CUSTOM_LEVELS["TRACE"]: "\x1b[38;5;240m",
        logging.DEBUG: "\x1b[38;5;32m",
        logging.INFO: "\x1b[36m",
        logging.WARNING: "\x1b[33m",
        logging.ERROR: "\x1b[31m",
        logging.CRITICAL: "\x1b[35m",
    }
