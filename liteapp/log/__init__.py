"""
Logging setup for liteapp.

Thin layer over the standard logging module:
- Custom TRACE log level for detailed debugging
- Colored console output with ANSI escape sequences
- Extra fields rendered as ``[key:value]`` suffixes
- Complete logging disable (level=False or level="false")
"""

import logging
import sys
from typing import TextIO

from .constants import LogConstants
from .exceptions import InvalidLogLevelError, LogError
from .formatters import LogFormatter

logging.TRACE = LogConstants.CUSTOM_LEVELS["TRACE"]  # type: ignore[attr-defined]
logging.addLevelName(logging.TRACE, "TRACE")  # type: ignore[attr-defined]


def resolve_level(s: str | int | bool) -> int | bool:
    """
    Resolve log level from string, numeric value, or boolean.

    Args:
        s: Log level as string name, numeric value, or False to disable logging

    Returns:
        Numeric log level, or False to disable logging

    Raises:
        InvalidLogLevelError: If the log level is invalid
    """
    if isinstance(s, bool):
        return logging.INFO if s else False

    if isinstance(s, int):
        return s

    if s.isnumeric():
        return int(s)

    name = s.lower()
    if name in LogConstants.LEVEL_NAMES:
        return LogConstants.LEVEL_NAMES[name]

    raise InvalidLogLevelError(s)


def create_lg(
    name: str,
    level: str | int | bool = "info",
    colors: bool = True,
    stream: TextIO | None = None,
) -> logging.Logger:
    """
    Create (or reconfigure) a logger writing to stderr.

    Args:
        name: Logger name
        level: Log level (string or numeric), False to disable
        colors: Enable ANSI colors
        stream: Output stream (default: sys.stderr)

    Returns:
        Configured logger

    Example:
        >>> lg = create_lg("myapp", "debug")
        >>> lg.debug("starting", extra={"command": "sync"})
    """
    numeric_level = resolve_level(level)

    lg = logging.getLogger(name)
    lg.handlers.clear()
    lg.propagate = False

    if numeric_level is False:
        lg.disabled = True
        return lg

    lg.disabled = False
    lg.setLevel(numeric_level)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(LogFormatter(colors=colors))
    lg.addHandler(handler)
    return lg


__all__ = [
    "InvalidLogLevelError",
    "LogConstants",
    "LogError",
    "LogFormatter",
    "create_lg",
    "resolve_level",
]
