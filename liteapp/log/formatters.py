"""
Log formatter with level colors and extra fields.
"""

import logging

from .constants import LogConstants

# Attributes every LogRecord carries; anything else came in through ``extra``
_RECORD_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", None, None).__dict__.keys()
) | {"message", "asctime", "taskName"}


def _extra_fields(record: logging.LogRecord) -> dict[str, object]:
    return {k: v for k, v in record.__dict__.items() if k not in _RECORD_ATTRS}


class LogFormatter(logging.Formatter):
    """
    Formats records as ``[12:00:00] [I] message [key:value] ...``.

    With colors enabled the level letter and message are wrapped in the
    ANSI color of the record's level.
    """

    def __init__(self, colors: bool = True) -> None:
        super().__init__(LogConstants.DEFAULT_FORMAT, LogConstants.DEFAULT_DATEFMT)
        self.colors = colors

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)

        extra = _extra_fields(record)
        if extra:
            line += " " + " ".join(f"[{k}:{v}]" for k, v in sorted(extra.items()))

        if not self.colors:
            return line

        color = LogConstants.COLORS.get(record.levelno)
        if color is None:
            return line
        return f"{color}{line}{LogConstants.RESET}"
