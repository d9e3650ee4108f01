"""
Command execution for CLI applications.

This module invokes resolved handlers and turns their results and failures
into typed outcomes the dispatcher maps to exit statuses.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any

from ...exceptions import UsageError
from ..commands import CommandBinding
from ..context import CommandContext

FAILURE_STATUS = -1


class OutcomeKind(Enum):
    OK = "ok"
    USAGE_ERROR = "usage_error"
    FAILURE = "failure"


@dataclass(frozen=True)
class Outcome:
    """Result of running a handler: exit status plus the error, if any."""

    kind: OutcomeKind
    status: int = 0
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.kind is OutcomeKind.OK


def carried_code(error: BaseException) -> int:
    """Exit code carried by an exception, or FAILURE_STATUS when there is none."""
    code = getattr(error, "code", None)
    if isinstance(code, int) and not isinstance(code, bool) and code != 0:
        return code
    return FAILURE_STATUS


def coerce_status(value: Any, lg: logging.Logger | None = None) -> int:
    """
    Coerce a handler return value to an exit status.

    None means success; ints, bools and numeric strings convert directly.
    Anything else is treated as success and logged as a warning.
    """
    if value is None:
        return 0
    if isinstance(value, (bool, int)):
        return int(value)
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        if lg is not None:
            lg.warning(
                "handler returned a non-integer status, using 0",
                extra={"value": repr(value)},
            )
        return 0


class CommandHandler:
    """Runs command handlers."""

    def __init__(self, application: Any) -> None:
        """
        Initialize the command handler.

        Args:
            application: The application instance (provides ``lg``)
        """
        self.application = application

    def execute_command(self, binding: CommandBinding, ctx: CommandContext) -> Outcome:
        """
        Execute a command.

        Args:
            binding: Resolved command binding
            ctx: Invocation context handed to the handler

        Returns:
            Outcome describing success, a usage error or a failure
        """
        lg = self.application.lg
        lg.debug(
            "executing command",
            extra={"command": binding.name, "handler": binding.handler.name},
        )

        try:
            result = binding.handler(ctx)
        except UsageError as e:
            return Outcome(OutcomeKind.USAGE_ERROR, 0, e)
        except Exception as e:
            lg.debug("command failed", extra={"command": binding.name}, exc_info=e)
            return Outcome(OutcomeKind.FAILURE, carried_code(e), e)

        return Outcome(OutcomeKind.OK, coerce_status(result, lg))

