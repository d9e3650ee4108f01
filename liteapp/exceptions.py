"""
Unified exception hierarchy for liteapp.

All framework errors inherit from LiteAppError so callers can catch every
liteapp failure with a single except clause. Only handler execution failures
are intercepted by the dispatcher; everything else propagates to the caller.
"""

from typing import Any


class LiteAppError(Exception):
    """
    Base exception for all liteapp errors.

    Example:
        try:
            app.commands.register("", handler)
        except LiteAppError as e:
            lg.error(f"setup failed: {e}")
    """

    def __init__(self, message: str, **context: Any) -> None:
        """
        Initialize the exception with a message and optional context.

        Args:
            message: Human-readable error message
            **context: Additional context information (stored in self.context)
        """
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        """String representation with context if available."""
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


class ConfigError(LiteAppError):
    """
    Invalid registration or configuration.

    Raised immediately at the offending call, never deferred.

    Examples:
        - Empty command name
        - Handler that is not invokable
        - Unknown key in application parameters
        - Unreadable YAML parameters file
    """

    pass


class UsageError(LiteAppError):
    """
    Malformed user input for the resolved command.

    Raised by handlers. The dispatcher reports it as a single error line and
    exits with status 0.
    """

    pass


class HandlerError(LiteAppError):
    """
    Failure surfaced by a command handler, carrying an exit code.

    The dispatcher prints a diagnostic block and exits with ``code``.
    """

    def __init__(self, message: str, code: int = -1, **context: Any) -> None:
        super().__init__(message, **context)
        self.code = code


class ApplicationError(LiteAppError):
    """Application-level misuse, such as accessing a global app that does not exist."""

    pass
