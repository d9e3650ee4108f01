"""
Testing utilities for liteapp handlers and applications.

Example:
    >>> from liteapp.app.testing import make_context
    >>>
    >>> def greet(ctx):
    ...     return 0 if ctx.get_opt("name") else 2
    ...
    >>> greet(make_context("greet", opts={"name": "ada"}))
    0
"""

import os
from io import StringIO
from typing import Any

from ..ui.console import Console
from .commands import CommandRegistry
from .context import CommandContext
from .core import app as app_module
from .core.app import App


def make_context(
    command: str = "test",
    args: list[str] | None = None,
    opts: dict[str, Any] | None = None,
    script: str = "app",
    registry: CommandRegistry | None = None,
) -> CommandContext:
    """Build a CommandContext for calling a handler directly."""
    return CommandContext(
        command=command,
        script=script,
        pwd=os.getcwd(),
        args=list(args or []),
        opts=dict(opts or {}),
        registry=registry if registry is not None else CommandRegistry(),
    )


def make_app(argv: list[str], commands: dict[str, Any] | None = None, **params: Any) -> App:
    """
    Create an App that writes to an in-memory console.

    Read the output back with ``app.console.file.getvalue()``.
    """
    app = App(params, argv, console=Console(no_color=True, file=StringIO()))
    if commands:
        app.add_commands(commands)
    return app


def run_app(
    argv: list[str], commands: dict[str, Any] | None = None, **params: Any
) -> tuple[int, str]:
    """Run an App without exiting; returns (status, output)."""
    app = make_app(argv, commands, **params)
    status = app.run(exit=False)
    return status, app.console.file.getvalue()


def reset_global_app() -> None:
    """Forget the global app so the next App() becomes global."""
    app_module._global_app = None
