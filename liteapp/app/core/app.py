"""
Core app class for lightweight CLI applications.

The App parses the process arguments once at construction, holds the command
registry, and dispatches the first positional argument to its handler:

    app = App({"desc": "deployment helper", "version": "1.4.0"})
    app.add("sync", sync_handler, "Sync the working tree")
    app.run()  # exits with the handler's status
"""

import os
import sys
import traceback
from collections.abc import Mapping, Sequence
from typing import Any, NoReturn

from ...config import AppParams
from ...exceptions import ApplicationError
from ...log import create_lg
from ...ui.console import Console, get_console
from ..cli.commands import CommandHandler, Outcome, OutcomeKind
from ..cli.help import HelpGenerator
from ..cli.parser import ArgvParser
from ..commands import CommandBinding, CommandRegistry
from ..constants import HELP_OPTS
from ..context import ArgsAccessMixin, CommandContext

LOGGER_NAME = "liteapp"

# First App constructed in the process, see App.global_app()
_global_app: "App | None" = None


def _origin(error: BaseException) -> tuple[str, int]:
    """File and line where an exception was raised."""
    frames = traceback.extract_tb(error.__traceback__)
    if not frames:
        return "<unknown>", 0
    last = frames[-1]
    return last.filename, last.lineno or 0


def format_failure(error: BaseException, code: int) -> str:
    """
    Format the diagnostic block printed for an unexpected handler failure.

    Example:
        Exception(3): HandlerError: disk full
        File: /app/commands/sync.py(Line 42)
        Trace:
        Traceback (most recent call last):
          ...
    """
    filename, lineno = _origin(error)
    trace = "".join(traceback.format_exception(error)).rstrip("\n")
    return (
        f"Exception({code}): {type(error).__name__}: {error}\n"
        f"File: {filename}(Line {lineno})\n"
        f"Trace:\n{trace}"
    )


class App(ArgsAccessMixin):
    """
    Lightweight CLI application.

    The first App created in a process becomes the global app, reachable via
    App.global_app(); later instances work normally but do not replace it.
    """

    def __init__(
        self,
        params: AppParams | Mapping[str, Any] | None = None,
        argv: Sequence[str] | None = None,
        *,
        console: Console | None = None,
        registry: CommandRegistry | None = None,
    ):
        """
        Initialize the app.

        Args:
            params: Application params, or a mapping of overrides
            argv: Process arguments including the script path (default: sys.argv)
            console: Output console (default: shared console)
            registry: Command registry (default: a new empty registry)
        """
        global _global_app

        self.params: AppParams = (
            params if isinstance(params, AppParams) else AppParams.from_dict(params or {})
        )
        self.pwd: str = os.getcwd()

        argv = list(sys.argv if argv is None else argv)
        self.script: str = argv[0] if argv else ""
        self.parser = ArgvParser(bool_opts=HELP_OPTS, merge_opts=True)
        self._parsed = self.parser.parse(argv[1:])
        self.args: list[str] = self._parsed.args
        self.opts: dict[str, Any] = self._parsed.opts
        self.command: str = ""
        self._command_found = False
        self._dispatching = False

        self.registry: CommandRegistry = (
            registry if registry is not None else CommandRegistry()
        )
        self.console: Console = console if console is not None else get_console()
        self.lg = create_lg(LOGGER_NAME, self.params.log_level, self.params.colors)
        self.help = HelpGenerator(self)
        self.command_handler = CommandHandler(self)

        if _global_app is None:
            _global_app = self

    @classmethod
    def global_app(cls) -> "App":
        """
        Get the global app.

        Raises:
            ApplicationError: If no App has been created yet
        """
        if _global_app is None:
            raise ApplicationError("No global app, create one with App()")
        return _global_app

    @property
    def script_name(self) -> str:
        """Base name of the script."""
        return os.path.basename(self.script)

    def set_params(self, **params: Any) -> None:
        """Merge params; logging is reconfigured when its settings change."""
        merged = self.params.merge(params)
        if "log_level" in params or "colors" in params:
            self.lg = create_lg(LOGGER_NAME, merged.log_level, merged.colors)
        self.params = merged

    # Registration

    def _check_mutable(self) -> None:
        if self._dispatching:
            raise ApplicationError("Commands cannot be added while dispatching")

    def add(self, name: str, handler: Any, meta: Any = None) -> CommandBinding:
        """
        Add a command.

        Args:
            name: Command name
            handler: Function, class with ``execute``, callable instance or
                import path string; called with a CommandContext
            meta: Description string or mapping with ``desc``, ``usage``, ``help``

        Raises:
            ConfigError: If the name or handler is invalid
        """
        self._check_mutable()
        return self.registry.register(name, handler, meta)

    add_command = add

    def add_commands(self, commands: Mapping[str, Any]) -> None:
        """Add several commands, see CommandRegistry.register_bulk()."""
        self._check_mutable()
        self.registry.register_bulk(commands)

    def add_object(self, obj: Any, meta: Any = None) -> CommandBinding:
        """Add a callable instance, see CommandRegistry.register_object()."""
        self._check_mutable()
        return self.registry.register_object(obj, meta)

    # Dispatch

    def run(self, exit: bool = True) -> int:
        """
        Resolve the command and dispatch it.

        Args:
            exit: Stop the process with the resulting status

        Returns:
            Exit status (only when ``exit`` is False)
        """
        self.find_command()
        return self.dispatch(exit)

    def find_command(self) -> str:
        """Take the first positional argument as the command name."""
        if not self._command_found:
            self._command_found = True
            self.command = self._parsed.pop_command()
        return self.command

    def dispatch(self, exit: bool = True) -> int:
        """Compute the exit status and optionally stop the process with it."""
        status = self.handle()

        if exit:
            self.stop(status)
        return status

    def handle(self) -> int:
        """Resolve the command and produce its exit status."""
        command = self.command
        if not command:
            self.display_help()
            return 0

        binding = self.registry.lookup(command)
        if binding is None:
            self.lg.debug("unknown command", extra={"command": command})
            self.display_help(f"The command '{command}' does not exist")
            return 0

        if any(opt in self.opts for opt in HELP_OPTS):
            self.display_command_help(command)
            return 0

        self._dispatching = True
        try:
            outcome = self.command_handler.execute_command(
                binding, self.create_context(command)
            )
        finally:
            self._dispatching = False

        return self.handle_outcome(outcome)

    def handle_outcome(self, outcome: Outcome) -> int:
        """Report a handler outcome and return the exit status."""
        if outcome.kind is OutcomeKind.USAGE_ERROR:
            self.console.print_error(str(outcome.error))
            return 0

        if outcome.kind is OutcomeKind.FAILURE and outcome.error is not None:
            self.console.print_text(format_failure(outcome.error, outcome.status))

        return outcome.status

    def create_context(self, command: str) -> CommandContext:
        return CommandContext(
            command=command,
            script=self.script,
            pwd=self.pwd,
            args=self.args,
            opts=self.opts,
            registry=self.registry,
            app=self,
        )

    def stop(self, code: int = 0) -> NoReturn:
        """Stop the process with the given status."""
        sys.exit(code)

    # Help output

    def display_help(self, error: str = "") -> None:
        """Print the overview help, with an error banner when given."""
        self.console.print_text(self.help.render_overview(error))

    def display_command_help(self, name: str) -> None:
        """Print help for one command."""
        self.console.print_text(self.help.render_command(name))
