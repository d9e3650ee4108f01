"""
Console wrapper around rich.

Provides styled terminal output with the liteapp theme. Colors follow the
terminal: disabled when NO_COLOR is set or output is not a TTY, forced on by
FORCE_COLOR.
"""

from __future__ import annotations

import os
import sys
from typing import Any

from rich.console import Console as RichConsole
from rich.text import Text
from rich.theme import Theme


def _is_interactive() -> bool:
    """Check if we're in an interactive terminal."""
    return sys.stdout.isatty()


def _should_use_color() -> bool:
    """Determine if color output should be used."""
    # Respect NO_COLOR environment variable (https://no-color.org/)
    if os.environ.get("NO_COLOR"):
        return False

    # Respect FORCE_COLOR for CI environments that support color
    if os.environ.get("FORCE_COLOR"):
        return True

    return _is_interactive()


LITEAPP_THEME = {
    "info": "cyan",
    "warning": "yellow",
    "error": "red bold",
    "success": "green",
    "muted": "dim",
    "comment": "yellow",
    "command": "green",
    "usage": "cyan",
    "version": "red",
}


class Console:
    """
    Console with the liteapp theme.

    Example:
        console = Console()
        console.print("[success]Done![/success]")
        console.print_error("Something went wrong")
        console.print_text(help_generator.render_overview())
    """

    def __init__(
        self,
        *,
        no_color: bool | None = None,
        quiet: bool = False,
        file: Any = None,
    ):
        """
        Initialize the console.

        Args:
            no_color: Disable color output (True/False) or auto-detect (None)
            quiet: Suppress all output
            file: Output file (default: sys.stdout at print time)
        """
        if no_color is None:
            no_color = not _should_use_color()

        self._quiet = quiet
        self._no_color = no_color
        self._rich_console = RichConsole(
            file=file,
            theme=Theme(LITEAPP_THEME),
            no_color=no_color,
            force_terminal=False if no_color else None,
            highlight=False,
            soft_wrap=True,
        )

    @property
    def quiet(self) -> bool:
        """Check if quiet mode is enabled."""
        return self._quiet

    @property
    def file(self) -> Any:
        return self._rich_console.file

    def print(self, *args: Any, **kwargs: Any) -> None:
        """Print objects, interpreting rich markup in strings."""
        if self._quiet:
            return
        self._rich_console.print(*args, **kwargs)

    def print_text(self, text: Text | str) -> None:
        """Print text literally, without interpreting markup."""
        if self._quiet:
            return
        if isinstance(text, str):
            text = Text(text)
        self._rich_console.print(text)

    def print_error(self, message: str) -> None:
        """Print a single ``ERROR: message`` line."""
        self.print_text(Text.assemble(("ERROR", "error"), f": {message}"))


# Global console instance
_global_console: Console | None = None


def get_console() -> Console:
    """Get or create the shared console instance."""
    global _global_console

    if _global_console is None:
        _global_console = Console()

    return _global_console


def reset_console() -> None:
    """Reset the shared console instance."""
    global _global_console
    _global_console = None
