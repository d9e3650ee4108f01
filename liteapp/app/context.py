"""
Invocation context handed to command handlers.
"""

import os
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from .commands import CommandRegistry

if TYPE_CHECKING:
    from .core.app import App


def _to_int(value: Any, default: int) -> int:
    if isinstance(value, list):
        value = value[-1] if value else default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


class ArgsAccessMixin:
    """Typed accessors over ``args`` (positional) and ``opts`` (named)."""

    args: list[str]
    opts: dict[str, Any]

    def get_arg(self, key: int | str, default: Any = None) -> Any:
        """
        Get an argument by position or by name.

        An int indexes the positional arguments; a string looks up a named
        value such as ``key=value`` given on the command line.
        """
        if isinstance(key, int):
            if 0 <= key < len(self.args):
                return self.args[key]
            return default
        return self.opts.get(key, default)

    def get_int_arg(self, key: int | str, default: int = 0) -> int:
        return _to_int(self.get_arg(key, default), default)

    def get_str_arg(self, key: int | str, default: str = "") -> str:
        return str(self.get_arg(key, default))

    def get_opt(self, name: str, default: Any = None) -> Any:
        """Get a named option; repeated options come back as a list."""
        return self.opts.get(name, default)

    def get_int_opt(self, name: str, default: int = 0) -> int:
        return _to_int(self.get_opt(name, default), default)

    def get_str_opt(self, name: str, default: str = "") -> str:
        return str(self.get_opt(name, default))

    def get_bool_opt(self, name: str, default: bool = False) -> bool:
        value = self.get_opt(name, default)
        if isinstance(value, str):
            return value.lower() not in ("", "0", "false", "no", "off")
        return bool(value)


@dataclass
class CommandContext(ArgsAccessMixin):
    """
    Everything a handler needs to know about the current invocation.

    Attributes:
        command: Resolved command name
        script: Script path as given on the command line
        pwd: Working directory at startup
        args: Positional arguments (command name excluded)
        opts: Named options
        registry: Command registry of the running application
        app: The dispatching application, if any
    """

    command: str
    script: str
    pwd: str
    args: list[str] = field(default_factory=list)
    opts: dict[str, Any] = field(default_factory=dict)
    registry: CommandRegistry = field(default_factory=CommandRegistry)
    app: "App | None" = None

    @property
    def script_name(self) -> str:
        """Base name of the script."""
        return os.path.basename(self.script)

    @property
    def full_command(self) -> str:
        """Script and command, as typed by the user."""
        return f"{self.script} {self.command}"
