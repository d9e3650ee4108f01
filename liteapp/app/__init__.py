"""
Lightweight CLI application framework.

- App: parses argv, dispatches commands, maps outcomes to exit statuses
- CommandRegistry: command bindings and help metadata
- HelpGenerator: overview and per-command help
- CommandContext: what handlers receive
"""

from .cli import ArgvParser, CommandHandler, HelpGenerator, ParsedArgs, parse_argv
from .commands import CommandBinding, CommandMeta, CommandRegistry, HandlerKind
from .context import CommandContext
from .core import App

__all__ = [
    "App",
    "ArgvParser",
    "CommandBinding",
    "CommandContext",
    "CommandHandler",
    "CommandMeta",
    "CommandRegistry",
    "HandlerKind",
    "HelpGenerator",
    "ParsedArgs",
    "parse_argv",
]
