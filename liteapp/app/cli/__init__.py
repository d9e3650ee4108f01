"""
CLI-specific functionality.

This module provides command-line interface components:
- Argument parsing logic
- Command execution
- Help generation
"""

from .commands import CommandHandler, Outcome, OutcomeKind
from .help import HelpGenerator, substitute_placeholders
from .parser import ArgvParser, ParsedArgs, parse_argv

__all__ = [
    "ArgvParser",
    "CommandHandler",
    "HelpGenerator",
    "Outcome",
    "OutcomeKind",
    "ParsedArgs",
    "parse_argv",
    "substitute_placeholders",
]
