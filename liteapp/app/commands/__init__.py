"""
Command registration.

This module provides the command registry and handler shape resolution.
"""

from .handler import HandlerKind, ResolvedHandler, resolve_handler
from .registry import CommandBinding, CommandMeta, CommandRegistry, normalize_meta

__all__ = [
    "CommandBinding",
    "CommandMeta",
    "CommandRegistry",
    "HandlerKind",
    "ResolvedHandler",
    "normalize_meta",
    "resolve_handler",
]
