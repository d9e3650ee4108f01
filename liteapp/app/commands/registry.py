"""
Command registration and lookup.

This module provides the CommandRegistry that stores command bindings and the
help metadata shown by the help renderer.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from typing import Any

from ...exceptions import ConfigError
from ..constants import MAX_COMMAND_NAME_LENGTH, MIN_KEY_WIDTH
from .handler import ResolvedHandler, resolve_handler


@dataclass(frozen=True)
class CommandMeta:
    """Help metadata for a command."""

    desc: str = ""
    usage: str = ""
    help: str = ""


_META_KEYS = frozenset(f.name for f in fields(CommandMeta))


@dataclass(frozen=True)
class CommandBinding:
    """A command name paired with its handler and optional help metadata."""

    name: str
    handler: ResolvedHandler
    meta: CommandMeta | None = field(default=None)


def _validate_command_name(name: Any) -> None:
    """Validate command name format."""
    if not isinstance(name, str) or not name.strip():
        raise ConfigError("Command must have a name", name=repr(name))

    if len(name) > MAX_COMMAND_NAME_LENGTH:
        raise ConfigError(
            f"Command name exceeds maximum length of {MAX_COMMAND_NAME_LENGTH} characters",
            name=name[:32],
        )

    if name != name.strip() or any(ch.isspace() for ch in name):
        raise ConfigError("Command name must not contain whitespace", name=repr(name))

    if name.startswith("-"):
        raise ConfigError("Command name must not start with '-'", name=name)


def normalize_meta(meta: Any) -> CommandMeta | None:
    """
    Normalize help metadata.

    A bare string becomes the description; a mapping is merged over empty
    defaults (unknown keys are ignored, None values count as unset); a falsy
    value means no metadata.

    Raises:
        ConfigError: If the metadata has an unsupported type
    """
    if not meta:
        return None
    if isinstance(meta, CommandMeta):
        return meta
    if isinstance(meta, str):
        return CommandMeta(desc=meta.strip())
    if isinstance(meta, Mapping):
        known = {
            k: "" if v is None else str(v) for k, v in meta.items() if k in _META_KEYS
        }
        return CommandMeta(**known)
    raise ConfigError(
        "Command metadata must be a string or a mapping", type=type(meta).__name__
    )


class CommandRegistry:
    """Stores command bindings keyed by name."""

    def __init__(self) -> None:
        self._commands: dict[str, CommandBinding] = {}
        self._key_width = MIN_KEY_WIDTH

    @property
    def key_width(self) -> int:
        """Width of the command column in overview help."""
        return self._key_width

    def set_key_width(self, width: int) -> None:
        """Set the command column width, falling back to the minimum for values <= 1."""
        self._key_width = width if width > 1 else MIN_KEY_WIDTH

    def register(self, name: str, handler: Any, meta: Any = None) -> CommandBinding:
        """
        Register a command, replacing any existing binding with the same name.

        Args:
            name: Command name
            handler: Function, class with ``execute``, callable instance, or
                import path string
            meta: Help metadata: a description string or a mapping with
                ``desc``, ``usage`` and ``help`` keys

        Returns:
            The stored CommandBinding

        Raises:
            ConfigError: If the name, handler or metadata is invalid
        """
        _validate_command_name(name)
        binding = CommandBinding(
            name=name,
            handler=resolve_handler(name, handler),
            meta=normalize_meta(meta),
        )

        self._key_width = max(self._key_width, len(name))
        self._commands[name] = binding
        return binding

    def register_bulk(self, commands: Mapping[str, Any]) -> None:
        """
        Register several commands at once.

        A value is either a handler, or a record mapping carrying a
        ``handler`` key; a record's ``name`` key overrides the mapping key and
        its remaining keys are the metadata.
        """
        for key, value in commands.items():
            name = key
            handler = value
            meta: dict[str, Any] = {}

            if isinstance(value, Mapping) and "handler" in value:
                meta = dict(value)
                name = meta.pop("name", None) or key
                handler = meta.pop("handler")

            self.register(name, handler, meta)

    def register_object(self, obj: Any, meta: Any = None) -> CommandBinding:
        """
        Register a callable instance.

        The instance may describe itself through a ``help_config()`` method
        returning a mapping with ``name`` and metadata keys; otherwise ``meta``
        must carry the name.

        Raises:
            ConfigError: If the object is not a callable instance or no name is given
        """
        if isinstance(obj, type) or not callable(obj):
            raise ConfigError(
                "Command handler must be an object with a __call__ method",
                type=type(obj).__name__,
            )

        help_config = getattr(obj, "help_config", None)
        if callable(help_config):
            meta = help_config()

        if not isinstance(meta, Mapping) or not meta.get("name"):
            raise ConfigError("Invalid arguments for adding a command object")

        record = dict(meta)
        return self.register(record.pop("name"), obj, record)

    def lookup(self, name: str) -> CommandBinding | None:
        """Get a binding by name."""
        return self._commands.get(name)

    def list(self) -> list[CommandBinding]:
        """List bindings sorted by name."""
        return [self._commands[name] for name in sorted(self._commands)]

    def names(self) -> list[str]:
        """List registered command names, sorted."""
        return sorted(self._commands)

    def clear(self) -> None:
        """Remove all bindings."""
        self._commands.clear()
        self._key_width = MIN_KEY_WIDTH

    def __contains__(self, name: object) -> bool:
        return name in self._commands

    def __len__(self) -> int:
        return len(self._commands)
