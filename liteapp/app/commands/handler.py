"""
Command handler shapes.

A command handler can be given in several shapes. The shape is classified once
at registration time into a ResolvedHandler so dispatch never has to inspect
the handler again.
"""

import functools
import importlib
import inspect
from dataclasses import dataclass
from enum import Enum
from typing import Any

from ...exceptions import ConfigError


class HandlerKind(Enum):
    """Supported handler shapes, in resolution order."""

    FUNCTION = "function"  # plain callable: handler(ctx)
    CLASS = "class"  # class with execute(): handler().execute(ctx)
    CALLABLE = "callable"  # instance with __call__: handler(ctx)


@dataclass(frozen=True)
class ResolvedHandler:
    """A handler tagged with its shape."""

    kind: HandlerKind
    target: Any

    @property
    def name(self) -> str:
        """Readable name of the handler target."""
        target = self.target
        if self.kind is HandlerKind.CALLABLE:
            target = type(target)
        return getattr(target, "__qualname__", repr(target))

    def __call__(self, ctx: Any) -> Any:
        if self.kind is HandlerKind.CLASS:
            return self.target().execute(ctx)
        return self.target(ctx)


def _invalid(command: str) -> ConfigError:
    return ConfigError(f"invalid handler for command `{command}`")


def _import_target(command: str, path: str) -> Any:
    """Import ``package.module:attr`` (or ``package.module.attr``)."""
    if ":" in path:
        module_name, _, attr = path.partition(":")
    else:
        module_name, _, attr = path.rpartition(".")

    if not module_name or not attr:
        raise _invalid(command)

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise ConfigError(
            f"invalid handler for command `{command}`", path=path, reason=str(e)
        ) from e

    target = module
    for part in attr.split("."):
        try:
            target = getattr(target, part)
        except AttributeError as e:
            raise ConfigError(
                f"invalid handler for command `{command}`", path=path
            ) from e
    return target


def _is_plain_callable(handler: Any) -> bool:
    return (
        inspect.isfunction(handler)
        or inspect.ismethod(handler)
        or inspect.isbuiltin(handler)
        or isinstance(handler, functools.partial)
    )


def resolve_handler(command: str, handler: Any) -> ResolvedHandler:
    """
    Classify a handler into one of the supported shapes.

    Args:
        command: Command name (used in error messages)
        handler: Function, class with ``execute``, callable instance, or an
            import path string pointing at one of those

    Returns:
        ResolvedHandler tagged with the detected shape

    Raises:
        ConfigError: If the handler is not invokable in any supported shape
    """
    if isinstance(handler, ResolvedHandler):
        return handler

    if isinstance(handler, str):
        if not handler:
            raise _invalid(command)
        handler = _import_target(command, handler)

    if _is_plain_callable(handler):
        return ResolvedHandler(HandlerKind.FUNCTION, handler)

    if inspect.isclass(handler):
        if callable(getattr(handler, "execute", None)):
            return ResolvedHandler(HandlerKind.CLASS, handler)
        raise _invalid(command)

    if callable(handler):
        return ResolvedHandler(HandlerKind.CALLABLE, handler)

    raise _invalid(command)
