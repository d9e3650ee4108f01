from importlib.metadata import PackageNotFoundError, version

from .app import (
    App,
    ArgvParser,
    CommandBinding,
    CommandContext,
    CommandMeta,
    CommandRegistry,
    HelpGenerator,
    ParsedArgs,
    parse_argv,
)
from .config import AppParams
from .exceptions import (
    ApplicationError,
    ConfigError,
    HandlerError,
    LiteAppError,
    UsageError,
)

# Version is read from package metadata (pyproject.toml)
try:
    __version__ = version("liteapp")
except PackageNotFoundError:
    # Package not installed, use fallback (development mode)
    __version__ = "0.1.0-dev"

__all__ = [
    "__version__",
    # Core classes
    "App",
    "AppParams",
    "ArgvParser",
    "CommandBinding",
    "CommandContext",
    "CommandMeta",
    "CommandRegistry",
    "HelpGenerator",
    "ParsedArgs",
    "parse_argv",
    # Exceptions
    "LiteAppError",
    "ConfigError",
    "UsageError",
    "HandlerError",
    "ApplicationError",
]
