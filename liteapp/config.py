"""
Application parameters.

AppParams holds the values shown in help output and the logging settings of an
application. They can be given in code or loaded from a YAML file:

    # etc/app.yaml
    app:
      name: deploy
      desc: deployment helper
      version: 1.4.0
      log_level: info
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import asdict, dataclass, fields, replace
from pathlib import Path
from typing import Any

import yaml

from .exceptions import ConfigError


@dataclass(frozen=True)
class AppParams:
    """Application metadata and ambient settings."""

    name: str = "My application"
    desc: str = "My command line application"
    version: str = "0.2.1"
    log_level: str = "warning"
    colors: bool = True

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> AppParams:
        """
        Create params from a mapping, starting from the defaults.

        Raises:
            ConfigError: If the mapping contains unknown keys
        """
        return cls().merge(data)

    @classmethod
    def from_yaml(cls, path: str | Path) -> AppParams:
        """
        Load params from a YAML file.

        A top-level ``app`` section is used when present, otherwise the whole
        document.

        Raises:
            ConfigError: If the file cannot be read or parsed, or holds invalid keys
        """
        path = Path(path)
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except OSError as e:
            raise ConfigError("Cannot read params file", path=str(path)) from e
        except yaml.YAMLError as e:
            raise ConfigError("Invalid YAML in params file", path=str(path)) from e

        if data is None:
            data = {}
        if not isinstance(data, Mapping):
            raise ConfigError("Params file must contain a mapping", path=str(path))
        if isinstance(data.get("app"), Mapping):
            data = data["app"]

        return cls.from_dict(data)

    def merge(self, data: Mapping[str, Any]) -> AppParams:
        """
        Return a copy with the given values applied.

        Raises:
            ConfigError: If the mapping contains unknown keys
        """
        known = {f.name for f in fields(self)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError("Unknown application params", keys=",".join(unknown))

        values = dict(data)
        if "version" in values:
            # YAML reads 1.0 as a float; null disables the version suffix
            version = values["version"]
            values["version"] = "" if version is None else str(version)
        return replace(self, **values)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
