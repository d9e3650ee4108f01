"""
Help generation for CLI applications.

Renders the application overview and per-command help as rich Text objects.
Styles are theme names resolved by liteapp.ui.console.Console at print time;
``.plain`` gives the unstyled text.
"""

import re
from typing import Any

from rich.text import Text

from ..constants import NO_DESCRIPTION

PLACEHOLDER_MARK = "{{"
PLACEHOLDER_RE = re.compile(r"\{\{\w+\}\}")


def _ucfirst(text: str) -> str:
    return text[:1].upper() + text[1:]


def substitute_placeholders(text: str, command: str, script: str, work_dir: str) -> str:
    """
    Replace help placeholders.

    Recognized tokens: ``{{command}}``, ``{{fullCmd}}``, ``{{workDir}}`` (alias
    ``{{pwdDir}}``) and ``{{script}}``. Text without ``{{`` is returned as is.
    """
    if PLACEHOLDER_MARK not in text:
        return text

    replacements = {
        "{{command}}": command,
        "{{fullCmd}}": f"{script} {command}",
        "{{workDir}}": work_dir,
        "{{pwdDir}}": work_dir,
        "{{script}}": script,
    }
    return PLACEHOLDER_RE.sub(lambda m: replacements.get(m.group(0), m.group(0)), text)


class HelpGenerator:
    """Generates help content for CLI applications."""

    def __init__(self, application: Any) -> None:
        """
        Initialize the help generator.

        Args:
            application: Object exposing ``params``, ``script``, ``pwd`` and
                ``registry``
        """
        self.application = application

    def overview_usage(self) -> str:
        return f"{self.application.script} COMMAND -h"

    def generic_usage(self, name: str) -> str:
        return f"{self.application.script} {name} [args ...] [--opts ...]"

    def render_overview(self, error: str = "") -> Text:
        """
        Render the application overview.

        Args:
            error: Optional error shown as a banner above the overview

        Returns:
            Text with description, usage line and the sorted command list
        """
        params = self.application.params
        registry = self.application.registry
        usage = self.overview_usage()

        text = Text()
        if error:
            text.append("ERROR", style="error")
            text.append(f": {error}\n\n")

        text.append(_ucfirst(params.desc))
        if params.version:
            text.append(" ")
            text.append(f"(v{params.version})", style="version")
        text.append("\n\n")

        text.append("Usage:", style="comment")
        text.append(" ")
        text.append(usage, style="usage")
        text.append("\n")
        text.append("Commands:", style="comment")
        text.append("\n")

        for binding in registry.list():
            meta = binding.meta
            desc = _ucfirst(meta.desc) if meta and meta.desc else NO_DESCRIPTION
            text.append("  ")
            text.append(binding.name.ljust(registry.key_width), style="command")
            text.append(f"   {desc}\n")

        text.append("\nFor command usage please run: ")
        text.append(usage, style="usage")
        return text

    def render_help_body(self, name: str) -> str:
        """Long help of a command with placeholders substituted ("" if none)."""
        binding = self.application.registry.lookup(name)
        if binding is None or binding.meta is None:
            return ""
        return self._substitute(binding.meta.help.rstrip("\n"), name)

    def render_command(self, name: str) -> Text:
        """
        Render help for a single command.

        Args:
            name: Command name

        Returns:
            Text with description, usage line and long help
        """
        binding = self.application.registry.lookup(name)
        meta = binding.meta if binding else None

        text = Text()
        if meta is None:
            text.append(f"{NO_DESCRIPTION}\n")
            text.append("Usage:", style="comment")
            text.append(f"\n  {self.generic_usage(name)}")
            return text

        usage = self._substitute(meta.usage, name) or self.generic_usage(name)
        body = self.render_help_body(name)

        text.append(f"{_ucfirst(meta.desc) or NO_DESCRIPTION}\n")
        text.append("Usage:", style="comment")
        text.append(f"\n  {usage}\n")
        if body:
            text.append(f"\n{body}")
        return text

    def _substitute(self, text: str, name: str) -> str:
        return substitute_placeholders(
            text,
            command=name,
            script=self.application.script,
            work_dir=self.application.pwd,
        )
