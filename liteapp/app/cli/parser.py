"""
Argument parsing for CLI applications.

Turns a raw token sequence into positional arguments and named options without
any declared schema: every ``--name``/``-x`` token becomes a named option and
every bare word becomes a positional argument.
"""

import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Any

# --name, --name=value
_LONG_OPT = re.compile(r"^--([^=\s]+)(?:=(.*))?$", re.DOTALL)
# -x, -abc, -x=value
_SHORT_OPT = re.compile(r"^-([A-Za-z]+)(?:=(.*))?$", re.DOTALL)
# key=value without leading dash
_NAMED_ARG = re.compile(r"^([A-Za-z_][\w.-]*)=(.*)$", re.DOTALL)

END_OF_OPTS = "--"


@dataclass
class ParsedArgs:
    """
    Result of parsing a raw invocation.

    Attributes:
        args: Positional arguments in input order
        opts: Named options; a value is a string, True for a bare flag, or a
            list of those when the option repeated and merging was enabled
    """

    args: list[str] = field(default_factory=list)
    opts: dict[str, Any] = field(default_factory=dict)

    def pop_command(self) -> str:
        """Remove the first positional argument and return it trimmed ("" if none)."""
        if not self.args:
            return ""
        return self.args.pop(0).strip()


def _is_option_token(token: str) -> bool:
    """Check if a token would be parsed as an option rather than a value."""
    if token == END_OF_OPTS:
        return True
    return bool(_LONG_OPT.match(token) or _SHORT_OPT.match(token))


class ArgvParser:
    """
    Schema-less argv parser.

    Example:
        parser = ArgvParser(bool_opts=["verbose"], merge_opts=True)
        parsed = parser.parse(["build", "--tag=v1", "--tag=v2", "--verbose", "src"])
        parsed.args  # ["build", "src"]
        parsed.opts  # {"tag": ["v1", "v2"], "verbose": True}
    """

    def __init__(self, bool_opts: Iterable[str] = (), merge_opts: bool = False):
        """
        Initialize the parser.

        Args:
            bool_opts: Option names that never consume the following token
            merge_opts: Collect repeated options into a list instead of
                letting the last occurrence win
        """
        self.bool_opts = frozenset(bool_opts)
        self.merge_opts = merge_opts

    def parse(self, tokens: Sequence[str]) -> ParsedArgs:
        """Parse tokens into positional arguments and named options."""
        parsed = ParsedArgs()
        i = 0

        while i < len(tokens):
            token = tokens[i]
            i += 1

            if token == END_OF_OPTS:
                parsed.args.extend(tokens[i:])
                break

            match = _LONG_OPT.match(token)
            if match:
                name, value = match.groups()
                value, i = self._take_value(name, value, tokens, i)
                self._store(parsed.opts, name, value)
                continue

            match = _SHORT_OPT.match(token)
            if match:
                names, value = match.groups()
                if len(names) > 1 and value is None:
                    # -abc is shorthand for -a -b -c
                    for name in names:
                        self._store(parsed.opts, name, True)
                    continue
                value, i = self._take_value(names, value, tokens, i)
                self._store(parsed.opts, names, value)
                continue

            match = _NAMED_ARG.match(token)
            if match:
                self._store(parsed.opts, match.group(1), match.group(2))
                continue

            parsed.args.append(token)

        return parsed

    def _take_value(
        self, name: str, value: str | None, tokens: Sequence[str], i: int
    ) -> tuple[str | bool, int]:
        """Resolve an option value, consuming the next token when it is a value."""
        if value is not None:
            return value, i
        if name in self.bool_opts or i >= len(tokens) or _is_option_token(tokens[i]):
            return True, i
        return tokens[i], i + 1

    def _store(self, opts: dict[str, Any], name: str, value: str | bool) -> None:
        """Store an option value, merging repeats when enabled."""
        if not self.merge_opts or name not in opts:
            opts[name] = value
            return

        existing = opts[name]
        if isinstance(existing, list):
            existing.append(value)
        else:
            opts[name] = [existing, value]


def parse_argv(
    tokens: Sequence[str], *, bool_opts: Iterable[str] = (), merge_opts: bool = False
) -> ParsedArgs:
    """
    Parse tokens with a one-off ArgvParser.

    Args:
        tokens: Process arguments, program path excluded
        bool_opts: Option names that never take a value
        merge_opts: Collect repeated options into lists

    Returns:
        ParsedArgs with positional arguments and named options
    """
    return ArgvParser(bool_opts=bool_opts, merge_opts=merge_opts).parse(tokens)
