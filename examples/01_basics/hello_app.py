#!/usr/bin/env python3
"""
Minimal liteapp application.

    ./hello_app.py                      # overview help
    ./hello_app.py greet --name=ada     # run a command
    ./hello_app.py greet -h             # command help
    ./hello_app.py sum 1 2 3            # positional arguments
"""

import pathlib
import sys

# Add the project root to the path
project_root = str(pathlib.Path(__file__).resolve().parents[2])
sys.path.append(project_root) if project_root not in sys.path else None

from liteapp import App, HandlerError, UsageError


def greet(ctx):
    name = ctx.get_str_opt("name", "world")
    ctx.app.console.print(f"[success]Hello, {name}![/success]")


class Sum:
    """Class handlers are instantiated and their execute() method is called."""

    def execute(self, ctx):
        if not ctx.args:
            raise UsageError("sum needs at least one number")
        try:
            total = sum(int(arg) for arg in ctx.args)
        except ValueError as e:
            raise HandlerError(f"not a number: {e}", code=3) from e
        print(total)
        return 0


def main() -> None:
    app = App({"desc": "liteapp example", "version": "1.0.0"})
    app.add(
        "greet",
        greet,
        {
            "desc": "say hello",
            "usage": "{{fullCmd}} [--name NAME]",
            "help": "Options:\n  --name  who to greet (default: world)\n\nExample:\n  {{fullCmd}} --name=ada\n",
        },
    )
    app.add("sum", Sum, "add up the given numbers")
    app.run()


if __name__ == "__main__":
    main()
