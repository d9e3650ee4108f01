"""
Terminal output for liteapp.

Example:
    from liteapp.ui import get_console

    get_console().print("[success]Done[/success]")
"""

from .console import LITEAPP_THEME, Console, get_console, reset_console

__all__ = ["Console", "LITEAPP_THEME", "get_console", "reset_console"]
