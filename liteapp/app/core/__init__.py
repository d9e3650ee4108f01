"""
Core application components.
"""

from .app import App, format_failure

__all__ = ["App", "format_failure"]
