"""
Pytest configuration and shared fixtures.

This module provides central pytest configuration, custom markers,
and shared fixtures for the liteapp test suite.
"""

from collections.abc import Generator
from io import StringIO

import pytest

from liteapp.app.testing import reset_global_app
from liteapp.ui.console import Console, reset_console

# =============================================================================
# Pytest Configuration
# =============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests (fast, isolated, no external dependencies)"
    )
    config.addinivalue_line(
        "markers", "e2e: End-to-end tests (full system integration)"
    )
    config.addinivalue_line("markers", "property: Property-based tests (hypothesis)")


# =============================================================================
# Shared Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def isolate_globals() -> Generator[None, None, None]:
    """Reset the global app and console around every test."""
    reset_global_app()
    reset_console()
    yield
    reset_global_app()
    reset_console()


@pytest.fixture
def console() -> Console:
    """Provide a colorless console writing to memory."""
    return Console(no_color=True, file=StringIO())
