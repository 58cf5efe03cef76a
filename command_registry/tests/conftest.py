"""
Test configuration and fixtures for the command_registry test suite.
"""

import os

import pytest

# Set environment variables before any module-level config loading
os.environ.setdefault("LOGGING_ENVIRONMENT", "unit_test")
os.environ.setdefault("LOGGING_LEVEL", "DEBUG")

from command_registry.models.command import CommandDescriptor  # noqa: E402
from command_registry.structured_logging.enhanced_logging_config import reset_logging_state  # noqa: E402


@pytest.fixture(autouse=True)
def _isolate_logging_state():
    """Ensure each test starts with logging uninitialized."""
    reset_logging_state()
    yield
    reset_logging_state()


@pytest.fixture
def sample_registry() -> dict[str, CommandDescriptor]:
    """A small registry with no overlapping names."""
    return {
        "help": CommandDescriptor(name="help", aliases=["h", "?"]),
        "play": CommandDescriptor(name="play", aliases=["p"]),
        "queue": CommandDescriptor(name="queue", aliases=["q", "list"]),
        "ping": CommandDescriptor(name="ping"),
    }
