"""
Tests for structlog logging configuration.
"""

import logging
from unittest.mock import patch

import pytest
import structlog

from command_registry.structured_logging.enhanced_logging_config import (
    configure_structlog,
    get_logger,
    setup_logging,
)


@pytest.fixture(autouse=True)
def _restore_structlog():
    """Restore structlog defaults and root logger level after each test."""
    root_level = logging.getLogger().level
    yield
    structlog.reset_defaults()
    logging.getLogger().setLevel(root_level)


def test_get_logger_returns_usable_logger():
    """Test get_logger returns a logger with the standard methods."""
    logger = get_logger("command_registry.test")

    assert hasattr(logger, "info")
    assert hasattr(logger, "debug")
    assert hasattr(logger, "warning")


def test_configure_structlog_sets_root_level():
    """Test the root logger level follows log_level."""
    configure_structlog("unit_test", "WARNING")

    assert logging.getLogger().level == logging.WARNING


def test_configure_structlog_rejects_unknown_format():
    """Test an unknown renderer name is refused."""
    with pytest.raises(ValueError, match="Log format"):
        configure_structlog("unit_test", "INFO", "xml")


def test_json_format_emits_structured_records(caplog):
    """Test the json renderer produces records carrying event and fields."""
    configure_structlog("unit_test", "DEBUG", "json")

    with caplog.at_level(logging.INFO):
        get_logger("command_registry.test").info("Resolved command alias", alias="h", command="help")

    messages = [record.getMessage() for record in caplog.records]
    assert any('"event": "Resolved command alias"' in message for message in messages)
    assert any('"environment": "unit_test"' in message for message in messages)


def test_setup_logging_is_idempotent():
    """Test repeated setup_logging calls configure only once."""
    config = {"logging": {"environment": "unit_test", "level": "INFO", "format": "key_value"}}

    with patch(
        "command_registry.structured_logging.enhanced_logging_config.configure_structlog"
    ) as mock_configure:
        setup_logging(config)
        setup_logging(config)

    mock_configure.assert_called_once_with("unit_test", "INFO", "key_value")


def test_setup_logging_force_reconfigure():
    """Test force_reconfigure bypasses the initialized guard."""
    config = {"logging": {"environment": "unit_test", "level": "DEBUG"}}

    with patch(
        "command_registry.structured_logging.enhanced_logging_config.configure_structlog"
    ) as mock_configure:
        setup_logging(config)
        setup_logging(config, force_reconfigure=True)

    assert mock_configure.call_count == 2


def test_setup_logging_disabled_raises_threshold():
    """Test disable_logging configures structlog at CRITICAL."""
    config = {"logging": {"environment": "unit_test", "level": "DEBUG", "disable_logging": True}}

    with patch(
        "command_registry.structured_logging.enhanced_logging_config.configure_structlog"
    ) as mock_configure:
        setup_logging(config)

    mock_configure.assert_called_once_with("unit_test", "CRITICAL", "key_value")
