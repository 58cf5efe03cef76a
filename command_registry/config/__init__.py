"""
Configuration module for command_registry.

This module provides type-safe, validated configuration using Pydantic BaseSettings.

Usage:
    from command_registry.config import get_config

    config = get_config()
    logger.info("Resolver configuration", warn=config.resolver.warn_on_alias_collisions)
"""

import sys
import threading
from functools import lru_cache
from os import getenv

from pydantic import ValidationError as PydanticValidationError

from ..exceptions import ConfigurationError, create_error_context
from .models import AppConfig

__all__ = ["get_config", "reset_config", "AppConfig"]

# Module-level config cache
_config_instance = None
_config_lock = threading.Lock()


def _is_test_mode() -> bool:
    """
    Detect if running in test environment.

    Returns:
        bool: True if running under pytest, False otherwise
    """
    if "pytest" in sys.modules:
        return True

    if getenv("PYTEST_CURRENT_TEST"):
        return True

    return False


def _create_config_instance() -> AppConfig:
    """
    Create a new AppConfig instance from the current environment and .env file.

    Raises:
        ConfigurationError: If any setting fails validation
    """
    try:
        return AppConfig()
    except PydanticValidationError as error:
        first = error.errors()[0]
        config_key = ".".join(str(part) for part in first["loc"])
        raise ConfigurationError(
            f"Invalid {error.title} setting '{config_key}': {first['msg']}",
            create_error_context(metadata={"model": error.title, "error_count": error.error_count()}),
            config_key=config_key,
        ) from error


@lru_cache(maxsize=1)
def _get_config_cached() -> AppConfig:
    """
    Production config loader with caching.

    Returns:
        AppConfig: Cached application configuration
    """
    global _config_instance
    with _config_lock:
        if _config_instance is None:
            _config_instance = _create_config_instance()
    return _config_instance


def get_config() -> AppConfig:
    """
    Get application configuration (singleton in production, fresh in tests).

    Configuration is loaded from environment variables and .env file.

    Returns:
        AppConfig: The application configuration

    Raises:
        ConfigurationError: If configuration is invalid
    """
    if _is_test_mode():
        return _create_config_instance()
    return _get_config_cached()


def reset_config() -> None:
    """
    Reset the configuration cache.

    The next get_config() call re-reads the environment.
    """
    global _config_instance  # pylint: disable=global-statement  # Reason: thread-safe singleton reset

    with _config_lock:
        _get_config_cached.cache_clear()
        _config_instance = None
