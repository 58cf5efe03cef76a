"""
structlog-based logging configuration for command_registry.

This module is the single entry point for the logging system. Library code calls
get_logger(); applications call setup_logging() once at startup.
"""

import json
import logging
import sys
from typing import Any

import structlog
from structlog.contextvars import merge_contextvars
from structlog.stdlib import BoundLogger, LoggerFactory

_VALID_FORMATS = ("key_value", "json", "console")


class _LoggingState:  # pylint: disable=too-few-public-methods  # Reason: State container, no behaviour
    """State container for logging initialization to avoid global statements."""

    initialized: bool = False
    signature: str | None = None


_logging_state = _LoggingState()


def _select_renderer(log_format: str) -> Any:
    if log_format == "json":
        return structlog.processors.JSONRenderer()
    if log_format == "console":
        return structlog.dev.ConsoleRenderer(colors=False)
    return structlog.processors.KeyValueRenderer(key_order=["timestamp", "level", "logger", "event"])


def configure_structlog(
    environment: str = "local",
    log_level: str = "INFO",
    log_format: str = "key_value",
) -> None:
    """
    Configure structlog on top of the standard library logging module.

    Args:
        environment: Environment name, bound to every log record
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Renderer to use (key_value, json, console)
    """
    if log_format not in _VALID_FORMATS:
        raise ValueError(f"Log format must be one of {list(_VALID_FORMATS)}, got '{log_format}'")

    level = getattr(logging, log_level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    if not root_logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(handler)
    root_logger.setLevel(level)

    structlog.configure(
        processors=[
            merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            _select_renderer(log_format),
        ],
        context_class=dict,
        logger_factory=LoggerFactory(),
        wrapper_class=BoundLogger,
        cache_logger_on_first_use=False,
    )
    structlog.contextvars.bind_contextvars(environment=environment)


def setup_logging(config: dict[str, Any], *, force_reconfigure: bool = False) -> None:
    """
    Set up logging from a configuration dictionary.

    Repeated calls are ignored unless force_reconfigure is set.

    Args:
        config: Application configuration dictionary (see AppConfig.to_legacy_dict)
        force_reconfigure: When True, reconfigure even if already initialized
    """
    config_signature = json.dumps(config, sort_keys=True, default=str)

    if _logging_state.initialized and not force_reconfigure:
        get_logger("command_registry.structured_logging.setup").debug(
            "setup_logging skipped; logging system already initialized",
            config_signature=_logging_state.signature,
        )
        return

    logging_config = config.get("logging", {})
    environment = logging_config.get("environment", "local")
    log_level = logging_config.get("level", "INFO")
    log_format = logging_config.get("format", "key_value")

    if logging_config.get("disable_logging", False):
        # Keep structlog usable but drop everything below CRITICAL
        configure_structlog(environment, "CRITICAL", log_format)
    else:
        configure_structlog(environment, log_level, log_format)
        get_logger("command_registry.structured_logging.setup").info(
            "Logging system initialized",
            environment=environment,
            log_level=log_level,
            log_format=log_format,
        )

    _logging_state.initialized = True
    _logging_state.signature = config_signature


def reset_logging_state() -> None:
    """Forget previous initialization so setup_logging() runs again."""
    _logging_state.initialized = False
    _logging_state.signature = None
    structlog.contextvars.clear_contextvars()


def get_logger(name: str) -> Any:  # Returns BoundLogger but typed as Any for flexibility
    """
    Get a structlog logger with the specified name.

    This is the public API for obtaining loggers. All package code should use
    this function rather than calling structlog.get_logger() directly.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)
