"""Structured logging configuration for showclasses.

Usage:
    from showclasses.logging import get_logger, configure_logging

    # Call once at application startup
    configure_logging(log_level="INFO", log_format="console")

    # Get a logger in any module
    logger = get_logger(__name__)
    logger.info("trips_fetched", person_id=8778, count=3)

Logs go to stderr; stdout carries the class table.
"""

import logging
import sys
from typing import Any

import structlog

_environment = "local"


def _add_environment(
    logger: logging.Logger, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Add environment to all log entries."""
    event_dict["environment"] = _environment
    return event_dict


def configure_logging(
    log_level: str = "WARNING",
    log_format: str = "console",
    environment: str = "local",
) -> None:
    """Configure structlog for the application.

    Call this once at startup (the CLI does it before each command).

    Args:
        log_level: DEBUG, INFO, WARNING, ERROR
        log_format: "json" or "console"
        environment: Environment name stamped on every entry
    """
    global _environment
    _environment = environment.lower()
    level = getattr(logging, log_level.upper(), logging.WARNING)

    # Shared processors for all formats
    shared_processors: list[structlog.typing.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        _add_environment,
    ]

    if log_format.lower() == "json":
        processors = [
            *shared_processors,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = [
            *shared_processors,
            structlog.dev.ConsoleRenderer(
                colors=True,
                exception_formatter=structlog.dev.plain_traceback,
            ),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # force=True rebinds the handler to the current sys.stderr
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=level,
        force=True,
    )

    # Reduce noise from third-party libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a logger instance.

    Args:
        name: Logger name, typically __name__ from the calling module

    Returns:
        A configured structlog logger
    """
    return structlog.get_logger(name)


def bind_context(**kwargs: Any) -> None:
    """Bind context variables that will be included in all subsequent logs.

    Example:
        bind_context(person_id=8778)
        logger.info("fetching")  # Will include person_id
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    """Clear all bound context variables."""
    structlog.contextvars.clear_contextvars()
