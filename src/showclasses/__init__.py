"""Rider entry and class schedule export for Wellington show management."""

__version__ = "0.1.0"

from showclasses.logging import (
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
)

__all__ = [
    "configure_logging",
    "get_logger",
    "bind_context",
    "clear_context",
]
