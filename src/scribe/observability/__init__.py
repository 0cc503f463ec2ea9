"""Observability – logging."""

from scribe.observability.logging import JsonLoggerFactory, TextLogger, configure_logging, get_logger

__all__ = [
    "JsonLoggerFactory",
    "TextLogger",
    "configure_logging",
    "get_logger",
]
