"""Observability – structured logging for the text-logger collaborator."""
from scribe.observability.logging.factory import JsonLoggerFactory, configure_logging, stdlib_level
from scribe.observability.logging.processors import get_logger
from scribe.observability.logging.protocol import TextLogger

__all__ = [
    "JsonLoggerFactory",
    "TextLogger",
    "configure_logging",
    "get_logger",
    "stdlib_level",
]
