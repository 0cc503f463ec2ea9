"""Kernel – event model, levels, plugin port and errors."""
from scribe.kernel.event import Event, Metadata, MetadataValue
from scribe.kernel.level import Level
from scribe.kernel.policy import FailurePolicy
from scribe.kernel.plugin import Formatter, Plugin, run_formatter

__all__ = [
    "Event",
    "FailurePolicy",
    "Formatter",
    "Level",
    "Metadata",
    "MetadataValue",
    "Plugin",
    "run_formatter",
]
