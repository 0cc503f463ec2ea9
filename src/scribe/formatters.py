"""Stock formatters for the bundled plugins.

A formatter turns an :class:`~scribe.kernel.event.Event` into a plugin's
output, or returns ``None`` to make the plugin skip the event.
"""
from __future__ import annotations

import json
from typing import Any, Callable

from scribe.kernel.event import Event
from scribe.kernel.level import Level


def line_formatter(event: Event) -> str:
    """``"INFO: message"`` – the default line for :class:`~scribe.plugins.file.FilePlugin`."""
    return f"{event.level.value.upper()}: {event.message}"


def json_formatter(event: Event) -> bytes:
    """UTF-8 JSON body – the default for :class:`~scribe.plugins.url.URLPlugin`."""
    return json.dumps(event.to_dict(), default=str, separators=(",", ":")).encode("utf-8")


def min_level(threshold: Level | str, formatter: Callable[[Event], Any]) -> Callable[[Event], Any]:
    """Wrap *formatter* so events below *threshold* are skipped."""
    floor = Level.parse(threshold)

    def _filtered(event: Event) -> Any:
        if event.level < floor:
            return None
        return formatter(event)

    _filtered.__qualname__ = f"min_level({floor.value}, {getattr(formatter, '__qualname__', formatter)})"
    return _filtered


__all__ = ["json_formatter", "line_formatter", "min_level"]
