"""Kernel – Plugin port and Formatter contract."""
from __future__ import annotations

import inspect
from typing import Awaitable, Callable, Protocol, runtime_checkable

from scribe.kernel.errors import FormatterError
from scribe.kernel.event import Event


type Formatter[T] = Callable[[Event], T | None | Awaitable[T | None]]


@runtime_checkable
class Plugin(Protocol):
    """Port: consume one :class:`Event` and perform a side effect.

    Returning normally reports success; raising reports failure.  The
    dispatcher invokes each plugin at most once per event and never retries.
    Plugins own their state (file handles, HTTP clients, counters) and any
    synchronisation that state needs.
    """

    async def handle(self, event: Event) -> None: ...


async def run_formatter(formatter: Callable[[Event], object], event: Event) -> object | None:
    """Apply *formatter* to *event*, awaiting it when it is a coroutine.

    Returns ``None`` when the formatter declines the event.  Any exception
    raised by the formatter is re-raised as :class:`FormatterError`.
    """
    try:
        output = formatter(event)
        if inspect.isawaitable(output):
            output = await output
    except Exception as exc:
        # wrap sets __cause__ and passes a FormatterError through unchanged
        raise FormatterError.wrap(
            exc, f"Formatter {getattr(formatter, '__qualname__', formatter)!r} failed: {exc}"
        )
    return output


__all__ = ["Formatter", "Plugin", "run_formatter"]
