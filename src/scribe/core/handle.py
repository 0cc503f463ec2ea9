"""Core – DispatchHandle, the completion token returned by ``Scribe.log``."""
from __future__ import annotations

import asyncio
import concurrent.futures
from typing import Any, Callable, Generator

from scribe.kernel.event import Event


class DispatchHandle:
    """Completion token for one fan-out.

    Settles once every plugin invoked for :attr:`event` has finished.  It
    wraps either an :class:`asyncio.Task` (``log`` called inside a running
    event loop) or a :class:`concurrent.futures.Future` (``log`` called from
    synchronous code and dispatched on the scribe's background loop).

    Awaiting it returns ``None`` or raises the dispatch failure::

        await scribe.info("user.created", metadata={"id": "42"})

    Dropping it is fine: the plugins still run to completion and any failure
    is discarded.
    """

    __slots__ = ("_future", "_event")

    def __init__(
        self,
        future: asyncio.Future[None] | concurrent.futures.Future[None],
        event: Event | None = None,
    ) -> None:
        self._future = future
        self._event = event
        future.add_done_callback(_mark_retrieved)

    @property
    def event(self) -> Event | None:
        """The event being dispatched (``None`` if it could not be built)."""
        return self._event

    def __await__(self) -> Generator[Any, None, None]:
        if isinstance(self._future, concurrent.futures.Future):
            return asyncio.wrap_future(self._future).__await__()
        return self._future.__await__()

    def done(self) -> bool:
        return self._future.done()

    def result(self, timeout: float | None = None) -> None:
        """Block until settled, then return ``None`` or raise the failure.

        Only handles dispatched on the background loop can be waited on this
        way; a handle bound to the caller's running loop must be awaited.

        Raises
        ------
        asyncio.InvalidStateError
            When the handle belongs to a running loop and has not settled.
        """
        if isinstance(self._future, concurrent.futures.Future):
            return self._future.result(timeout)
        if not self._future.done():
            raise asyncio.InvalidStateError("Dispatch still running; await the handle instead")
        return self._future.result()

    def exception(self) -> BaseException | None:
        """Return the failure of a settled handle, or ``None`` on success."""
        if not self._future.done():
            raise asyncio.InvalidStateError("Dispatch still running")
        if self._future.cancelled():
            return asyncio.CancelledError()
        return self._future.exception()

    def add_done_callback(self, fn: Callable[[DispatchHandle], object]) -> None:
        """Call ``fn(handle)`` once the handle settles."""
        self._future.add_done_callback(lambda _: fn(self))

    def __repr__(self) -> str:
        state = "done" if self.done() else "pending"
        level = self._event.level.value if self._event is not None else None
        return f"DispatchHandle(level={level!r}, state={state})"


def _mark_retrieved(future: Any) -> None:
    # fire-and-forget failures are dropped without "never retrieved" warnings
    if not future.cancelled():
        future.exception()


__all__ = ["DispatchHandle"]
