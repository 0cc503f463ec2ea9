"""Core – Scribe, the asynchronous plugin fan-out.

``Scribe.log`` builds one immutable :class:`~scribe.kernel.event.Event`,
renders it through the text logger, and starts one task that invokes every
registered plugin concurrently.  It returns a
:class:`~scribe.core.handle.DispatchHandle` straight away; the caller may
await it or drop it.

Scheduling:

* inside a running event loop the dispatch is a task on that loop;
* from synchronous code it runs on a background event loop owned by the
  scribe (a daemon thread started on first use, stopped by :meth:`Scribe.close`).

Plugins are not coordinated: two events logged back to back may have their
side effects interleaved.  Callers that need per-event ordering await each
handle before logging the next event.
"""
from __future__ import annotations

import asyncio
import concurrent.futures
import threading
from typing import Any, Callable, Coroutine, Iterable, Mapping

from scribe.config.settings import ScribeSettings
from scribe.core.handle import DispatchHandle
from scribe.kernel.errors import DispatchError
from scribe.kernel.event import Event, Metadata
from scribe.kernel.level import Level
from scribe.kernel.plugin import Plugin
from scribe.kernel.policy import FailurePolicy
from scribe.observability.logging import get_logger

_log = get_logger(__name__)


class Scribe:
    """Structured-logging façade with asynchronous plugin fan-out.

    Parameters
    ----------
    settings:
        A :class:`~scribe.config.settings.ScribeSettings` or just a label.
    plugins:
        Initial plugins, invoked in this order for every event.
    handler_factory:
        ``label -> logger`` used to build the text logger.  Overrides
        ``settings.handler_factory``; defaults to
        :func:`~scribe.observability.logging.get_logger`.
    metadata_provider:
        Zero-argument callable returning ambient metadata for the rendered
        text line.  Plugins never see it.  Overrides ``settings.metadata_provider``.
    failure_policy:
        Overrides ``settings.failure_policy``.

    Example
    -------
    ::

        scribe = Scribe("billing", plugins=[FilePlugin("billing.log")])
        await scribe.info("invoice.sent", metadata={"invoice": "inv-7"})
    """

    def __init__(
        self,
        settings: ScribeSettings | str,
        plugins: Iterable[Plugin] = (),
        *,
        handler_factory: Callable[[str], Any] | None = None,
        metadata_provider: Callable[[], Mapping[str, Any]] | None = None,
        failure_policy: FailurePolicy | str | None = None,
    ) -> None:
        if isinstance(settings, str):
            settings = ScribeSettings(label=settings)
        self._settings = settings
        factory = handler_factory or settings.handler_factory or get_logger
        self._logger = factory(settings.label)
        self._metadata_provider = metadata_provider or settings.metadata_provider
        self._failure_policy = FailurePolicy(failure_policy or settings.failure_policy)
        self._plugins: list[Plugin] = list(plugins)

        self._tasks: set[asyncio.Task[None]] = set()
        self._futures: set[concurrent.futures.Future[None]] = set()
        self._lock = threading.Lock()
        self._loop: asyncio.AbstractEventLoop | None = None
        self._thread: threading.Thread | None = None

    # ------------------------------------------------------------------
    # Plugin registry
    # ------------------------------------------------------------------

    @property
    def label(self) -> str:
        return self._settings.label

    @property
    def settings(self) -> ScribeSettings:
        return self._settings

    @property
    def failure_policy(self) -> FailurePolicy:
        return self._failure_policy

    @property
    def plugins(self) -> tuple[Plugin, ...]:
        """Snapshot of the registered plugins, in invocation order."""
        return tuple(self._plugins)

    def add(self, plugin: Plugin) -> None:
        """Register *plugin*; it receives events logged from now on."""
        self._plugins.append(plugin)

    def remove(self, plugin: Plugin) -> None:
        """Unregister *plugin*.

        Dispatches already started keep invoking it.

        Raises
        ------
        ValueError
            When *plugin* is not registered.
        """
        self._plugins.remove(plugin)

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------

    def log(
        self,
        level: Level | str,
        message: str,
        metadata: Metadata | None = None,
        source: str | None = None,
    ) -> DispatchHandle:
        """Build an event, render it, and fan it out to every plugin.

        Never raises and never waits for a plugin.  An unknown *level* name
        yields a handle that fails with :class:`ValueError` when awaited.
        """
        try:
            event = Event(level=Level.parse(level), message=message, metadata=metadata, source=source)
        except (TypeError, ValueError) as exc:
            return self._schedule(_fail(exc), None)

        self._render(event)
        return self._schedule(self._dispatch(event, tuple(self._plugins)), event)

    def trace(self, message: str, metadata: Metadata | None = None, source: str | None = None) -> DispatchHandle:
        return self.log(Level.TRACE, message, metadata=metadata, source=source)

    def debug(self, message: str, metadata: Metadata | None = None, source: str | None = None) -> DispatchHandle:
        return self.log(Level.DEBUG, message, metadata=metadata, source=source)

    def info(self, message: str, metadata: Metadata | None = None, source: str | None = None) -> DispatchHandle:
        return self.log(Level.INFO, message, metadata=metadata, source=source)

    def notice(self, message: str, metadata: Metadata | None = None, source: str | None = None) -> DispatchHandle:
        return self.log(Level.NOTICE, message, metadata=metadata, source=source)

    def warning(self, message: str, metadata: Metadata | None = None, source: str | None = None) -> DispatchHandle:
        return self.log(Level.WARNING, message, metadata=metadata, source=source)

    # common alias
    warn = warning

    def error(self, message: str, metadata: Metadata | None = None, source: str | None = None) -> DispatchHandle:
        return self.log(Level.ERROR, message, metadata=metadata, source=source)

    def critical(self, message: str, metadata: Metadata | None = None, source: str | None = None) -> DispatchHandle:
        return self.log(Level.CRITICAL, message, metadata=metadata, source=source)

    # ------------------------------------------------------------------
    # Fan-out
    # ------------------------------------------------------------------

    async def _dispatch(self, event: Event, plugins: tuple[Plugin, ...]) -> None:
        if not plugins:
            return
        # gather wraps each invocation in its own task, started in registration order
        results = await asyncio.gather(
            *(_invoke(plugin, event) for plugin in plugins),
            return_exceptions=True,
        )
        failures = [
            (plugin, result)
            for plugin, result in zip(plugins, results)
            if isinstance(result, BaseException)
        ]
        if not failures:
            return
        if self._failure_policy is FailurePolicy.COLLECT:
            raise DispatchError(failures)
        raise failures[0][1]

    def _render(self, event: Event) -> None:
        fields: dict[str, Any] = {}
        try:
            if self._metadata_provider is not None:
                fields.update(self._metadata_provider())
            fields.update(event.metadata_dict())
            method = getattr(self._logger, event.level.stdlib_method)
            extra: dict[str, Any] = {"severity": event.level.value}
            if event.source is not None:
                extra["source"] = event.source
            if fields:
                extra["metadata"] = fields
            method(event.message, **extra)
        except Exception:  # noqa: BLE001
            # the text line is best-effort; it must never fail the caller
            pass

    def _schedule(self, coro: Coroutine[Any, Any, None], event: Event | None) -> DispatchHandle:
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            loop = None

        if loop is not None:
            task = loop.create_task(coro, name=f"scribe.dispatch:{self.label}")
            self._tasks.add(task)
            task.add_done_callback(self._tasks.discard)
            return DispatchHandle(task, event)

        future = asyncio.run_coroutine_threadsafe(coro, self._background_loop())
        with self._lock:
            self._futures.add(future)
        future.add_done_callback(self._forget_future)
        return DispatchHandle(future, event)

    def _forget_future(self, future: concurrent.futures.Future[None]) -> None:
        with self._lock:
            self._futures.discard(future)

    # ------------------------------------------------------------------
    # Background loop (log called outside an event loop)
    # ------------------------------------------------------------------

    def _background_loop(self) -> asyncio.AbstractEventLoop:
        with self._lock:
            if self._loop is None or self._loop.is_closed():
                loop = asyncio.new_event_loop()
                thread = threading.Thread(
                    target=_run_forever,
                    args=(loop,),
                    name=f"scribe-{self.label}",
                    daemon=True,
                )
                thread.start()
                self._loop, self._thread = loop, thread
                _log.debug("scribe.loop.started", label=self.label)
            return self._loop

    @property
    def pending(self) -> int:
        """Number of dispatches that have not settled yet."""
        with self._lock:
            return len(self._tasks) + len(self._futures)

    async def drain(self) -> None:
        """Wait until every in-flight dispatch has settled.

        Nothing is cancelled and no failure is raised.  Call it before
        leaving ``asyncio.run`` so fire-and-forget work is not cancelled by
        loop shutdown.
        """
        loop = asyncio.get_running_loop()
        current = asyncio.current_task()
        while True:
            with self._lock:
                futures = list(self._futures)
            waiting: list[asyncio.Future[Any]] = [
                task for task in self._tasks if task is not current and task.get_loop() is loop
            ]
            waiting.extend(asyncio.wrap_future(f) for f in futures)
            if not waiting:
                return
            await asyncio.wait(waiting)

    def close(self, timeout: float | None = None) -> None:
        """Wait for background dispatches, then stop the background loop.

        Dispatches still running after *timeout* are cancelled; their
        handles settle with :class:`concurrent.futures.CancelledError`.
        Must be called from synchronous code, not from a plugin.
        """
        with self._lock:
            futures = list(self._futures)
            loop, thread = self._loop, self._thread
            self._loop = self._thread = None
        unfinished: set[concurrent.futures.Future[None]] = set()
        if futures:
            _, unfinished = concurrent.futures.wait(futures, timeout=timeout)
            for future in unfinished:
                future.cancel()
        if loop is None:
            return
        if unfinished:
            # let the cancelled tasks unwind before the loop stops
            settled = asyncio.run_coroutine_threadsafe(_settle_tasks(), loop)
            concurrent.futures.wait([settled], timeout=timeout)
        loop.call_soon_threadsafe(loop.stop)
        if thread is not None:
            thread.join(timeout)
        if not loop.is_running():
            loop.close()
        _log.debug("scribe.loop.stopped", label=self.label)

    def __enter__(self) -> Scribe:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    async def __aenter__(self) -> Scribe:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.drain()

    def __repr__(self) -> str:
        return f"Scribe(label={self.label!r}, plugins={len(self._plugins)}, pending={self.pending})"


async def _invoke(plugin: Plugin, event: Event) -> None:
    await plugin.handle(event)


async def _fail(exc: BaseException) -> None:
    raise exc


async def _settle_tasks() -> None:
    current = asyncio.current_task()
    tasks = [task for task in asyncio.all_tasks() if task is not current]
    if tasks:
        await asyncio.wait(tasks)


def _run_forever(loop: asyncio.AbstractEventLoop) -> None:
    asyncio.set_event_loop(loop)
    loop.run_forever()


__all__ = ["Scribe"]
