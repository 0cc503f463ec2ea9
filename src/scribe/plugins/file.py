"""Plugins – FilePlugin appends one formatted line per event to a line file."""
from __future__ import annotations

import asyncio
import os
import weakref
from pathlib import Path
from typing import Any, Callable

from scribe.adapters.storage import FileStore, LocalFileStore
from scribe.formatters import line_formatter
from scribe.kernel.errors import FormatterError
from scribe.kernel.event import Event
from scribe.kernel.plugin import run_formatter

__all__ = ["FilePlugin"]


class FilePlugin:
    """Append the formatted event to ``directory/filename``.

    Each invocation reads the stored lines (a missing file reads as empty),
    appends the new line and rewrites the whole file.  The formatter may
    return ``None`` to skip an event; the plugin then does nothing and
    succeeds.

    The read-modify-write is not locked by default, so concurrent events
    aimed at the same file race and the last writer wins.  Pass
    ``serialize=True`` to queue this instance's own writes behind a lock;
    separate instances on the same file, and writes driven from different
    event loops, are still not coordinated.
    """

    def __init__(
        self,
        filename: str | os.PathLike[str],
        formatter: Callable[[Event], Any] = line_formatter,
        *,
        directory: str | os.PathLike[str] = ".",
        store: FileStore | None = None,
        serialize: bool = False,
    ) -> None:
        self.filename = str(filename)
        self.directory = str(directory)
        self.formatter = formatter
        self._store: FileStore = store or LocalFileStore()
        self._serialize = serialize
        # asyncio.Lock binds to one loop; a plugin may be driven from several
        self._locks: weakref.WeakKeyDictionary[asyncio.AbstractEventLoop, asyncio.Lock] = (
            weakref.WeakKeyDictionary()
        )

    @property
    def name(self) -> str:
        return f"file:{self.path}"

    @property
    def path(self) -> Path:
        return Path(self.directory) / self.filename

    @property
    def store(self) -> FileStore:
        return self._store

    async def handle(self, event: Event) -> None:
        line = await run_formatter(self.formatter, event)
        if line is None:
            return
        if not isinstance(line, str):
            raise FormatterError(
                f"FilePlugin formatter must return str or None, got {type(line).__name__}",
                plugin=self.name,
            )
        if not self._serialize:
            await self._append(line)
            return
        async with self._loop_lock():
            await self._append(line)

    def _loop_lock(self) -> asyncio.Lock:
        loop = asyncio.get_running_loop()
        lock = self._locks.get(loop)
        if lock is None:
            lock = self._locks[loop] = asyncio.Lock()
        return lock

    async def _append(self, line: str) -> None:
        path = self.path
        lines = await asyncio.to_thread(self._store.read, path)
        lines.append(line)
        await asyncio.to_thread(self._store.write, path, lines)

    def __repr__(self) -> str:
        return f"FilePlugin(path={str(self.path)!r})"
