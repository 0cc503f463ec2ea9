"""Storage adapter – FileStore port and LocalFileStore."""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Protocol, Sequence, runtime_checkable

from scribe.kernel.errors import StorageError, StorageNotFoundError

__all__ = ["FileStore", "LocalFileStore"]


@runtime_checkable
class FileStore(Protocol):
    """Port: persist an ordered sequence of lines per path.

    Calls are blocking; async callers run them in a worker thread.
    """

    def read(self, path: str | os.PathLike[str]) -> list[str]:
        """Return the stored lines, or ``[]`` when *path* does not exist."""
        ...

    def write(self, path: str | os.PathLike[str], lines: Sequence[str]) -> None:
        """Replace the content of *path* with *lines*."""
        ...

    def data(self, path: str | os.PathLike[str]) -> bytes:
        """Return the raw stored bytes; raise :class:`StorageNotFoundError` if absent."""
        ...

    def delete(self, path: str | os.PathLike[str]) -> None:
        """Remove *path*; raise :class:`StorageNotFoundError` if absent."""
        ...

    def exists(self, path: str | os.PathLike[str]) -> bool: ...


class LocalFileStore:
    """FileStore on the local filesystem.

    Each file holds its lines as a UTF-8 JSON array, so lines may contain
    newlines.  Parent directories are created on write.  There is no
    locking: concurrent read-modify-write cycles on one path race and the
    last writer wins.
    """

    def __init__(self, encoding: str = "utf-8") -> None:
        self._encoding = encoding

    def read(self, path: str | os.PathLike[str]) -> list[str]:
        try:
            raw = self.data(path)
        except StorageNotFoundError:
            return []
        if not raw.strip():
            return []
        try:
            lines = json.loads(raw.decode(self._encoding))
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise StorageError(f"Corrupt line file: {exc}", path=str(path), cause=exc) from exc
        if not isinstance(lines, list):
            raise StorageError("Line file does not hold a JSON array", path=str(path))
        return [str(line) for line in lines]

    def write(self, path: str | os.PathLike[str], lines: Sequence[str]) -> None:
        target = Path(path)
        payload = json.dumps(list(lines), ensure_ascii=False).encode(self._encoding)
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(payload)
        except OSError as exc:
            raise StorageError(f"Could not write '{target}': {exc}", path=str(target), cause=exc) from exc

    def data(self, path: str | os.PathLike[str]) -> bytes:
        target = Path(path)
        try:
            return target.read_bytes()
        except FileNotFoundError as exc:
            raise StorageNotFoundError(str(target), cause=exc) from exc
        except OSError as exc:
            raise StorageError(f"Could not read '{target}': {exc}", path=str(target), cause=exc) from exc

    def delete(self, path: str | os.PathLike[str]) -> None:
        target = Path(path)
        try:
            target.unlink()
        except FileNotFoundError as exc:
            raise StorageNotFoundError(str(target), cause=exc) from exc
        except OSError as exc:
            raise StorageError(f"Could not delete '{target}': {exc}", path=str(target), cause=exc) from exc

    def exists(self, path: str | os.PathLike[str]) -> bool:
        return Path(path).is_file()
