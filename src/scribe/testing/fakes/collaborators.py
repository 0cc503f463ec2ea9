"""Testing fakes – in-memory file store and HTTP transport."""
from __future__ import annotations

import json
import os
from typing import Mapping, Sequence

from scribe.adapters.http import TransportResponse
from scribe.kernel.errors import StorageNotFoundError


class InMemoryFileStore:
    """Fake FileStore for unit tests."""

    def __init__(self) -> None:
        self._files: dict[str, list[str]] = {}
        self.writes = 0

    def read(self, path: str | os.PathLike[str]) -> list[str]:
        return list(self._files.get(os.fspath(path), []))

    def write(self, path: str | os.PathLike[str], lines: Sequence[str]) -> None:
        self._files[os.fspath(path)] = list(lines)
        self.writes += 1

    def data(self, path: str | os.PathLike[str]) -> bytes:
        key = os.fspath(path)
        if key not in self._files:
            raise StorageNotFoundError(key)
        return json.dumps(self._files[key]).encode("utf-8")

    def delete(self, path: str | os.PathLike[str]) -> None:
        key = os.fspath(path)
        if key not in self._files:
            raise StorageNotFoundError(key)
        del self._files[key]

    def exists(self, path: str | os.PathLike[str]) -> bool:
        return os.fspath(path) in self._files

    def paths(self) -> list[str]:
        return list(self._files)


class RecordingTransport:
    """Fake HttpTransport that records requests and replies with a fixed response."""

    def __init__(
        self,
        response: TransportResponse | None = None,
        error: Exception | None = None,
    ) -> None:
        self._response = response or TransportResponse(status_code=200)
        self._error = error
        self.requests: list[tuple[str, bytes, dict[str, str]]] = []

    async def post(self, url: str, body: bytes, headers: Mapping[str, str]) -> TransportResponse:
        self.requests.append((url, body, dict(headers)))
        if self._error is not None:
            raise self._error
        return self._response

    @property
    def count(self) -> int:
        return len(self.requests)


__all__ = ["InMemoryFileStore", "RecordingTransport"]
