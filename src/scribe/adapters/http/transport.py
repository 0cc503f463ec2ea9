"""HTTP adapter – HttpTransport port and HttpxTransport."""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Mapping, Protocol, runtime_checkable

from scribe.kernel.errors import ExternalServiceError, TimeoutError as TransportTimeoutError


def _require_httpx() -> Any:
    try:
        import httpx  # type: ignore[import-untyped]
        return httpx
    except ImportError as exc:
        raise ImportError(
            "httpx is required for HttpxTransport. "
            "Install it with: pip install httpx"
        ) from exc


@dataclass(frozen=True)
class TransportResponse:
    """What a response handler receives after a POST."""

    status_code: int
    headers: Mapping[str, str] = field(default_factory=dict)
    content: bytes = b""

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def text(self) -> str:
        return self.content.decode("utf-8", errors="replace")

    def json(self) -> Any:
        return json.loads(self.content) if self.content else None


@runtime_checkable
class HttpTransport(Protocol):
    """Port: POST a body to a URL and return the response."""

    async def post(self, url: str, body: bytes, headers: Mapping[str, str]) -> TransportResponse: ...


class HttpxTransport:
    """HttpTransport over a lazily created :class:`httpx.AsyncClient`.

    HTTP error statuses are returned, not raised; the plugin's response
    handler decides what they mean.  Connection failures and timeouts are
    mapped to :class:`~scribe.kernel.errors.ExternalServiceError` and
    :class:`~scribe.kernel.errors.TimeoutError`.  No retries.

    Parameters
    ----------
    timeout:
        Passed to the client; ``None`` keeps the httpx default.
    **client_kwargs:
        Extra :class:`httpx.AsyncClient` arguments (``transport``, ``verify``...).
    """

    def __init__(self, timeout: float | None = None, **client_kwargs: Any) -> None:
        if timeout is not None:
            client_kwargs["timeout"] = timeout
        self._client_kwargs = client_kwargs
        self._client: Any = None

    def _get_client(self) -> Any:
        if self._client is None or self._client.is_closed:
            httpx = _require_httpx()
            self._client = httpx.AsyncClient(**self._client_kwargs)
        return self._client

    async def __aenter__(self) -> HttpxTransport:
        self._get_client()
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    async def post(self, url: str, body: bytes, headers: Mapping[str, str]) -> TransportResponse:
        httpx = _require_httpx()
        try:
            response = await self._get_client().post(url, content=body, headers=dict(headers))
        except httpx.TimeoutException as exc:
            raise TransportTimeoutError(f"HTTP request timed out: POST {url}", cause=exc) from exc
        except httpx.HTTPError as exc:
            raise ExternalServiceError(service=url, message=str(exc) or repr(exc), cause=exc) from exc
        return TransportResponse(
            status_code=response.status_code,
            headers=dict(response.headers),
            content=response.content,
        )

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None


__all__ = ["HttpTransport", "HttpxTransport", "TransportResponse"]
