"""Plugins – URLPlugin POSTs every event to a remote endpoint."""
from __future__ import annotations

import inspect
from typing import Any, Callable, Mapping

from scribe.adapters.http import HttpTransport, HttpxTransport, TransportResponse
from scribe.formatters import json_formatter
from scribe.kernel.errors import FormatterError
from scribe.kernel.event import Event
from scribe.kernel.plugin import run_formatter

__all__ = ["DEFAULT_HEADERS", "URLPlugin"]

DEFAULT_HEADERS: Mapping[str, str] = {
    "Content-Type": "application/json; charset=utf-8",
    "Accept": "application/json",
}

ResponseHandler = Callable[[TransportResponse], Any]


class URLPlugin:
    """Send each event to *url* with a single POST.

    The formatter produces the request body (``bytes`` or ``str``; ``None``
    skips the event).  After the call the response is passed to
    *response_handler*, which may be sync or async and may raise to report
    failure.  Transport errors surface as the plugin's failure; nothing is
    retried.

    Parameters
    ----------
    url:
        Endpoint receiving the POST.
    formatter:
        Event -> body.  Defaults to :func:`~scribe.formatters.json_formatter`.
    headers:
        Request header fields.  Defaults to :data:`DEFAULT_HEADERS`.
    response_handler:
        Receives the :class:`~scribe.adapters.http.TransportResponse`.
    transport:
        Defaults to an :class:`~scribe.adapters.http.HttpxTransport` owned
        by this plugin and released by :meth:`aclose`.
    """

    def __init__(
        self,
        url: str,
        formatter: Callable[[Event], Any] = json_formatter,
        *,
        headers: Mapping[str, str] | None = None,
        response_handler: ResponseHandler | None = None,
        transport: HttpTransport | None = None,
    ) -> None:
        self.url = url
        self.formatter = formatter
        self.headers: dict[str, str] = dict(DEFAULT_HEADERS if headers is None else headers)
        self.response_handler = response_handler
        self._owns_transport = transport is None
        self._transport: HttpTransport = transport or HttpxTransport()

    @property
    def name(self) -> str:
        return f"url:{self.url}"

    async def handle(self, event: Event) -> None:
        body = await run_formatter(self.formatter, event)
        if body is None:
            return
        if isinstance(body, str):
            body = body.encode("utf-8")
        if not isinstance(body, (bytes, bytearray)):
            raise FormatterError(
                f"URLPlugin formatter must return bytes, str or None, got {type(body).__name__}",
                plugin=self.name,
            )
        response = await self._transport.post(self.url, bytes(body), self.headers)
        if self.response_handler is not None:
            outcome = self.response_handler(response)
            if inspect.isawaitable(outcome):
                await outcome

    async def aclose(self) -> None:
        """Close the transport if this plugin created it."""
        if self._owns_transport and isinstance(self._transport, HttpxTransport):
            await self._transport.aclose()

    def __repr__(self) -> str:
        return f"URLPlugin(url={self.url!r})"
