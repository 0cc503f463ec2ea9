"""Unit tests for HttpxTransport (respx-mocked)."""

from __future__ import annotations

import asyncio

import httpx
import pytest
import respx

from scribe.adapters.http import HttpTransport, HttpxTransport, TransportResponse
from scribe.kernel.errors import ExternalServiceError, TimeoutError

_URL = "https://logs.example.com/ingest"


async def _post(transport: HttpxTransport, body: bytes = b"{}") -> TransportResponse:
    async with transport:
        return await transport.post(_URL, body, {"Content-Type": "application/json"})


class TestHttpxTransport:
    def test_satisfies_protocol(self) -> None:
        assert isinstance(HttpxTransport(), HttpTransport)

    @respx.mock
    def test_post_returns_response(self) -> None:
        route = respx.post(_URL).mock(return_value=httpx.Response(200, text="accepted"))
        response = asyncio.run(_post(HttpxTransport(), b'{"a":1}'))
        assert route.calls.last.request.content == b'{"a":1}'
        assert response.ok
        assert response.text == "accepted"

    @respx.mock
    def test_error_status_is_returned_not_raised(self) -> None:
        respx.post(_URL).mock(return_value=httpx.Response(500))
        response = asyncio.run(_post(HttpxTransport()))
        assert response.status_code == 500
        assert not response.ok

    @respx.mock
    def test_connect_error_maps_to_external_service_error(self) -> None:
        respx.post(_URL).mock(side_effect=httpx.ConnectError("refused"))
        with pytest.raises(ExternalServiceError) as exc_info:
            asyncio.run(_post(HttpxTransport()))
        assert exc_info.value.service == _URL

    @respx.mock
    def test_timeout_maps_to_timeout_error(self) -> None:
        respx.post(_URL).mock(side_effect=httpx.ReadTimeout("slow"))
        with pytest.raises(TimeoutError):
            asyncio.run(_post(HttpxTransport(timeout=0.1)))

    def test_aclose_without_client_is_noop(self) -> None:
        asyncio.run(HttpxTransport().aclose())


class TestTransportResponse:
    def test_empty_json_is_none(self) -> None:
        assert TransportResponse(status_code=204).json() is None

    def test_ok_range(self) -> None:
        assert TransportResponse(status_code=299).ok
        assert not TransportResponse(status_code=302).ok
