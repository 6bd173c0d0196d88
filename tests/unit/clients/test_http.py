# -*- coding: utf-8 -*-
"""Unit tests for AsyncHttpClient error mapping and session handling."""

from __future__ import annotations

import asyncio
from typing import Any
from unittest.mock import AsyncMock, Mock

import aiohttp
import pytest

from metis_arbitrage.clients.http import AsyncHttpClient
from metis_arbitrage.config import Settings
from metis_arbitrage.exceptions import DexScreenerAPIError, DexScreenerDecodeError


class _FakeResponse:
    """Minimal stand-in for aiohttp.ClientResponse used as an async context manager."""

    def __init__(self, *, body: Any = None, status_error: Exception | None = None, json_error: Exception | None = None) -> None:
        self._body = body
        self._status_error = status_error
        self._json_error = json_error
        self.json_content_type: Any = "unset"

    async def __aenter__(self) -> _FakeResponse:
        return self

    async def __aexit__(self, *args: Any) -> None:
        return None

    def raise_for_status(self) -> None:
        if self._status_error is not None:
            raise self._status_error

    async def json(self, *, content_type: Any = "application/json") -> Any:
        self.json_content_type = content_type
        if self._json_error is not None:
            raise self._json_error
        return self._body


class _FakeSession:
    """Records GET calls and returns a preset response (or raises a preset error)."""

    def __init__(self, response: _FakeResponse | None = None, error: Exception | None = None) -> None:
        self._response = response
        self._error = error
        self.calls: list[tuple[str, dict[str, Any]]] = []
        self.closed = False
        self.close = AsyncMock(side_effect=self._close)

    async def _close(self) -> None:
        self.closed = True

    def get(self, url: str, *, params: dict[str, Any]) -> _FakeResponse:
        self.calls.append((url, params))
        if self._error is not None:
            raise self._error
        assert self._response is not None
        return self._response


def _client(session: _FakeSession, settings: Settings | None = None) -> AsyncHttpClient:
    return AsyncHttpClient(
        settings or Settings(),
        session=session,  # type: ignore[arg-type]
        get_logger=lambda _name: Mock(),
    )


async def test_get_json_returns_body_and_passes_params() -> None:
    response = _FakeResponse(body={"pairs": []})
    session = _FakeSession(response)

    data = await _client(session).get_json("https://x/search", params={"q": "metis"})

    assert data == {"pairs": []}
    assert session.calls == [("https://x/search", {"q": "metis"})]
    assert response.json_content_type is None


async def test_bad_status_maps_to_api_error_with_status() -> None:
    status_error = aiohttp.ClientResponseError(
        request_info=Mock(), history=(), status=429, message="Too Many Requests"
    )
    session = _FakeSession(_FakeResponse(status_error=status_error))

    with pytest.raises(DexScreenerAPIError) as exc_info:
        await _client(session).get_json("https://x/search")

    assert not isinstance(exc_info.value, DexScreenerDecodeError)
    assert exc_info.value.status_code == 429
    assert exc_info.value.cause is status_error
    assert exc_info.value.url == "https://x/search"


@pytest.mark.parametrize(
    "error",
    [aiohttp.ClientConnectionError("refused"), asyncio.TimeoutError()],
)
async def test_transport_failure_maps_to_api_error(error: Exception) -> None:
    session = _FakeSession(error=error)

    with pytest.raises(DexScreenerAPIError) as exc_info:
        await _client(session).get_json("https://x/search")

    assert exc_info.value.status_code is None
    assert exc_info.value.cause is error


async def test_invalid_json_maps_to_decode_error() -> None:
    session = _FakeSession(_FakeResponse(json_error=ValueError("Expecting value")))

    with pytest.raises(DexScreenerDecodeError):
        await _client(session).get_json("https://x/search")


async def test_owned_session_built_with_configured_timeout_and_closed() -> None:
    session = _FakeSession(_FakeResponse(body={}))
    timeouts: list[aiohttp.ClientTimeout] = []

    def factory(timeout: aiohttp.ClientTimeout) -> Any:
        timeouts.append(timeout)
        return session

    settings = Settings.from_env(api={"timeout_seconds": 10})
    async with AsyncHttpClient(settings, session_factory=factory, get_logger=lambda _n: Mock()) as client:
        await client.get_json("https://x/search")
        await client.get_json("https://x/search")

    assert len(timeouts) == 1
    assert timeouts[0].total == 10.0
    session.close.assert_awaited_once()


async def test_injected_session_is_not_closed() -> None:
    session = _FakeSession(_FakeResponse(body={}))
    client = _client(session)

    await client.get_json("https://x/search")
    await client.aclose()

    session.close.assert_not_awaited()


async def test_session_factory_failure_propagates_unwrapped() -> None:
    def factory(_timeout: aiohttp.ClientTimeout) -> Any:
        raise RuntimeError("no event loop resources")

    client = AsyncHttpClient(Settings(), session_factory=factory, get_logger=lambda _n: Mock())

    with pytest.raises(RuntimeError):
        await client.get_json("https://x/search")
