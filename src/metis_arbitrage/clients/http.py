# -*- coding: utf-8 -*-
"""Async HTTP client with a per-request timeout and typed failures."""

from __future__ import annotations

import asyncio
import uuid
import aiohttp
import structlog
from typing import Any, Callable, Dict, Optional
from structlog.contextvars import bound_contextvars

from metis_arbitrage.config import Settings
from metis_arbitrage.exceptions import DexScreenerAPIError, DexScreenerDecodeError

SessionFactory = Callable[[aiohttp.ClientTimeout], aiohttp.ClientSession]


def _default_session_factory(timeout: aiohttp.ClientTimeout) -> aiohttp.ClientSession:
    return aiohttp.ClientSession(timeout=timeout)


class AsyncHttpClient:
    """Async JSON-over-HTTP client. One attempt per call; callers decide what a failure means.

    Injects Settings and optionally an aiohttp.ClientSession. If no session
    is provided, one is created lazily through session_factory and must be
    closed via aclose() or by using the client as an async context manager.
    """

    def __init__(
        self,
        settings: Settings,
        *,
        session: Optional[aiohttp.ClientSession] = None,
        session_factory: SessionFactory = _default_session_factory,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        """Initialize the client.

        Args:
            settings: Configuration (uses settings.api.timeout_seconds).
            session: Optional shared aiohttp session. If None, the client
                creates and owns a session (call aclose() when done).
            session_factory: Builds the owned session from a ClientTimeout.
            get_logger: Logger factory (injected) with default of structlog.get_logger.
            logger_name: Optional logger name (defaults to class name).
        """
        self._settings = settings
        self._session = session
        self._session_factory = session_factory
        self._owns_session = session is None
        self._logger = get_logger(logger_name or self.__class__.__name__)

    async def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            timeout = aiohttp.ClientTimeout(total=self._settings.api.timeout_seconds)
            self._session = self._session_factory(timeout)
        return self._session

    async def aclose(self) -> None:
        """Close the session if this client owns it."""
        if self._owns_session and self._session is not None and not self._session.closed:
            await self._session.close()
            self._session = None

    async def __aenter__(self) -> AsyncHttpClient:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    async def get_json(
        self,
        url: str,
        *,
        params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Perform a GET request and return the decoded JSON body.

        Session construction errors are not wrapped: they mean the client
        cannot run at all and propagate unchanged.

        Args:
            url: Full URL to request.
            params: Optional query parameters.

        Returns:
            Parsed JSON response (dict or list).

        Raises:
            DexScreenerAPIError: Transport failure, timeout or non-2xx status.
            DexScreenerDecodeError: Body is not valid JSON.
        """
        params = params or {}
        request_id = uuid.uuid4().hex[:12]
        session = await self._get_session()

        with bound_contextvars(http_url=url, http_request_id=request_id):
            try:
                async with session.get(url, params=params) as response:
                    response.raise_for_status()
                    return await response.json(content_type=None)
            except aiohttp.ClientResponseError as e:
                self._logger.debug(
                    "http_get_bad_status",
                    http_status_code=e.status,
                    error_message=str(e),
                )
                raise DexScreenerAPIError(
                    f"GET returned status {e.status}: {url}",
                    url=url,
                    status_code=e.status,
                    cause=e,
                ) from e
            except (aiohttp.ClientError, asyncio.TimeoutError) as e:
                self._logger.debug(
                    "http_get_transport_error",
                    error_type=type(e).__name__,
                    error_message=str(e),
                )
                raise DexScreenerAPIError(
                    f"GET failed: {url}",
                    url=url,
                    cause=e,
                ) from e
            except ValueError as e:
                self._logger.debug(
                    "http_get_decode_error",
                    error_type=type(e).__name__,
                    error_message=str(e),
                )
                raise DexScreenerDecodeError(
                    f"GET returned a non-JSON body: {url}",
                    url=url,
                    cause=e,
                ) from e
