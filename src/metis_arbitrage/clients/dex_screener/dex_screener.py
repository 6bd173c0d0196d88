# -*- coding: utf-8 -*-
"""DEX Screener API client (public search endpoint)."""

from __future__ import annotations

import structlog
from typing import TYPE_CHECKING, Any, Callable, List, Optional, cast
from structlog.contextvars import bound_contextvars

from metis_arbitrage.clients.dex_screener.schema import PairSchema
from metis_arbitrage.config import Settings
from metis_arbitrage.exceptions import DexScreenerDecodeError

if TYPE_CHECKING:
    from metis_arbitrage.clients.http import AsyncHttpClient


class DexScreenerClient:
    """Client for the DEX Screener API (GET /search?q=...)."""

    def __init__(
        self,
        http_client: "AsyncHttpClient",
        settings: Settings,
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        """Initialize the client.

        Args:
            http_client: Async HTTP client (e.g. AsyncHttpClient).
            settings: Application settings (uses settings.api.dex_screener_url).
            get_logger: Logger factory (injected) with default of structlog.get_logger.
            logger_name: Optional logger name (defaults to class name).
        """
        self._http = http_client
        self._settings = settings
        self._logger = get_logger(logger_name or self.__class__.__name__)

    def _base_url(self) -> str:
        return self._settings.api.dex_screener_url.rstrip("/")

    async def search_pairs(self, term: str) -> List[PairSchema]:
        """Search pairs matching a keyword across all chains and DEXes.

        A body without "pairs" (or with "pairs": null) means no matches.

        Args:
            term: Search keyword (token symbol, DEX name, ...).

        Returns:
            Pair items from the response; non-object items are dropped.

        Raises:
            DexScreenerAPIError: The request failed (from the HTTP client).
            DexScreenerDecodeError: The body is not an object or "pairs" is not a list.
        """
        with bound_contextvars(dex_screener_term=term):
            url = f"{self._base_url()}/search"
            self._logger.debug("dex_screener_search_request", http_url=url)
            data = await self._http.get_json(url, params={"q": term})
            if not isinstance(data, dict):
                raise DexScreenerDecodeError(
                    f"Expected a JSON object, got {type(data).__name__}",
                    url=url,
                )
            raw_pairs = cast(dict[str, Any], data).get("pairs")
            if raw_pairs is None:
                return []
            if not isinstance(raw_pairs, list):
                raise DexScreenerDecodeError(
                    f"Expected 'pairs' to be a list, got {type(raw_pairs).__name__}",
                    url=url,
                )
            result: List[PairSchema] = []
            for x in cast(list[Any], raw_pairs):
                if isinstance(x, dict):
                    result.append(cast(PairSchema, x))
            self._logger.debug(
                "dex_screener_search_response",
                dex_screener_pairs_count=len(result),
            )
            return result
