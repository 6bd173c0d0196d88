# -*- coding: utf-8 -*-
"""DEX Screener price source: search terms -> filtered, validated, deduplicated pairs -> cache."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from datetime import UTC, datetime
from decimal import Decimal
from typing import TYPE_CHECKING, Any, cast

import aiohttp
import structlog
from structlog.contextvars import bound_contextvars

from metis_arbitrage.clients.dex_screener.schema import LiquiditySchema, PairSchema, TokenSchema
from metis_arbitrage.exceptions import DexScreenerAPIError, PriceFeedError
from metis_arbitrage.models.cached_price import CachedPrice, CacheKey
from metis_arbitrage.models.token import Exchange, Token
from metis_arbitrage.models.trading_pair import TradingPair
from metis_arbitrage.price_sources.base import IPriceSource
from metis_arbitrage.utils.dedupe import dedupe_pairs
from metis_arbitrage.utils.parsing import ZERO, to_decimal
from metis_arbitrage.utils.validation import mask_address

if TYPE_CHECKING:
    from metis_arbitrage.clients.dex_screener import DexScreenerClient
    from metis_arbitrage.config import Settings
    from metis_arbitrage.persistence.repositories.interfaces.price_cache_repository import (
        IPriceCacheRepository,
    )


class PairRejected(ValueError):
    """A raw record did not pass validation. Expected and frequent; not a fault."""


def _token(raw: Any, decimals: int) -> Token:
    if not isinstance(raw, dict):
        raise PairRejected("missing token descriptor")
    data = cast(TokenSchema, raw)
    try:
        return Token.create(
            symbol=str(data.get("symbol") or ""),
            name=str(data.get("name") or ""),
            decimals=decimals,
            address=str(data.get("address") or ""),
        )
    except ValueError as e:
        raise PairRejected(str(e)) from e


def convert_pair(
    record: PairSchema,
    *,
    chain_label: str,
    min_liquidity_usd: Decimal,
    decimals: int,
) -> TradingPair:
    """Convert one DEX Screener record into a TradingPair.

    Price comes from priceUsd, falling back to priceNative. Unparsable prices
    count as zero. Missing liquidity or reserves count as zero.

    Raises:
        PairRejected: No price, price <= 0, liquidity below the floor, or a
            token without symbol/address.
    """
    price_raw: Any = record.get("priceUsd")
    if price_raw is None:
        price_raw = record.get("priceNative")
    if price_raw is None:
        raise PairRejected("no price data")
    price = to_decimal(price_raw)
    if price <= ZERO:
        raise PairRejected(f"invalid price: {price_raw}")

    liquidity_raw = record.get("liquidity")
    liquidity = cast(LiquiditySchema, liquidity_raw) if isinstance(liquidity_raw, dict) else LiquiditySchema()
    liquidity_usd = to_decimal(liquidity.get("usd"))
    if liquidity_usd < min_liquidity_usd:
        raise PairRejected(f"liquidity too low: ${liquidity_usd}")

    base_token = _token(record.get("baseToken"), decimals)
    quote_token = _token(record.get("quoteToken"), decimals)
    exchange = Exchange(
        name=str(record.get("dexId") or ""),
        chain=chain_label,
        router_address=str(record.get("pairAddress") or ""),
    )
    return TradingPair(
        base_token=base_token,
        quote_token=quote_token,
        exchange=exchange,
        price=price,
        liquidity=liquidity_usd,
        reserve_base=to_decimal(liquidity.get("base")),
        reserve_quote=to_decimal(liquidity.get("quote")),
    )


class DexScreenerPriceSource(IPriceSource):
    """Price source backed by the DEX Screener search API, limited to one chain and allow-listed DEXes.

    Sole writer of its snapshot in the price cache.
    """

    name = "dex_screener"

    def __init__(
        self,
        client: DexScreenerClient,
        cache: IPriceCacheRepository,
        settings: Settings,
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: str | None = None,
    ) -> None:
        """Initialize the price source.

        Args:
            client: DEX Screener API client (injected).
            cache: Price cache repository shared with readers (injected).
            settings: Application settings (uses settings.feed).
            get_logger: Logger factory (injected).
            logger_name: Optional logger name (defaults to class name).
        """
        self._client = client
        self._cache = cache
        self._settings = settings
        self._logger = get_logger(logger_name or self.__class__.__name__)

    async def list_pairs(self) -> list[TradingPair]:
        """Return the cached snapshot; fetch once if nothing is cached yet."""
        pairs = await self._cache.get_pairs(self.name)
        if pairs:
            return pairs
        try:
            fetched = await self._fetch_pairs()
        except PriceFeedError as e:
            self._logger.warning(
                "price_feed_warm_up_failed",
                error_type=type(e.cause).__name__,
                error_message=str(e),
            )
            return []
        await self._store(fetched)
        return list(fetched)

    async def get_price(self, base: str, quote: str) -> Decimal | None:
        """Return the cached price if present and no older than the freshness window."""
        entry = await self._cache.get(CacheKey.price(base, quote))
        if entry is None or entry.is_stale(self._settings.feed.price_max_age_seconds):
            return None
        return entry.value

    async def get_liquidity(self, base: str, quote: str) -> Decimal | None:
        """Return the cached liquidity, however old.

        Unlike get_price, no freshness window applies: after a failed refresh
        callers still get the last known liquidity.
        """
        entry = await self._cache.get(CacheKey.liquidity(base, quote))
        if entry is None:
            return None
        return entry.value

    async def refresh(self) -> None:
        """Fetch all search terms and replace the snapshot in one step.

        Raises:
            PriceFeedError: The HTTP client could not be built or invoked.
        """
        self._logger.debug("price_feed_refresh_started")
        pairs = await self._fetch_pairs()
        await self._store(pairs)
        self._logger.info(
            "price_feed_refreshed",
            pairs_count=len(pairs),
            cache_entries=await self._cache.entry_count(),
        )

    async def _store(self, pairs: list[TradingPair]) -> None:
        """Build every price/liquidity entry for pairs, then swap them in with the pair list."""
        now = datetime.now(UTC)
        entries: dict[CacheKey, CachedPrice] = {}
        for pair in pairs:
            base = pair.base_token.symbol
            quote = pair.quote_token.symbol
            source = f"DEX Screener - {pair.exchange.name}"
            entries[CacheKey.price(base, quote)] = CachedPrice(
                value=pair.price, timestamp=now, source=source
            )
            entries[CacheKey.liquidity(base, quote)] = CachedPrice(
                value=pair.liquidity, timestamp=now, source=source
            )
        await self._cache.replace_snapshot(self.name, pairs, entries)

    async def _search_all_terms(self, terms: list[str]) -> list[list[PairSchema]]:
        """Run the per-term searches, in term order.

        Raises:
            PriceFeedError: The HTTP client could not be built or invoked.
        """
        try:
            if self._settings.feed.concurrent_terms:
                return list(await asyncio.gather(*(self._fetch_term(t) for t in terms)))
            return [await self._fetch_term(t) for t in terms]
        except (RuntimeError, OSError, aiohttp.ClientError) as e:
            self._logger.exception(
                "price_feed_refresh_failed",
                error_type=type(e).__name__,
                error_message=str(e),
            )
            raise PriceFeedError(
                f"{self.name} fetch could not run: {e}",
                source=self.name,
                cause=e,
            ) from e

    async def _fetch_pairs(self) -> list[TradingPair]:
        """Query every search term and return converted, deduplicated pairs in discovery order."""
        feed = self._settings.feed
        terms = feed.search_terms
        per_term = await self._search_all_terms(terms)

        allowed_dexes = set(feed.allowed_dexes)
        converted: list[TradingPair] = []
        rejected = 0
        for records in per_term:
            for record in records:
                chain_id = record.get("chainId")
                dex_id = record.get("dexId")
                if not isinstance(chain_id, str) or chain_id != feed.chain_id:
                    continue
                if not isinstance(dex_id, str) or dex_id not in allowed_dexes:
                    continue
                try:
                    converted.append(
                        convert_pair(
                            record,
                            chain_label=feed.chain_label,
                            min_liquidity_usd=feed.min_liquidity_usd,
                            decimals=feed.default_decimals,
                        )
                    )
                except PairRejected as e:
                    rejected += 1
                    self._logger.debug(
                        "price_feed_pair_skipped",
                        pair_address_masked=mask_address(str(record.get("pairAddress") or "")),
                        reason=str(e),
                    )

        pairs = dedupe_pairs(converted)
        self._logger.info(
            "price_feed_pairs_fetched",
            pairs_count=len(pairs),
            pairs_rejected=rejected,
            duplicates_dropped=len(converted) - len(pairs),
            search_terms_count=len(terms),
        )
        return pairs

    async def _fetch_term(self, term: str) -> list[PairSchema]:
        """Search one term. API and decode failures are logged and give no records."""
        with bound_contextvars(price_feed_term=term):
            try:
                records = await self._client.search_pairs(term)
            except DexScreenerAPIError as e:
                self._logger.warning(
                    "price_feed_term_failed",
                    error_type=type(e).__name__,
                    error_message=str(e),
                    http_status_code=e.status_code,
                )
                return []
            self._logger.debug("price_feed_term_fetched", records_count=len(records))
            return records
