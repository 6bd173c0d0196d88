# -*- coding: utf-8 -*-
"""Unit tests for DexScreenerPriceSource (fetch, filter, cache, staleness)."""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from decimal import Decimal
from types import SimpleNamespace
from typing import Any
from unittest.mock import AsyncMock, Mock

import aiohttp
import pytest

from metis_arbitrage.config import Settings
from metis_arbitrage.exceptions import DexScreenerAPIError, PriceFeedError
from metis_arbitrage.models.cached_price import CachedPrice, CacheKey
from metis_arbitrage.persistence.repositories.in_memory.price_cache_repository import (
    InMemoryPriceCacheRepository,
)
from metis_arbitrage.price_sources.dex_screener import DexScreenerPriceSource


def _settings(*, terms: str = "metis,netswap", concurrent: bool = False) -> Settings:
    return Settings.from_env(feed={"search_terms": terms, "concurrent_terms": concurrent})


def _client(responses: dict[str, Any]) -> Any:
    """Fake DexScreenerClient: term -> list of records, or an exception to raise."""

    def search(term: str) -> Any:
        result = responses.get(term, [])
        if isinstance(result, Exception):
            raise result
        return result

    return SimpleNamespace(search_pairs=AsyncMock(side_effect=search))


def _source(client: Any, cache: InMemoryPriceCacheRepository, settings: Settings | None = None) -> DexScreenerPriceSource:
    return DexScreenerPriceSource(
        client,
        cache,
        settings or _settings(),
        get_logger=lambda _n: Mock(),
    )


@pytest.fixture
def records(dex_record_factory: Callable[..., Any]) -> dict[str, Any]:
    """Search responses with one duplicate, one foreign chain, one foreign DEX and one illiquid pair."""
    weth_netswap = dex_record_factory(dex_id="netswap", price_usd="1850")
    weth_tethys = dex_record_factory(dex_id="tethys", price_usd="1852", pair_address="0xtethys0000000000000000000000000000000001")
    metis_netswap = dex_record_factory(base="METIS", dex_id="netswap", price_usd="85")
    return {
        "metis": [
            weth_netswap,
            metis_netswap,
            dex_record_factory(chain_id="ethereum", dex_id="uniswap"),
            dex_record_factory(base="DUST", liquidity={"usd": 999}),
        ],
        "netswap": [
            dict(weth_netswap),
            weth_tethys,
            dex_record_factory(dex_id="hermes", base="METIS"),
        ],
    }


async def test_refresh_filters_converts_and_dedupes(
    records: dict[str, Any],
    price_cache_repo: InMemoryPriceCacheRepository,
) -> None:
    source = _source(_client(records), price_cache_repo)

    await source.refresh()

    pairs = await source.list_pairs()
    assert [p.full_id() for p in pairs] == [
        "netswap:WETH/USDC",
        "netswap:METIS/USDC",
        "tethys:WETH/USDC",
    ]
    assert all(p.exchange.chain == "Metis" for p in pairs)


async def test_refresh_writes_price_and_liquidity_entries(
    records: dict[str, Any],
    price_cache_repo: InMemoryPriceCacheRepository,
) -> None:
    source = _source(_client(records), price_cache_repo)

    await source.refresh()

    entry = await price_cache_repo.get(CacheKey.price("METIS", "USDC"))
    assert entry is not None
    assert entry.value == Decimal("85")
    assert entry.source == "DEX Screener - netswap"
    assert await source.get_price("METIS", "USDC") == Decimal("85")
    assert await source.get_liquidity("METIS", "USDC") == Decimal("500000.25")
    assert await source.get_price("NOPE", "USDC") is None
    assert await source.get_liquidity("NOPE", "USDC") is None


async def test_refresh_is_idempotent_for_same_data(
    records: dict[str, Any],
    price_cache_repo: InMemoryPriceCacheRepository,
) -> None:
    source = _source(_client(records), price_cache_repo)

    await source.refresh()
    first = await source.list_pairs()
    await source.refresh()
    second = await source.list_pairs()

    assert first == second


async def test_stale_price_is_hidden_but_liquidity_is_not(
    price_cache_repo: InMemoryPriceCacheRepository,
) -> None:
    old = datetime.now(UTC) - timedelta(seconds=120)
    await price_cache_repo.replace_snapshot(
        "dex_screener",
        [],
        {
            CacheKey.price("WETH", "USDC"): CachedPrice(Decimal("1850"), old, "DEX Screener - netswap"),
            CacheKey.liquidity("WETH", "USDC"): CachedPrice(Decimal("500000"), old, "DEX Screener - netswap"),
        },
    )
    source = _source(_client({}), price_cache_repo)

    assert await source.get_price("WETH", "USDC") is None
    assert await source.get_liquidity("WETH", "USDC") == Decimal("500000")


async def test_list_pairs_fetches_once_when_cache_is_cold(
    records: dict[str, Any],
    price_cache_repo: InMemoryPriceCacheRepository,
) -> None:
    client = _client(records)
    source = _source(client, price_cache_repo)

    first = await source.list_pairs()
    second = await source.list_pairs()

    assert len(first) == 3
    assert first == second
    assert client.search_pairs.await_count == 2
    assert await source.get_price("METIS", "USDC") == Decimal("85")


async def test_list_pairs_returns_empty_when_warm_up_fails(
    price_cache_repo: InMemoryPriceCacheRepository,
) -> None:
    client = SimpleNamespace(search_pairs=AsyncMock(side_effect=RuntimeError("client unusable")))
    source = _source(client, price_cache_repo)

    assert await source.list_pairs() == []


async def test_failed_term_is_skipped(
    records: dict[str, Any],
    price_cache_repo: InMemoryPriceCacheRepository,
) -> None:
    records["netswap"] = DexScreenerAPIError("rate limited", status_code=429)
    source = _source(_client(records), price_cache_repo)

    await source.refresh()

    pairs = await source.list_pairs()
    assert [p.full_id() for p in pairs] == ["netswap:WETH/USDC", "netswap:METIS/USDC"]


async def test_all_terms_failing_gives_empty_snapshot(
    price_cache_repo: InMemoryPriceCacheRepository,
) -> None:
    error = DexScreenerAPIError("down", status_code=503)
    source = _source(_client({"metis": error, "netswap": error}), price_cache_repo)

    await source.refresh()

    assert await price_cache_repo.get_pairs("dex_screener") == []


async def test_refresh_failure_raises_and_keeps_previous_snapshot(
    records: dict[str, Any],
    price_cache_repo: InMemoryPriceCacheRepository,
) -> None:
    source = _source(_client(records), price_cache_repo)
    await source.refresh()
    before = await source.list_pairs()

    broken = _source(
        SimpleNamespace(search_pairs=AsyncMock(side_effect=RuntimeError("boom"))),
        price_cache_repo,
    )
    with pytest.raises(PriceFeedError) as exc_info:
        await broken.refresh()

    assert exc_info.value.source == "dex_screener"
    assert isinstance(exc_info.value.cause, RuntimeError)
    assert await source.list_pairs() == before


async def test_concurrent_terms_preserve_discovery_order(
    records: dict[str, Any],
    price_cache_repo: InMemoryPriceCacheRepository,
) -> None:
    source = _source(_client(records), price_cache_repo, _settings(concurrent=True))

    await source.refresh()

    pairs = await source.list_pairs()
    assert [p.full_id() for p in pairs] == [
        "netswap:WETH/USDC",
        "netswap:METIS/USDC",
        "tethys:WETH/USDC",
    ]


async def test_malformed_record_is_skipped_and_good_records_kept(
    dex_record_factory: Callable[..., Any],
    price_cache_repo: InMemoryPriceCacheRepository,
) -> None:
    good = dex_record_factory(dex_id="netswap", price_usd="1850")
    responses = {
        "metis": [
            good,
            dex_record_factory(dex_id=["netswap"], pair_address="0xbad0000000000000000000000000000000000001"),
            dex_record_factory(chain_id={"id": "metis"}, pair_address="0xbad0000000000000000000000000000000000002"),
        ],
    }
    source = _source(_client(responses), price_cache_repo)

    await source.refresh()

    pairs = await source.list_pairs()
    assert [p.full_id() for p in pairs] == ["netswap:WETH/USDC"]


async def test_session_failure_is_reported_as_price_feed_error(
    price_cache_repo: InMemoryPriceCacheRepository,
) -> None:
    error = aiohttp.ClientConnectionError("connector closed")
    source = _source(SimpleNamespace(search_pairs=AsyncMock(side_effect=error)), price_cache_repo)

    with pytest.raises(PriceFeedError) as exc_info:
        await source.refresh()

    assert exc_info.value.cause is error
    assert await price_cache_repo.get_pairs("dex_screener") is None


async def test_programming_errors_are_not_disguised_as_feed_errors(
    price_cache_repo: InMemoryPriceCacheRepository,
) -> None:
    source = _source(SimpleNamespace(search_pairs=AsyncMock(side_effect=KeyError("pairs"))), price_cache_repo)

    with pytest.raises(KeyError):
        await source.refresh()
