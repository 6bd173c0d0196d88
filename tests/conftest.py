# -*- coding: utf-8 -*-
"""Shared pytest fixtures for unit tests."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any

import pytest

from metis_arbitrage.clients.dex_screener.schema import PairSchema
from metis_arbitrage.config import Settings
from metis_arbitrage.models.token import Exchange, Token
from metis_arbitrage.models.trading_pair import TradingPair
from metis_arbitrage.persistence.repositories.in_memory.price_cache_repository import (
    InMemoryPriceCacheRepository,
)


@pytest.fixture
def now_utc() -> datetime:
    """Stable UTC timestamp for deterministic assertions."""
    return datetime(2026, 2, 13, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def D() -> Callable[[Any], Decimal]:
    """Decimal helper: D('1.23') -> Decimal('1.23')."""
    return lambda value: Decimal(str(value))


@pytest.fixture
def settings() -> Settings:
    """Default settings (no env overrides)."""
    return Settings()


@pytest.fixture
def usdc() -> Token:
    return Token("USDC", "USD Coin", 6, "0xEA32A96608495e54156Ae48931A7c20f0dcc1a21")


@pytest.fixture
def netswap() -> Exchange:
    return Exchange("netswap", "Metis", "0x1E876cCe41B7b844FDe09E38Fa1cf00f213bFf56")


@pytest.fixture
def tethys() -> Exchange:
    return Exchange("tethys", "Metis", "0x81b9FA50D5f5155Ee17817C21702C3AE4780AD09")


@pytest.fixture
def pair_factory(
    usdc: Token,
    netswap: Exchange,
    D: Callable[[Any], Decimal],
) -> Callable[..., TradingPair]:
    """Build TradingPair with sensible defaults and easy overrides (base symbol, exchange, price...)."""

    def _build(**overrides: Any) -> TradingPair:
        base_symbol = overrides.pop("base", "WETH")
        base_token = overrides.pop(
            "base_token",
            Token(base_symbol, f"{base_symbol} Token", 18, f"0x{base_symbol.lower():0>40}"),
        )
        return TradingPair(
            base_token=base_token,
            quote_token=overrides.pop("quote_token", usdc),
            exchange=overrides.pop("exchange", netswap),
            price=D(overrides.pop("price", "1850")),
            liquidity=D(overrides.pop("liquidity", "500000")),
            reserve_base=D(overrides.pop("reserve_base", "270")),
            reserve_quote=D(overrides.pop("reserve_quote", "500000")),
        )

    return _build


@pytest.fixture
def dex_record_factory() -> Callable[..., PairSchema]:
    """Build a raw DEX Screener pair record (camelCase, as returned by /search)."""

    def _build(**overrides: Any) -> PairSchema:
        base = overrides.pop("base", "WETH")
        quote = overrides.pop("quote", "USDC")
        record: dict[str, Any] = {
            "chainId": overrides.pop("chain_id", "metis"),
            "dexId": overrides.pop("dex_id", "netswap"),
            "pairAddress": overrides.pop("pair_address", "0x5ab390084812E145b619ECAA8671d39174a1a6d1"),
            "baseToken": {
                "address": overrides.pop("base_address", f"0x{base.lower():0>40}"),
                "name": f"{base} Token",
                "symbol": base,
            },
            "quoteToken": {
                "address": overrides.pop("quote_address", f"0x{quote.lower():0>40}"),
                "name": f"{quote} Token",
                "symbol": quote,
            },
            "priceNative": overrides.pop("price_native", "0.0001"),
            "priceUsd": overrides.pop("price_usd", "1850.5"),
            "liquidity": overrides.pop(
                "liquidity",
                {"usd": 500000.25, "base": 270.5, "quote": 250000.0},
            ),
        }
        for key in [k for k, v in record.items() if v is None]:
            del record[key]
        return record  # type: ignore[return-value]

    return _build


@pytest.fixture
def price_cache_repo() -> InMemoryPriceCacheRepository:
    """Fresh in-memory price cache per test."""
    return InMemoryPriceCacheRepository()
