"""Deterministic in-memory price source for tests and offline runs."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from decimal import Decimal
from typing import Any

import structlog

from metis_arbitrage.models.token import Exchange, Token
from metis_arbitrage.models.trading_pair import TradingPair
from metis_arbitrage.price_sources.base import IPriceSource


def default_fixture_pairs() -> list[TradingPair]:
    """WETH/USDC and METIS/USDC listed on both Netswap and Tethys."""
    weth = Token("WETH", "Wrapped Ether", 18, "0x420000000000000000000000000000000000000a")
    usdc = Token("USDC", "USD Coin", 6, "0xEA32A96608495e54156Ae48931A7c20f0dcc1a21")
    metis = Token("METIS", "Metis Token", 18, "0xDeadDeAddeAddEAddeadDEaDDEAdDeaDDeAD0000")

    netswap = Exchange("netswap", "Metis", "0x1E876cCe41B7b844FDe09E38Fa1cf00f213bFf56")
    tethys = Exchange("tethys", "Metis", "0x81b9FA50D5f5155Ee17817C21702C3AE4780AD09")

    def pair(base: Token, exchange: Exchange, price: int, liquidity: int, reserve_base: int) -> TradingPair:
        return TradingPair(
            base_token=base,
            quote_token=usdc,
            exchange=exchange,
            price=Decimal(price),
            liquidity=Decimal(liquidity),
            reserve_base=Decimal(reserve_base),
            reserve_quote=Decimal(liquidity),
        )

    return [
        pair(weth, netswap, 1850, 500000, 270),
        pair(weth, tethys, 1852, 350000, 189),
        pair(metis, netswap, 85, 200000, 2353),
        pair(metis, tethys, 84, 150000, 1786),
    ]


class FixturePriceSource(IPriceSource):
    """Serves a fixed list of pairs. Lookups return the first matching listing; refresh is a no-op."""

    name = "fixture"

    def __init__(
        self,
        pairs: Sequence[TradingPair] | None = None,
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: str | None = None,
    ) -> None:
        self._pairs = tuple(pairs) if pairs is not None else tuple(default_fixture_pairs())
        self._logger = get_logger(logger_name or self.__class__.__name__)

    def _find(self, base: str, quote: str) -> TradingPair | None:
        for p in self._pairs:
            if p.base_token.symbol == base and p.quote_token.symbol == quote:
                return p
        return None

    async def list_pairs(self) -> list[TradingPair]:
        return list(self._pairs)

    async def get_price(self, base: str, quote: str) -> Decimal | None:
        found = self._find(base, quote)
        return found.price if found is not None else None

    async def get_liquidity(self, base: str, quote: str) -> Decimal | None:
        found = self._find(base, quote)
        return found.liquidity if found is not None else None

    async def refresh(self) -> None:
        self._logger.debug("fixture_price_source_refresh", pairs_count=len(self._pairs))
