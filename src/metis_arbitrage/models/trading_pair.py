# -*- coding: utf-8 -*-
"""TradingPair: a base/quote token combination listed on one exchange.

A refresh produces a brand-new list of pairs that replaces the previous
snapshot wholesale; pairs are never updated in place.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from metis_arbitrage.models.token import Exchange, Token


@dataclass(frozen=True, slots=True)
class TradingPair:
    """One listing of base/quote on a specific exchange with its price and liquidity.

    Identity:
        pair_id()  -> "WETH/USDC" (instrument, exchange independent)
        full_id()  -> "netswap:WETH/USDC" (listing, used for deduplication)
    """

    base_token: Token
    quote_token: Token
    exchange: Exchange
    price: Decimal
    """Price of base in USD (or in native units when USD is unavailable). Always > 0."""
    liquidity: Decimal
    """Pool liquidity in USD. At least the configured floor for ingested pairs."""
    reserve_base: Decimal
    reserve_quote: Decimal

    def pair_id(self) -> str:
        """Return the instrument identifier, e.g. WETH/USDC."""
        return f"{self.base_token.symbol}/{self.quote_token.symbol}"

    def full_id(self) -> str:
        """Return the listing identifier including exchange, e.g. netswap:WETH/USDC."""
        return f"{self.exchange.name}:{self.base_token.symbol}/{self.quote_token.symbol}"

    def __str__(self) -> str:
        return (
            f"{self.base_token.symbol}/{self.quote_token.symbol} "
            f"on {self.exchange.name} @ {self.price}"
        )
