# -*- coding: utf-8 -*-
"""DEX Screener API client and response schema."""

from metis_arbitrage.clients.dex_screener.dex_screener import DexScreenerClient
from metis_arbitrage.clients.dex_screener.schema import (
    LiquiditySchema,
    PairSchema,
    SearchResponseSchema,
    TokenSchema,
)

__all__ = [
    "DexScreenerClient",
    "LiquiditySchema",
    "PairSchema",
    "SearchResponseSchema",
    "TokenSchema",
]
