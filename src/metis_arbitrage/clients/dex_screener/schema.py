"""DEX Screener response types. Keys match the API response (camelCase)."""

from __future__ import annotations

from typing import TypedDict


class TokenSchema(TypedDict, total=False):
    """baseToken / quoteToken descriptor."""

    address: str
    name: str
    symbol: str


class LiquiditySchema(TypedDict, total=False):
    """Pool liquidity: USD value and token units on each side."""

    usd: float
    base: float
    quote: float


class PairSchema(TypedDict, total=False):
    """GET /search item (one pair listing on one DEX)."""

    chainId: str
    dexId: str
    url: str
    pairAddress: str
    baseToken: TokenSchema
    quoteToken: TokenSchema
    priceNative: str
    priceUsd: str
    liquidity: LiquiditySchema
    fdv: float
    pairCreatedAt: int


class SearchResponseSchema(TypedDict, total=False):
    """GET /search?q=... body."""

    schemaVersion: str
    pairs: list[PairSchema] | None
