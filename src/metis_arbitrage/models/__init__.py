# -*- coding: utf-8 -*-
"""Domain models."""

from metis_arbitrage.models.arbitrage import (
    ArbitrageLeg,
    ArbitrageOpportunity,
    ArbitrageRoute,
)
from metis_arbitrage.models.cached_price import CachedPrice, CacheKey, MetricKind
from metis_arbitrage.models.spread_signal import SpreadSignal
from metis_arbitrage.models.token import Exchange, Token
from metis_arbitrage.models.trading_pair import TradingPair

__all__ = [
    "ArbitrageLeg",
    "ArbitrageOpportunity",
    "ArbitrageRoute",
    "CacheKey",
    "CachedPrice",
    "Exchange",
    "MetricKind",
    "SpreadSignal",
    "Token",
    "TradingPair",
]
