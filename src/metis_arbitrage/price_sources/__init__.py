# -*- coding: utf-8 -*-
"""Price sources: contract plus network-backed and fixture implementations."""

from metis_arbitrage.price_sources.base import IPriceSource
from metis_arbitrage.price_sources.dex_screener import (
    DexScreenerPriceSource,
    PairRejected,
    convert_pair,
)
from metis_arbitrage.price_sources.fixture import FixturePriceSource, default_fixture_pairs

__all__ = [
    "DexScreenerPriceSource",
    "FixturePriceSource",
    "IPriceSource",
    "PairRejected",
    "convert_pair",
    "default_fixture_pairs",
]
