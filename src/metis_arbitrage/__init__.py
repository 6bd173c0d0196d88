"""Metis arbitrage scanner: DEX Screener price feed, price cache and cross-exchange spread detection."""

__version__ = "0.1.0"

from metis_arbitrage.clients import AsyncHttpClient, DexScreenerClient  # noqa: E402
from metis_arbitrage.config import get_settings  # noqa: E402
from metis_arbitrage.price_sources import (  # noqa: E402
    DexScreenerPriceSource,
    FixturePriceSource,
    IPriceSource,
)
from metis_arbitrage.services import DivergenceScanner, ScanRunner  # noqa: E402

__all__ = [
    "AsyncHttpClient",
    "DexScreenerClient",
    "DexScreenerPriceSource",
    "DivergenceScanner",
    "FixturePriceSource",
    "IPriceSource",
    "ScanRunner",
    "__version__",
    "get_settings",
]
