"""HTTP and API clients."""

from metis_arbitrage.clients.dex_screener import DexScreenerClient
from metis_arbitrage.clients.http import AsyncHttpClient

__all__ = [
    "AsyncHttpClient",
    "DexScreenerClient",
]
