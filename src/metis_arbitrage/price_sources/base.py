"""Abstract interface for price sources (network-backed, fixture, ...)."""

from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal

from metis_arbitrage.models.trading_pair import TradingPair


class IPriceSource(ABC):
    """Capability contract every market-data provider implements."""

    name: str
    """Stable source name; also the key of this source's pair snapshot in the cache."""

    @abstractmethod
    async def list_pairs(self) -> list[TradingPair]:
        """Return the latest pair snapshot (a copy).

        Fetches once when no snapshot exists yet; otherwise never fetches.
        Call refresh() to force an update.
        """
        ...

    @abstractmethod
    async def get_price(self, base: str, quote: str) -> Decimal | None:
        """Return the cached price of base/quote, or None when absent or stale."""
        ...

    @abstractmethod
    async def get_liquidity(self, base: str, quote: str) -> Decimal | None:
        """Return the cached USD liquidity of base/quote, or None when absent."""
        ...

    @abstractmethod
    async def refresh(self) -> None:
        """Fetch and replace the whole snapshot.

        Raises:
            PriceFeedError: The fetch mechanism itself could not run. The
                previous snapshot is left untouched.
        """
        ...
