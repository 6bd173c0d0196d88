"""Abstract interface for the price cache store (per-pair entries + per-source pair snapshots)."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping

from metis_arbitrage.models.cached_price import CachedPrice, CacheKey
from metis_arbitrage.models.trading_pair import TradingPair


class IPriceCacheRepository(ABC):
    """Interface for the process-wide price cache.

    Holds two things: last known value per CacheKey, and the last full pair
    list per price source. Writes replace a source's snapshot in one step.
    """

    @abstractmethod
    async def get(self, key: CacheKey) -> CachedPrice | None:
        """Return the entry for key, or None if it was never written."""
        ...

    @abstractmethod
    async def get_pairs(self, source: str) -> list[TradingPair] | None:
        """Return a copy of the last pair list stored for source, or None if none was stored."""
        ...

    @abstractmethod
    async def replace_snapshot(
        self,
        source: str,
        pairs: list[TradingPair],
        entries: Mapping[CacheKey, CachedPrice],
    ) -> None:
        """Replace source's pair list and upsert entries, atomically for readers.

        Entries not present in `entries` are kept (they age into staleness).
        """
        ...

    @abstractmethod
    async def entry_count(self) -> int:
        """Return the number of cached entries."""
        ...
