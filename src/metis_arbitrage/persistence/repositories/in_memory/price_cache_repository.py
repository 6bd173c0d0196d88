# -*- coding: utf-8 -*-
"""In-memory price cache (keyed by CacheKey; pair snapshots keyed by source name)."""

from __future__ import annotations

import asyncio
from collections.abc import Mapping
from types import MappingProxyType

from metis_arbitrage.models.cached_price import CachedPrice, CacheKey
from metis_arbitrage.models.trading_pair import TradingPair
from metis_arbitrage.persistence.repositories.interfaces.price_cache_repository import (
    IPriceCacheRepository,
)


class InMemoryPriceCacheRepository(IPriceCacheRepository):
    """In-memory implementation of IPriceCacheRepository.

    Copy-on-write: a writer builds complete new maps and swaps the references
    in one synchronous step while holding the write lock. Readers never await
    while reading, so any number of them run concurrently and each sees either
    the old or the new snapshot, never a mix.
    """

    def __init__(self) -> None:
        """Initialize an empty store."""
        self._entries: Mapping[CacheKey, CachedPrice] = MappingProxyType({})
        self._pairs: Mapping[str, tuple[TradingPair, ...]] = MappingProxyType({})
        self._write_lock = asyncio.Lock()

    async def get(self, key: CacheKey) -> CachedPrice | None:
        """Return the entry for key, or None if it was never written."""
        return self._entries.get(key)

    async def get_pairs(self, source: str) -> list[TradingPair] | None:
        """Return a copy of the last pair list stored for source, or None."""
        pairs = self._pairs.get(source)
        if pairs is None:
            return None
        return list(pairs)

    async def replace_snapshot(
        self,
        source: str,
        pairs: list[TradingPair],
        entries: Mapping[CacheKey, CachedPrice],
    ) -> None:
        """Replace source's pair list and upsert entries in one swap."""
        async with self._write_lock:
            new_entries = dict(self._entries)
            new_entries.update(entries)
            new_pairs = dict(self._pairs)
            new_pairs[source] = tuple(pairs)
            self._entries = MappingProxyType(new_entries)
            self._pairs = MappingProxyType(new_pairs)

    async def entry_count(self) -> int:
        """Return the number of cached entries."""
        return len(self._entries)
