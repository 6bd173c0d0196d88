"""In-memory repository implementations."""

from metis_arbitrage.persistence.repositories.in_memory.price_cache_repository import (
    InMemoryPriceCacheRepository,
)

__all__ = ["InMemoryPriceCacheRepository"]
