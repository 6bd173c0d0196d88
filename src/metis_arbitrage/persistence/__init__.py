"""Persistence layer (repositories, etc.)."""

from metis_arbitrage.persistence.repositories import (
    InMemoryPriceCacheRepository,
    IPriceCacheRepository,
)

__all__ = [
    "IPriceCacheRepository",
    "InMemoryPriceCacheRepository",
]
