# -*- coding: utf-8 -*-
"""Repository interfaces (abstractions). Implementations live in in_memory/."""

from metis_arbitrage.persistence.repositories.interfaces.price_cache_repository import (
    IPriceCacheRepository,
)

__all__ = ["IPriceCacheRepository"]
