# -*- coding: utf-8 -*-
"""Repositories: interfaces (abstractions) and implementations (in_memory, etc.)."""

from metis_arbitrage.persistence.repositories.interfaces import IPriceCacheRepository
from metis_arbitrage.persistence.repositories.in_memory import InMemoryPriceCacheRepository

__all__ = [
    "IPriceCacheRepository",
    "InMemoryPriceCacheRepository",
]
