# -*- coding: utf-8 -*-
"""Cache entries: composite key and time-stamped value with staleness check."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from decimal import Decimal
from enum import Enum


class MetricKind(str, Enum):
    """Which metric of a pair a cache entry holds."""

    PRICE = "PRICE"
    LIQUIDITY = "LIQUIDITY"


@dataclass(frozen=True, slots=True)
class CacheKey:
    """Composite cache key: pair identity (BASE/QUOTE) plus metric kind."""

    pair_id: str
    kind: MetricKind

    @classmethod
    def price(cls, base: str, quote: str) -> CacheKey:
        return cls(pair_id=f"{base}/{quote}", kind=MetricKind.PRICE)

    @classmethod
    def liquidity(cls, base: str, quote: str) -> CacheKey:
        return cls(pair_id=f"{base}/{quote}", kind=MetricKind.LIQUIDITY)

    def legacy(self) -> str:
        """Flat string form used in logs: WETH/USDC or WETH/USDC-liq."""
        if self.kind is MetricKind.LIQUIDITY:
            return f"{self.pair_id}-liq"
        return self.pair_id


@dataclass(frozen=True, slots=True)
class CachedPrice:
    """Last known value for a cache key, with capture time and source label."""

    value: Decimal
    timestamp: datetime
    """Capture time (UTC). All entries written by one refresh share the same timestamp."""
    source: str
    """Human-readable origin, e.g. 'DEX Screener - netswap'."""

    def age_seconds(self, now: datetime | None = None) -> float:
        now = now or datetime.now(UTC)
        return (now - self.timestamp).total_seconds()

    def is_stale(self, max_age_seconds: float, now: datetime | None = None) -> bool:
        """Return True if the entry is older than max_age_seconds. Exactly max age is still fresh."""
        return self.age_seconds(now) > max_age_seconds
