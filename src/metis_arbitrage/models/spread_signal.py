"""SpreadSignal: one cross-exchange price divergence found by the scanner."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from decimal import Decimal


@dataclass(frozen=True, slots=True)
class SpreadSignal:
    """Cheapest and most expensive listing of the same pair identity, with the spread between them.

    No sizing, gas or net profit: detection only.
    """

    pair_id: str
    spread_pct: Decimal
    """(high_price - low_price) / low_price * 100."""
    low_exchange: str
    low_price: Decimal
    high_exchange: str
    high_price: Decimal
    detected_at: datetime

    @classmethod
    def create(
        cls,
        pair_id: str,
        *,
        low_exchange: str,
        low_price: Decimal,
        high_exchange: str,
        high_price: Decimal,
        detected_at: datetime | None = None,
    ) -> SpreadSignal:
        """Create a signal, computing spread_pct from the low and high prices."""
        if low_price <= 0:
            raise ValueError("low_price must be > 0")
        spread_pct = (high_price - low_price) / low_price * Decimal("100")
        return cls(
            pair_id=pair_id,
            spread_pct=spread_pct,
            low_exchange=low_exchange,
            low_price=low_price,
            high_exchange=high_exchange,
            high_price=high_price,
            detected_at=detected_at or datetime.now(UTC),
        )
