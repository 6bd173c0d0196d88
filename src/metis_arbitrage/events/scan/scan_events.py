"""Scan loop events (emitted by ScanRunner)."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from bubus import BaseEvent  # type: ignore[import-untyped]

from metis_arbitrage.models.spread_signal import SpreadSignal


class SpreadDetectedEvent(BaseEvent[None]):
    """Emitted once per spread signal found in a scan.

    Handled by SpreadSignalLogger.
    """

    scan_number: int
    pair_id: str
    spread_pct: Decimal
    low_exchange: str
    low_price: Decimal
    high_exchange: str
    high_price: Decimal
    detected_at: datetime

    @classmethod
    def from_signal(cls, signal: SpreadSignal, *, scan_number: int) -> SpreadDetectedEvent:
        return cls(
            scan_number=scan_number,
            pair_id=signal.pair_id,
            spread_pct=signal.spread_pct,
            low_exchange=signal.low_exchange,
            low_price=signal.low_price,
            high_exchange=signal.high_exchange,
            high_price=signal.high_price,
            detected_at=signal.detected_at,
        )


class ScanCompletedEvent(BaseEvent[None]):
    """Emitted after every scan, successful or not."""

    scan_number: int
    success: bool
    pairs_count: int = 0
    signals_count: int = 0
    error_message: str | None = None
