# -*- coding: utf-8 -*-
"""Cross-exchange spread detection over a pair snapshot."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from datetime import UTC, datetime
from decimal import Decimal
from typing import Any

import structlog

from metis_arbitrage.models.spread_signal import SpreadSignal
from metis_arbitrage.models.trading_pair import TradingPair

DEFAULT_SPREAD_THRESHOLD_PCT = Decimal("0.5")


def group_by_pair_id(pairs: Iterable[TradingPair]) -> dict[str, list[TradingPair]]:
    """Group listings by pair_id() (symbol based), preserving first-seen order."""
    groups: dict[str, list[TradingPair]] = {}
    for pair in pairs:
        groups.setdefault(pair.pair_id(), []).append(pair)
    return groups


class DivergenceScanner:
    """Flags pair identities whose cheapest and dearest listings differ by more than a threshold.

    Pure computation over the snapshot it is given: no I/O, no sizing, no gas.
    """

    def __init__(
        self,
        *,
        threshold_pct: Decimal = DEFAULT_SPREAD_THRESHOLD_PCT,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: str | None = None,
    ) -> None:
        """Initialize the scanner.

        Args:
            threshold_pct: Spreads strictly above this percentage produce a signal.
            get_logger: Logger factory (injected).
            logger_name: Optional logger name (defaults to class name).
        """
        self._threshold_pct = Decimal(threshold_pct)
        self._logger = get_logger(logger_name or self.__class__.__name__)

    @property
    def threshold_pct(self) -> Decimal:
        return self._threshold_pct

    def scan(
        self,
        pairs: Iterable[TradingPair],
        *,
        now: datetime | None = None,
    ) -> list[SpreadSignal]:
        """Return one SpreadSignal per pair identity listed at least twice with spread > threshold.

        Args:
            pairs: Snapshot to scan.
            now: Detection time stamped on signals (defaults to current UTC time).

        Returns:
            Signals in first-seen order of their pair identity.
        """
        detected_at = now or datetime.now(UTC)
        signals: list[SpreadSignal] = []
        groups = group_by_pair_id(pairs)
        multi_listed = 0

        for pair_id, listings in groups.items():
            if len(listings) < 2:
                continue
            multi_listed += 1
            low = min(listings, key=lambda p: p.price)
            high = max(listings, key=lambda p: p.price)
            if low.price <= 0:
                continue
            signal = SpreadSignal.create(
                pair_id,
                low_exchange=low.exchange.name,
                low_price=low.price,
                high_exchange=high.exchange.name,
                high_price=high.price,
                detected_at=detected_at,
            )
            if signal.spread_pct > self._threshold_pct:
                signals.append(signal)

        self._logger.debug(
            "divergence_scan_completed",
            pair_groups=len(groups),
            multi_listed_groups=multi_listed,
            signals_count=len(signals),
            threshold_pct=str(self._threshold_pct),
        )
        return signals
