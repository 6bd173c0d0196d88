# -*- coding: utf-8 -*-
"""Scan loop: refresh -> list pairs -> detect spreads -> publish, once per interval."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import structlog
from structlog.contextvars import bound_contextvars

from metis_arbitrage.events.scan.scan_events import ScanCompletedEvent, SpreadDetectedEvent
from metis_arbitrage.exceptions import PriceFeedError
from metis_arbitrage.models.spread_signal import SpreadSignal
from metis_arbitrage.models.trading_pair import TradingPair
from metis_arbitrage.services.reporting.pairs_summary import log_pairs_summary

if TYPE_CHECKING:
    from bubus import EventBus  # type: ignore[import-untyped]

    from metis_arbitrage.config import Settings
    from metis_arbitrage.price_sources.base import IPriceSource
    from metis_arbitrage.services.divergence.divergence_scanner import DivergenceScanner


@dataclass(frozen=True)
class ScanResult:
    """Outcome of one scan."""

    scan_number: int
    success: bool
    pairs: list[TradingPair] = field(default_factory=list)
    signals: list[SpreadSignal] = field(default_factory=list)
    error: str | None = None


class ScanRunner:
    """Drives one price source and the divergence scanner sequentially; scans never overlap."""

    def __init__(
        self,
        price_source: IPriceSource,
        scanner: DivergenceScanner,
        settings: Settings,
        event_bus: Any,
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: str | None = None,
    ) -> None:
        """Initialize the runner.

        Args:
            price_source: Price source to refresh and read (injected).
            scanner: Divergence scanner (injected).
            settings: Application settings (uses settings.scanner).
            event_bus: Bus receiving SpreadDetectedEvent / ScanCompletedEvent.
            get_logger: Logger factory (injected).
            logger_name: Optional logger name (defaults to class name).
        """
        self._price_source = price_source
        self._scanner = scanner
        self._settings = settings
        self._event_bus: "EventBus" = event_bus
        self._logger = get_logger(logger_name or self.__class__.__name__)
        self._scan_count = 0

    @property
    def scan_count(self) -> int:
        return self._scan_count

    async def warm_up(self) -> list[TradingPair]:
        """Initial refresh plus a pairs summary. A failed refresh is logged; the loop retries later."""
        self._logger.info("initial_fetch_started", price_source=self._price_source.name)
        try:
            await self._price_source.refresh()
            self._logger.info("initial_fetch_succeeded")
        except PriceFeedError as e:
            self._logger.error(
                "initial_fetch_failed",
                error_type=type(e).__name__,
                error_message=str(e),
                message="Will retry in the scan loop",
            )

        pairs = await self._price_source.list_pairs()
        sc = self._settings.scanner
        log_pairs_summary(
            self._logger,
            pairs,
            min_liquidity_usd=sc.report_min_liquidity_usd,
            max_pairs=sc.report_max_pairs,
        )
        return pairs

    async def scan_once(self) -> ScanResult:
        """Run one scan. Never raises PriceFeedError; a failed refresh yields success=False."""
        self._scan_count += 1
        scan_number = self._scan_count
        with bound_contextvars(scan_number=scan_number):
            self._logger.info("scan_started")
            try:
                await self._price_source.refresh()
            except PriceFeedError as e:
                self._logger.error(
                    "scan_failed",
                    error_type=type(e).__name__,
                    error_message=str(e),
                )
                self._event_bus.dispatch(
                    ScanCompletedEvent(scan_number=scan_number, success=False, error_message=str(e))
                )
                self._log_stats(scan_number)
                return ScanResult(scan_number=scan_number, success=False, error=str(e))

            pairs = await self._price_source.list_pairs()
            self._logger.info("scan_completed", pairs_count=len(pairs))

            signals = self._scanner.scan(pairs)
            for signal in signals:
                self._event_bus.dispatch(
                    SpreadDetectedEvent.from_signal(signal, scan_number=scan_number)
                )
            if signals:
                self._logger.info("spreads_detected", signals_count=len(signals))
            else:
                self._logger.debug("scan_no_spreads")

            self._event_bus.dispatch(
                ScanCompletedEvent(
                    scan_number=scan_number,
                    success=True,
                    pairs_count=len(pairs),
                    signals_count=len(signals),
                )
            )
            self._log_stats(scan_number)
            return ScanResult(
                scan_number=scan_number,
                success=True,
                pairs=pairs,
                signals=signals,
            )

    def _log_stats(self, scan_number: int) -> None:
        if scan_number % self._settings.scanner.stats_every_scans == 0:
            self._logger.info("scan_stats", scans_completed=scan_number)

    async def run(self, shutdown_event: asyncio.Event) -> None:
        """Scan immediately, then every scan_interval_seconds until shutdown_event is set.

        Args:
            shutdown_event: When set, the loop exits after the current scan.
        """
        interval = self._settings.scanner.scan_interval_seconds
        self._logger.info("scan_loop_started", scan_interval_seconds=interval)
        while not shutdown_event.is_set():
            await self.scan_once()
            try:
                await asyncio.wait_for(shutdown_event.wait(), timeout=interval)
            except asyncio.TimeoutError:
                continue
        self._logger.info("scan_loop_stopped", scans_completed=self._scan_count)
