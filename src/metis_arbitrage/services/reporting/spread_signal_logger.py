# -*- coding: utf-8 -*-
"""SpreadSignalLogger: listens to SpreadDetectedEvent and writes one log line per signal."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Optional

import structlog

from metis_arbitrage.events.scan.scan_events import SpreadDetectedEvent

if TYPE_CHECKING:
    from bubus import EventBus  # type: ignore[import-untyped]


class SpreadSignalLogger:
    """Subscribes to SpreadDetectedEvent and logs buy-low / sell-high details."""

    def __init__(
        self,
        event_bus: Any,
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        self._event_bus: "EventBus" = event_bus
        self._logger = get_logger(logger_name or self.__class__.__name__)

    def start(self) -> None:
        """Subscribe to SpreadDetectedEvent."""
        self._event_bus.on(SpreadDetectedEvent, self._on_spread_detected)
        self._logger.debug("spread_signal_logger_started")

    def stop(self) -> None:
        """Unsubscribe from SpreadDetectedEvent."""
        key = SpreadDetectedEvent.__name__
        handlers = getattr(self._event_bus, "handlers", {})
        if key in handlers:
            handlers[key] = [h for h in handlers[key] if h != self._on_spread_detected]
        self._logger.debug("spread_signal_logger_stopped")

    def _on_spread_detected(self, event: SpreadDetectedEvent) -> None:
        self._logger.info(
            "spread_detected",
            scan_number=event.scan_number,
            pair_id=event.pair_id,
            spread_pct=f"{event.spread_pct:.2f}",
            buy_exchange=event.low_exchange,
            buy_price=f"{event.low_price:.4f}",
            sell_exchange=event.high_exchange,
            sell_price=f"{event.high_price:.4f}",
        )
