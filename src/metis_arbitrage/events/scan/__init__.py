# -*- coding: utf-8 -*-
"""Scan loop events."""

from metis_arbitrage.events.scan.scan_events import ScanCompletedEvent, SpreadDetectedEvent

__all__ = ["ScanCompletedEvent", "SpreadDetectedEvent"]
