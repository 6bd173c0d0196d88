# -*- coding: utf-8 -*-
"""Event bus and event types."""

from metis_arbitrage.events.bus import create_event_bus, get_event_bus, set_event_bus
from metis_arbitrage.events.scan import ScanCompletedEvent, SpreadDetectedEvent

__all__ = ["create_event_bus", "get_event_bus", "set_event_bus", "ScanCompletedEvent", "SpreadDetectedEvent"]
