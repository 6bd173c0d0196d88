"""Event bus (bubus) shared by the scan loop and its listeners."""

from __future__ import annotations

from bubus import EventBus  # type: ignore[import-untyped]

BUS_NAME = "MetisArbitrage"
# One ScanCompletedEvent per scan plus one SpreadDetectedEvent per signal.
DEFAULT_MAX_HISTORY_SIZE = 100

_event_bus: EventBus | None = None


def create_event_bus(*, max_history_size: int = DEFAULT_MAX_HISTORY_SIZE) -> EventBus:
    """Build an in-process bus with bounded history and no write-ahead log."""
    return EventBus(name=BUS_NAME, max_history_size=max_history_size, wal_path=None)


def get_event_bus() -> EventBus:
    """Return the process-wide bus, creating it on first use."""
    global _event_bus
    if _event_bus is None:
        _event_bus = create_event_bus()
    return _event_bus


def set_event_bus(bus: EventBus | None) -> None:
    """Install bus as the process-wide instance. None drops it so the next get creates a fresh one."""
    global _event_bus
    _event_bus = bus
