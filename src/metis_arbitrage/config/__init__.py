"""Configuration subpackage."""

from metis_arbitrage.config.config import (
    ApiSettings,
    AppSettings,
    FeedSettings,
    LoggingSettings,
    ScannerSettings,
    Settings,
    get_settings,
)

__all__ = [
    "ApiSettings",
    "AppSettings",
    "FeedSettings",
    "LoggingSettings",
    "ScannerSettings",
    "Settings",
    "get_settings",
]
