# -*- coding: utf-8 -*-
"""Dependency injection container (dependency-injector)."""

from __future__ import annotations

from dependency_injector import containers, providers

from metis_arbitrage.clients.dex_screener import DexScreenerClient
from metis_arbitrage.clients.http import AsyncHttpClient
from metis_arbitrage.config import Settings, get_settings
from metis_arbitrage.events.bus import get_event_bus
from metis_arbitrage.persistence.repositories.in_memory import InMemoryPriceCacheRepository
from metis_arbitrage.price_sources import DexScreenerPriceSource
from metis_arbitrage.services.divergence import DivergenceScanner
from metis_arbitrage.services.reporting import SpreadSignalLogger
from metis_arbitrage.services.scan_runner import ScanRunner


def _build_divergence_scanner(settings: Settings) -> DivergenceScanner:
    """Build the scanner with the threshold from settings."""
    return DivergenceScanner(threshold_pct=settings.scanner.spread_threshold_pct)


class Container(containers.DeclarativeContainer):
    """Application container. Wires settings, HTTP client, cache, price source, scanner, runner."""

    config = providers.Callable(get_settings)

    http_client = providers.Singleton(
        AsyncHttpClient,
        settings=config,
    )

    dex_screener_client = providers.Singleton(
        DexScreenerClient,
        http_client=http_client,
        settings=config,
    )

    price_cache_repository = providers.Singleton(InMemoryPriceCacheRepository)

    price_source = providers.Singleton(
        DexScreenerPriceSource,
        client=dex_screener_client,
        cache=price_cache_repository,
        settings=config,
    )

    divergence_scanner = providers.Singleton(_build_divergence_scanner, config)

    event_bus = providers.Callable(get_event_bus)

    spread_signal_logger = providers.Singleton(
        SpreadSignalLogger,
        event_bus=event_bus,
    )

    scan_runner = providers.Singleton(
        ScanRunner,
        price_source=price_source,
        scanner=divergence_scanner,
        settings=config,
        event_bus=event_bus,
    )
