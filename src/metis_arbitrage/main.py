# -*- coding: utf-8 -*-
"""
Entry point for the Metis spread scanner.

Orchestrates: logging, settings, container, initial fetch + pairs summary, scan loop,
shutdown (SIGINT or CancelledError).
Flow per scan: price source refresh -> snapshot -> DivergenceScanner -> SpreadDetectedEvent -> log.

Run with: python -m metis_arbitrage.main

Notebook usage:
    from metis_arbitrage.main import run
    await run()  # Interrupt kernel to stop; system will shut down on CancelledError.
"""
from __future__ import annotations

import asyncio
import signal
import structlog
from typing import Any

from metis_arbitrage import __version__
from metis_arbitrage.DI import Container
from metis_arbitrage.config import get_settings
from metis_arbitrage.exceptions import MissingRequiredConfigError
from metis_arbitrage.logging.config import configure_logging


def _setup_sigint(shutdown_event: asyncio.Event) -> None:
    try:
        loop = asyncio.get_running_loop()
        loop.add_signal_handler(
            signal.SIGINT,
            lambda: shutdown_event.set(),
        )
    except NotImplementedError:
        pass  # Windows has no add_signal_handler


async def _do_shutdown(logger: Any, container: Container) -> None:
    """Clean shutdown. Safe to call on normal shutdown or CancelledError."""
    container.spread_signal_logger().stop()
    await container.http_client().aclose()
    logger.info("main_shutdown_complete")


async def run() -> None:
    configure_logging()
    logger = structlog.get_logger("main")
    settings = get_settings()
    feed = settings.feed
    if not feed.search_terms:
        logger.error("main_missing_search_terms", message="FEED__SEARCH_TERMS is empty")
        raise MissingRequiredConfigError("FEED__SEARCH_TERMS")
    if not feed.allowed_dexes:
        logger.error("main_missing_allowed_dexes", message="FEED__ALLOWED_DEXES is empty")
        raise MissingRequiredConfigError("FEED__ALLOWED_DEXES")

    logger.info(
        "main_started",
        version=__version__,
        dex_screener_url=settings.api.dex_screener_url,
        chain_id=feed.chain_id,
        allowed_dexes=feed.allowed_dexes,
        search_terms=feed.search_terms,
    )

    container = Container()
    container.spread_signal_logger().start()
    runner = container.scan_runner()
    shutdown_event = asyncio.Event()
    _setup_sigint(shutdown_event)

    try:
        await runner.warm_up()
        await runner.run(shutdown_event)
    finally:
        await _do_shutdown(logger, container)
        logger.info("main_stopped", scans_completed=runner.scan_count)


def main() -> None:
    asyncio.run(run())


__all__ = ["run", "main"]

if __name__ == "__main__":
    main()
