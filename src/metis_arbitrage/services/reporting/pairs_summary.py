"""Startup summary of available pairs, written as structured log events."""

from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal
from typing import Any

from metis_arbitrage.models.trading_pair import TradingPair


def log_pairs_summary(
    logger: Any,
    pairs: Sequence[TradingPair],
    *,
    min_liquidity_usd: Decimal,
    max_pairs: int,
) -> int:
    """Log up to max_pairs pairs with liquidity >= min_liquidity_usd, then a totals line.

    Returns:
        Number of pairs listed.
    """
    if not pairs:
        logger.warning("pairs_empty")
        return 0

    shown = 0
    for pair in pairs:
        if pair.liquidity < min_liquidity_usd:
            continue
        if shown >= max_pairs:
            break
        logger.info(
            "pairs_summary_entry",
            pair_id=pair.pair_id(),
            exchange=pair.exchange.name,
            price_usd=f"{pair.price:.4f}",
            liquidity_usd=f"{pair.liquidity:.2f}",
        )
        shown += 1

    logger.info(
        "pairs_summary",
        pairs_total=len(pairs),
        pairs_shown=shown,
        min_liquidity_usd=str(min_liquidity_usd),
    )
    return shown
