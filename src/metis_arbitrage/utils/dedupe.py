"""Deduplication of pair listings."""

from __future__ import annotations

from collections.abc import Iterable

from metis_arbitrage.models.trading_pair import TradingPair


def dedupe_pairs(pairs: Iterable[TradingPair]) -> list[TradingPair]:
    """Return pairs with duplicate full_id() removed, keeping the first seen, in input order."""
    seen: set[str] = set()
    result: list[TradingPair] = []
    for pair in pairs:
        key = pair.full_id()
        if key in seen:
            continue
        seen.add(key)
        result.append(pair)
    return result
