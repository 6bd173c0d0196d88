# -*- coding: utf-8 -*-
"""Spread detection (pair snapshot -> spread signals)."""

from metis_arbitrage.services.divergence.divergence_scanner import (
    DEFAULT_SPREAD_THRESHOLD_PCT,
    DivergenceScanner,
    group_by_pair_id,
)

__all__ = ["DEFAULT_SPREAD_THRESHOLD_PCT", "DivergenceScanner", "group_by_pair_id"]
