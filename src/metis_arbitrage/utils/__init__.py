# -*- coding: utf-8 -*-
"""Utility modules."""

from metis_arbitrage.utils.dedupe import dedupe_pairs
from metis_arbitrage.utils.parsing import to_decimal
from metis_arbitrage.utils.validation import mask_address

__all__ = ["dedupe_pairs", "mask_address", "to_decimal"]
