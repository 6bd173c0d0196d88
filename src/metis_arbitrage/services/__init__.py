# -*- coding: utf-8 -*-
"""Application services."""

from metis_arbitrage.services.divergence import DivergenceScanner
from metis_arbitrage.services.reporting import SpreadSignalLogger, log_pairs_summary
from metis_arbitrage.services.scan_runner import ScanResult, ScanRunner

__all__ = [
    "DivergenceScanner",
    "ScanResult",
    "ScanRunner",
    "SpreadSignalLogger",
    "log_pairs_summary",
]
