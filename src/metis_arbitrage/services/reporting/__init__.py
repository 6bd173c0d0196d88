# -*- coding: utf-8 -*-
"""Log-based reporting of pairs and spread signals."""

from metis_arbitrage.services.reporting.pairs_summary import log_pairs_summary
from metis_arbitrage.services.reporting.spread_signal_logger import SpreadSignalLogger

__all__ = ["SpreadSignalLogger", "log_pairs_summary"]
