# -*- coding: utf-8 -*-
"""Periodic scan driver."""

from metis_arbitrage.services.scan_runner.scan_runner import ScanResult, ScanRunner

__all__ = ["ScanResult", "ScanRunner"]
