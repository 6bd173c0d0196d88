"""Exceptions subpackage."""

from metis_arbitrage.exceptions.exceptions import (
    ArbitrageError,
    DexScreenerAPIError,
    DexScreenerDecodeError,
    MissingRequiredConfigError,
    PriceFeedError,
)

__all__ = [
    "ArbitrageError",
    "DexScreenerAPIError",
    "DexScreenerDecodeError",
    "MissingRequiredConfigError",
    "PriceFeedError",
]
