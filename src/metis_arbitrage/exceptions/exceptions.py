"""Custom exceptions for the DEX Screener client and price feeds."""

from __future__ import annotations


class ArbitrageError(Exception):
    """Base exception for arbitrage-scanner errors."""

    pass


class MissingRequiredConfigError(ArbitrageError):
    """Raised when a required configuration value is missing."""

    pass


class DexScreenerAPIError(ArbitrageError):
    """Raised when a single DEX Screener request fails (transport, timeout or non-2xx)."""

    def __init__(
        self,
        message: str,
        *,
        url: str | None = None,
        status_code: int | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code
        self.cause = cause


class DexScreenerDecodeError(DexScreenerAPIError):
    """Raised when a DEX Screener response is not JSON or has an unexpected shape."""

    pass


class PriceFeedError(ArbitrageError):
    """Raised when a price feed cannot run its fetch at all (client construction or invocation).

    Distinct from per-term network failures, which are logged and skipped.
    """

    def __init__(self, message: str, *, source: str | None = None, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.source = source
        self.cause = cause
