# -*- coding: utf-8 -*-
"""Configuration loaded from environment via Pydantic Settings.

Nested env vars use <section>__<key>, e.g. LOGGING__CONSOLE_LEVEL, FEED__MIN_LIQUIDITY_USD.
"""

from __future__ import annotations

from decimal import Decimal
from functools import lru_cache
from typing import Any, Literal, Optional

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


def _split_csv(raw: str) -> list[str]:
    if not raw or not raw.strip():
        return []
    return [s.strip() for s in raw.split(",") if s.strip()]


class AppSettings(BaseSettings):
    """General application configuration."""

    model_config = SettingsConfigDict(extra="ignore")

    app_name: str = "metis-arbitrage-scanner"
    service_name: Optional[str] = None
    service_version: Optional[str] = None
    environment: Literal["development", "test", "production"] = "development"


class LoggingSettings(BaseSettings):
    """Structured logging configuration for structlog/stdlib/Logfire."""

    model_config = SettingsConfigDict(extra="ignore")

    console_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    file_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    logfire_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    log_to_console: bool = True
    log_to_file: bool = False
    log_file_path: str = "logs/metis_arbitrage.log"
    # TimedRotatingFileHandler: when to rotate (S/M/H/D/W0–W6/midnight), interval, backups to keep
    log_file_when: Literal[
        "S", "M", "H", "D", "W0", "W1", "W2", "W3", "W4", "W5", "W6", "midnight"
    ] = "midnight"
    log_file_interval: int = 1
    log_file_backup_count: int = 30
    log_file_utc: bool = True

    # Main output format: JSONRenderer if True, ConsoleRenderer if False
    json_format: bool = False

    logfire_enabled: bool = False
    logfire_token: Optional[str] = None


class ApiSettings(BaseSettings):
    """Configuration for the DEX Screener HTTP API."""

    model_config = SettingsConfigDict(extra="ignore")

    dex_screener_url: str = Field(
        default="https://api.dexscreener.com/latest/dex",
        description="DEX Screener API base URL (search endpoint lives under it).",
    )
    timeout_seconds: float = Field(
        default=10.0,
        ge=1.0,
        le=120.0,
        description="HTTP request timeout in seconds (per search term).",
    )


class FeedSettings(BaseSettings):
    """Price feed ingestion rules (chain, exchanges, search terms, validation floors)."""

    model_config = SettingsConfigDict(extra="ignore")

    chain_id: str = Field(default="metis", description="chainId value records must match.")
    chain_label: str = Field(default="Metis", description="Chain label stored on Exchange.")
    # Raw strings from env so pydantic-settings does not try to JSON-decode them.
    allowed_dexes_raw: str = Field(
        default="netswap,tethys",
        description="Allowed dexId values, comma-separated. Env: FEED__ALLOWED_DEXES.",
        validation_alias="allowed_dexes",
    )
    search_terms_raw: str = Field(
        default="metis,netswap,tethys",
        description="Search keywords, comma-separated. Env: FEED__SEARCH_TERMS.",
        validation_alias="search_terms",
    )
    min_liquidity_usd: Decimal = Field(
        default=Decimal("1000"),
        ge=0,
        description="Pairs with USD liquidity below this floor are rejected.",
    )
    price_max_age_seconds: int = Field(
        default=60,
        ge=0,
        description="Freshness window for get_price lookups.",
    )
    default_decimals: int = Field(
        default=18,
        ge=0,
        le=255,
        description="Decimal precision assigned to every token.",
    )
    concurrent_terms: bool = Field(
        default=False,
        description="Issue the per-term search requests concurrently.",
    )

    @computed_field
    @property
    def allowed_dexes(self) -> list[str]:
        """Parse comma-separated allowed_dexes_raw into a list of stripped strings."""
        return _split_csv(self.allowed_dexes_raw)

    @computed_field
    @property
    def search_terms(self) -> list[str]:
        """Parse comma-separated search_terms_raw into a list of stripped strings."""
        return _split_csv(self.search_terms_raw)


class ScannerSettings(BaseSettings):
    """Divergence scanning and scan loop configuration."""

    model_config = SettingsConfigDict(extra="ignore")

    spread_threshold_pct: Decimal = Field(
        default=Decimal("0.5"),
        ge=0,
        description="Spreads strictly above this percentage produce a signal.",
    )
    scan_interval_seconds: float = Field(
        default=30.0,
        ge=1.0,
        le=3600.0,
        description="Seconds between scans.",
    )
    report_min_liquidity_usd: Decimal = Field(
        default=Decimal("5000"),
        ge=0,
        description="Minimum liquidity for a pair to appear in the startup pairs summary.",
    )
    report_max_pairs: int = Field(default=20, ge=1, le=500)
    stats_every_scans: int = Field(default=10, ge=1)


class Settings(BaseSettings):
    """Root application configuration.

    Groups all sub-configurations so the rest of the code does not
    read environment variables directly. Nested overrides use
    <section>__<key>, e.g. LOGGING__CONSOLE_LEVEL, API__TIMEOUT_SECONDS.
    """

    model_config = SettingsConfigDict(
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    app: AppSettings = Field(default_factory=AppSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    api: ApiSettings = Field(default_factory=ApiSettings)
    feed: FeedSettings = Field(default_factory=FeedSettings)
    scanner: ScannerSettings = Field(default_factory=ScannerSettings)

    @classmethod
    def from_env(cls, **overrides: Any) -> Settings:
        """Build settings from environment (and .env), with optional overrides.

        Nested overrides can be passed as nested dicts, e.g.:
        - from_env(api={"timeout_seconds": 30})
        - from_env(feed={"min_liquidity_usd": "2500"})

        Returns:
            A new Settings instance.
        """
        return cls(**overrides)


@lru_cache
def get_settings() -> Settings:
    """Return a single cached instance of Settings.

    Typical usage:

        from metis_arbitrage.config import get_settings

        settings = get_settings()
        timeout = settings.api.timeout_seconds
        floor = settings.feed.min_liquidity_usd
    """
    return Settings()
