# -*- coding: utf-8 -*-
"""Unit tests for Settings (defaults, CSV lists, env overrides)."""

from __future__ import annotations

from decimal import Decimal

import pytest
from pydantic import ValidationError

from metis_arbitrage.config import Settings, get_settings


def test_defaults() -> None:
    settings = Settings()

    assert settings.api.dex_screener_url == "https://api.dexscreener.com/latest/dex"
    assert settings.api.timeout_seconds == 10.0
    assert settings.feed.chain_id == "metis"
    assert settings.feed.allowed_dexes == ["netswap", "tethys"]
    assert settings.feed.search_terms == ["metis", "netswap", "tethys"]
    assert settings.feed.min_liquidity_usd == Decimal("1000")
    assert settings.feed.price_max_age_seconds == 60
    assert settings.feed.default_decimals == 18
    assert settings.scanner.spread_threshold_pct == Decimal("0.5")
    assert settings.scanner.scan_interval_seconds == 30.0


def test_csv_lists_are_trimmed() -> None:
    settings = Settings.from_env(feed={"allowed_dexes": " netswap , ,hermes ", "search_terms": ""})

    assert settings.feed.allowed_dexes == ["netswap", "hermes"]
    assert settings.feed.search_terms == []


def test_env_overrides_nested_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SCANNER__SPREAD_THRESHOLD_PCT", "1.5")
    monkeypatch.setenv("API__TIMEOUT_SECONDS", "20")
    monkeypatch.setenv("FEED__CONCURRENT_TERMS", "true")

    settings = Settings()

    assert settings.scanner.spread_threshold_pct == Decimal("1.5")
    assert settings.api.timeout_seconds == 20.0
    assert settings.feed.concurrent_terms is True


def test_invalid_values_are_rejected() -> None:
    with pytest.raises(ValidationError):
        Settings.from_env(scanner={"scan_interval_seconds": 0})
    with pytest.raises(ValidationError):
        Settings.from_env(feed={"min_liquidity_usd": "-1"})


def test_settings_are_frozen() -> None:
    settings = Settings()

    with pytest.raises(ValidationError):
        settings.api = settings.api  # type: ignore[misc]


def test_get_settings_is_cached() -> None:
    assert get_settings() is get_settings()
