"""Helpers for presenting on-chain addresses."""

from __future__ import annotations


def mask_address(addr: str | None) -> str:
    """Return a shortened address for logging (e.g. 0x1234...abcd)."""
    if not addr or len(addr) < 10:
        return "***"
    return f"{addr[:6]}...{addr[-4:]}"
