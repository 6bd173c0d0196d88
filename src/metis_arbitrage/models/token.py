"""Token and Exchange: the immutable building blocks of a trading pair.

Both are constructed from raw DEX Screener records or from fixtures and are
never mutated; a pair embeds its own copies.
"""

from __future__ import annotations

from dataclasses import dataclass

MAX_DECIMALS = 255


@dataclass(frozen=True, slots=True)
class Token:
    """An ERC-20 style token on the target chain."""

    symbol: str
    """Ticker (e.g. WETH). Grouping of pairs across exchanges is by symbol."""
    name: str
    decimals: int
    """Decimal precision. DEX Screener does not report it; ingestion uses a fixed default."""
    address: str
    """On-chain contract address (0x...)."""

    @classmethod
    def create(
        cls,
        symbol: str,
        name: str,
        decimals: int,
        address: str,
    ) -> Token:
        """Create a Token after validating symbol, address and decimals.

        Values are stored as given: " WETH" and "WETH" are different symbols.
        """
        symbol = symbol or ""
        address = address or ""
        if not symbol.strip() or not address.strip():
            raise ValueError("symbol and address must be non-empty")
        if not 0 <= decimals <= MAX_DECIMALS:
            raise ValueError(f"decimals must be between 0 and {MAX_DECIMALS}")
        return cls(
            symbol=symbol,
            name=name or "",
            decimals=decimals,
            address=address,
        )

    def __str__(self) -> str:
        return self.symbol


@dataclass(frozen=True, slots=True)
class Exchange:
    """A decentralized exchange listing, identified by its dexId on a chain."""

    name: str
    """dexId as reported by DEX Screener (e.g. netswap, tethys)."""
    chain: str
    router_address: str
    """Router or pair contract address for this listing."""

    def __str__(self) -> str:
        return f"{self.name} ({self.chain})"
