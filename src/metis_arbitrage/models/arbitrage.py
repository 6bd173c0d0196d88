# -*- coding: utf-8 -*-
"""Multi-leg arbitrage route types.

Reserved for route-based execution: the spread scanner does not build these.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from decimal import Decimal
from typing import Optional

from metis_arbitrage.models.token import Exchange, Token


@dataclass(frozen=True, slots=True)
class ArbitrageLeg:
    """One swap: from_token -> to_token on an exchange at a given price."""

    from_token: Token
    to_token: Token
    exchange: Exchange
    price: Decimal
    liquidity: Decimal


@dataclass(frozen=True, slots=True)
class ArbitrageRoute:
    """Ordered sequence of legs. total_hops always equals len(legs)."""

    legs: tuple[ArbitrageLeg, ...] = ()

    @property
    def total_hops(self) -> int:
        return len(self.legs)

    def format_path(self) -> str:
        """Format the token path, e.g. 'USDC -> WETH -> METIS -> USDC'. Empty route gives ''."""
        if not self.legs:
            return ""
        path = [self.legs[0].from_token.symbol]
        path.extend(leg.to_token.symbol for leg in self.legs)
        return " -> ".join(path)


@dataclass(frozen=True, slots=True)
class ArbitrageOpportunity:
    """A route with its sizing and profit figures."""

    route: ArbitrageRoute
    input_amount: Decimal
    output_amount: Decimal
    gross_profit: Decimal
    net_profit: Decimal
    gas_cost: Decimal
    profit_percentage: Decimal
    """net_profit / input_amount * 100, or 0 when input_amount is not positive."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))

    @classmethod
    def create(
        cls,
        route: ArbitrageRoute,
        input_amount: Decimal,
        output_amount: Decimal,
        gross_profit: Decimal,
        net_profit: Decimal,
        gas_cost: Decimal,
        *,
        timestamp: Optional[datetime] = None,
    ) -> ArbitrageOpportunity:
        """Create an opportunity, deriving profit_percentage from net_profit and input_amount."""
        if input_amount > 0:
            profit_percentage = net_profit / input_amount * Decimal("100")
        else:
            profit_percentage = Decimal("0")
        return cls(
            route=route,
            input_amount=input_amount,
            output_amount=output_amount,
            gross_profit=gross_profit,
            net_profit=net_profit,
            gas_cost=gas_cost,
            profit_percentage=profit_percentage,
            timestamp=timestamp or datetime.now(UTC),
        )
