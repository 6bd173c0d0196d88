"""Lenient numeric parsing for loosely typed API fields."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any

ZERO = Decimal("0")


def to_decimal(value: Any, default: Decimal = ZERO) -> Decimal:
    """Parse value (str, int, float or Decimal) into a finite Decimal.

    Floats go through str() so 1234.5 becomes Decimal('1234.5'), not its binary
    expansion. None, booleans, unparsable and non-finite values give default.
    """
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, Decimal):
        parsed = value
    else:
        try:
            parsed = Decimal(str(value).strip())
        except (InvalidOperation, ValueError):
            return default
    if not parsed.is_finite():
        return default
    return parsed
