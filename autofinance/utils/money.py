"""Rounding helpers for currency and percentage figures"""

import math
from decimal import Decimal, ROUND_HALF_UP

from autofinance.domain.exceptions import NonFiniteResultError

# Above this magnitude a double has no sub-cent resolution left to round
_PRECISION_LIMIT = 1e15


def ensure_finite(value: float, what: str = "result") -> float:
    """Reject NaN/inf so nothing non-renderable leaves the engine"""
    if not math.isfinite(value):
        raise NonFiniteResultError(f"{what} is not a finite number: {value}")
    return value


def round_half_away(value: float, places: int = 2) -> float:
    """
    Round to ``places`` decimals, halves away from zero.

    Python's round() uses banker's rounding and works on the binary value,
    so 2.675 would become 2.67. Going through the shortest repr first keeps
    the decimal the caller sees: 2.675 -> 2.68, -2.675 -> -2.68.
    """
    ensure_finite(value)
    if abs(value) >= _PRECISION_LIMIT:
        return float(value)
    quantum = Decimal(1).scaleb(-places)
    rounded = Decimal(repr(float(value))).quantize(quantum, rounding=ROUND_HALF_UP)
    return float(rounded)


def to_cents(value: float) -> float:
    """Round a currency amount to cent precision"""
    return round_half_away(value, 2)


def to_whole(value: float) -> float:
    """Round a currency amount to whole units"""
    return round_half_away(value, 0)
