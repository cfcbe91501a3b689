"""Money and percentage helpers

All amounts inside the engine are integer cents. Fractional intermediate
values are Decimals and are rounded half-up back to cents.
"""

from decimal import Decimal, ROUND_HALF_UP, getcontext
from typing import Optional, Union

getcontext().prec = 28

Number = Union[int, str, Decimal, float]

CENTS_PER_UNIT = 100


def _to_decimal(value: Number) -> Decimal:
    # str() first so 0.1 becomes Decimal("0.1") rather than its binary expansion
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


def round_cents(value: Decimal) -> int:
    """Round a fractional cents value half-up to whole cents"""
    return int(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def to_cents(amount: Number) -> int:
    """
    Convert an amount in currency units to integer cents.

    Example:
        "23.505" → 2351
        12 → 1200
    """
    return round_cents(_to_decimal(amount) * CENTS_PER_UNIT)


def from_cents(cents: int) -> Decimal:
    """Convert integer cents back to currency units with two decimal places"""
    return (Decimal(cents) / CENTS_PER_UNIT).quantize(Decimal("0.01"))


def rate(value: Number) -> Decimal:
    """Normalise a fractional growth rate (0.05 = 5%/month) to Decimal"""
    return _to_decimal(value)


def clamp(value, low, high):
    return max(low, min(value, high))


def ceil_div(numerator: int, denominator: int) -> int:
    """Ceiling of numerator / denominator for a positive denominator"""
    if denominator <= 0:
        raise ValueError("Denominator must be positive")
    return -(-numerator // denominator)


def percentage(part: int, whole: int) -> Optional[Decimal]:
    """part / whole * 100, or None when whole is zero"""
    if whole == 0:
        return None
    return Decimal(part) * 100 / Decimal(whole)
