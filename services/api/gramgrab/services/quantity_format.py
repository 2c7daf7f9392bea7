"""
Quantity formatting for recipe display.

Renders amounts as cook-friendly fractions ("1 1/2") or short decimals.
"""

import math
from typing import Optional

FRACTION_TOLERANCE = 0.01

# Fractions are only used below this amount; "12.5" reads better than "12 1/2"
FRACTION_MAX = 10

COMMON_FRACTIONS = (
    (0.125, "1/8"),
    (0.25, "1/4"),
    (0.333, "1/3"),
    (0.375, "3/8"),
    (0.5, "1/2"),
    (0.625, "5/8"),
    (0.666, "2/3"),
    (0.75, "3/4"),
    (0.875, "7/8"),
)


def _round_half_up(value: float, digits: int = 1) -> float:
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def _one_decimal(value: float) -> str:
    rounded = _round_half_up(value, 1)
    if rounded == math.floor(rounded):
        return str(int(rounded))
    return f"{rounded:.1f}"


def to_fraction(value: float) -> Optional[str]:
    """
    Common fraction for `value` ("3/4", "2 1/3"), or the whole number when
    `value` is within tolerance of one. None otherwise.
    """
    whole = math.floor(value)
    fractional = value - whole

    if value < FRACTION_MAX:
        for decimal, fraction in COMMON_FRACTIONS:
            if abs(fractional - decimal) < FRACTION_TOLERANCE:
                if whole == 0:
                    return fraction
                return f"{whole} {fraction}"

    if fractional < FRACTION_TOLERANCE or fractional > 1 - FRACTION_TOLERANCE:
        return str(int(_round_half_up(value, 0)))

    return None


def format_quantity(amount: float, precision: Optional[int] = None) -> str:
    """Format a quantity for display. `precision` applies to amounts below 0.1."""
    if not math.isfinite(amount):
        return str(amount)
    if amount == 0:
        return "0"
    if amount < 0:
        return "-" + format_quantity(-amount, precision)

    fraction = to_fraction(amount)
    if fraction:
        return fraction

    # Very small numbers keep more precision
    if amount < 0.1:
        return f"{amount:.{2 if precision is None else precision}f}"

    return _one_decimal(amount)
