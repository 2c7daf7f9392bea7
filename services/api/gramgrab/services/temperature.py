"""
Oven temperature helpers: C <-> F conversion and detection in step text.
"""

import re
from dataclasses import dataclass

from .unit_registry import UnitCategory, normalize_unit

_SCALE_BY_CANONICAL = {"°C": "C", "°F": "F"}

# Bare letters need an uppercase unit and three digits so "12 C sugar" is not 12°C
_PATTERNS = (
    re.compile(r"(\d{3,})\s*°?\s*([CF])\b"),
    re.compile(r"(\d+)\s*degrees?\s*([CF])", re.IGNORECASE),
    re.compile(r"(\d+)\s*°\s*([CF])", re.IGNORECASE),
)


@dataclass(frozen=True)
class TemperatureMention:
    value: int
    unit: str  # "C" or "F"
    match: str
    index: int


def temperature_scale(unit: str) -> str:
    """
    "C" or "F" for any temperature token (C, °F, celsius, ...).

    Raises ValueError for anything else.
    """
    canonical = normalize_unit(unit, category=UnitCategory.TEMPERATURE)
    if canonical not in _SCALE_BY_CANONICAL:
        raise ValueError(f"Unknown temperature unit: {unit!r}")
    return _SCALE_BY_CANONICAL[canonical]


def convert_temperature(value: float, from_unit: str, to_unit: str) -> float:
    src = temperature_scale(from_unit)
    dst = temperature_scale(to_unit)
    if src == dst:
        return value
    if src == "F":
        return (value - 32) * (5 / 9)
    return value * (9 / 5) + 32


def detect_temperatures_in_text(text: str) -> list[TemperatureMention]:
    """Find temperatures like 350F, 350°F, 180 degrees C in instructions."""
    results: list[TemperatureMention] = []
    if not text:
        return results

    for pattern in _PATTERNS:
        for m in pattern.finditer(text):
            value = int(m.group(1))
            unit = m.group(2).upper()
            duplicate = any(
                r.index == m.start() or (r.value == value and r.unit == unit)
                for r in results
            )
            if not duplicate:
                results.append(TemperatureMention(value=value, unit=unit, match=m.group(0), index=m.start()))

    return results
