"""
Shopping list quantity aggregation.

Sums the same ingredient across recipes in a common base unit, then
re-expresses the total in the shopper's measurement system.
"""

from dataclasses import dataclass
from typing import Iterable, Optional

from .ingredient_normalize import normalize_ingredient_key
from .quantity_format import format_quantity
from .unit_conversion import IngredientQuantity, from_base_units, to_base_units
from .unit_registry import UnitSystem, normalize_unit


@dataclass(frozen=True)
class AggregatedQuantity:
    ingredient_key: str
    ingredient_name: str
    amount: Optional[float]
    unit: str
    quantity_text: str


def aggregate_quantities(items: Iterable[IngredientQuantity], to_system: UnitSystem) -> list[AggregatedQuantity]:
    """
    Consolidate ingredient lines.

    Volume and weight amounts are summed separately per category (no density
    guessing across them). Other units are summed per unit. Name-only
    lines appear once with no amount. Order follows first appearance.
    """
    groups = {}  # (key, bucket) -> {name, total, unit, base_category}

    for item in items:
        key = normalize_ingredient_key(item.ingredient_name) or item.ingredient_name.strip().lower()

        if item.amount is None:
            groups.setdefault((key, None), {
                "name": item.ingredient_name,
                "total": None,
                "unit": "",
                "category": None,
            })
            continue

        base = to_base_units(item.amount, item.unit)
        if base:
            group = groups.setdefault((key, base.category), {
                "name": item.ingredient_name,
                "total": 0.0,
                "unit": None,
                "category": base.category,
            })
            group["total"] += base.value
            continue

        unit = normalize_unit(item.unit) or (item.unit or "").strip()
        group = groups.setdefault((key, f"unit:{unit}"), {
            "name": item.ingredient_name,
            "total": 0.0,
            "unit": unit,
            "category": None,
        })
        group["total"] += item.amount

    lines = []
    for (key, _), group in groups.items():
        total = group["total"]
        if total is None:
            lines.append(AggregatedQuantity(key, group["name"], None, "", ""))
            continue

        unit = group["unit"]
        if group["category"] is not None:
            result = from_base_units(total, group["category"], to_system)
            total, unit = result.amount, result.unit

        lines.append(AggregatedQuantity(key, group["name"], total, unit, format_quantity(total)))

    return lines
