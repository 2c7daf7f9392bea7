"""
Ingredient display composition.

Scales an ingredient by the serving multiplier, converts it to the reader's
measurement system and formats it for the recipe page.
"""

from dataclasses import dataclass
from typing import Literal, Optional, Union

from .ingredient_density import DensityResolver
from .quantity_format import format_quantity
from .unit_conversion import IngredientQuantity, convert_with_ingredient
from .unit_registry import UnitSystem, can_convert

ORIGINAL = "original"

DisplaySystem = Union[UnitSystem, Literal["original"]]


@dataclass(frozen=True)
class DisplayLine:
    quantity_text: str
    unit: str
    ingredient_name: str
    # Pre-conversion text for the tooltip, only when conversion changed the value
    original_text: Optional[str] = None


def resolve_display_system(preferred: UnitSystem, override: Optional[DisplaySystem] = None) -> DisplaySystem:
    """A page-level override (including "original") wins over the user's preference."""
    if override is not None:
        return override
    return preferred


def format_ingredient_display(
    ingredient: IngredientQuantity,
    display_system: DisplaySystem,
    serving_multiplier: float = 1,
    resolver: Optional[DensityResolver] = None,
) -> DisplayLine:
    if ingredient.amount is None:
        return DisplayLine(quantity_text="", unit="", ingredient_name=ingredient.ingredient_name)

    amount = ingredient.amount * serving_multiplier
    unit = ingredient.unit or ""

    if display_system == ORIGINAL or not can_convert(unit):
        return DisplayLine(
            quantity_text=format_quantity(amount),
            unit=unit,
            ingredient_name=ingredient.ingredient_name,
        )

    original_text = f"{format_quantity(amount)} {unit}"
    result = convert_with_ingredient(
        amount,
        unit,
        UnitSystem(display_system),
        ingredient.ingredient_name,
        resolver=resolver,
    )

    return DisplayLine(
        quantity_text=format_quantity(result.amount),
        unit=result.unit,
        ingredient_name=ingredient.ingredient_name,
        original_text=original_text if result.converted else None,
    )
