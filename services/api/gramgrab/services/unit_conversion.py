"""
Unit Conversion Service for GramGrab.

Converts ingredient quantities between metric and imperial systems by
pivoting through the base unit of each category (ml for volume, g for
weight), then picks the most legible display unit for the result.
"""

import logging
from dataclasses import dataclass, replace
from typing import Optional

from .ingredient_density import DensityResolver, default_density_resolver
from .unit_registry import (
    CONVERTIBLE_CATEGORIES,
    UNIT_DEFINITIONS,
    UnitCategory,
    UnitSystem,
    can_convert,
    get_unit_definition,
    select_display_unit,
)

logger = logging.getLogger("gramgrab.units")


@dataclass(frozen=True)
class ConversionResult:
    amount: float
    unit: str
    converted: bool = False


@dataclass(frozen=True)
class BaseQuantity:
    """A quantity expressed in its category's base unit (ml or g)."""
    value: float
    category: UnitCategory


@dataclass(frozen=True)
class IngredientQuantity:
    """
    A stored ingredient line.

    `amount` is None for name-only ingredients ("salt, to taste").
    """
    amount: Optional[float]
    unit: str
    ingredient_name: str


# --- Base unit pivot ---

def to_base_units(amount: float, unit: str) -> Optional[BaseQuantity]:
    """Express a volume/weight quantity in ml or g. None for anything else."""
    definition = get_unit_definition(unit)
    if not definition or definition.category not in CONVERTIBLE_CATEGORIES:
        return None
    return BaseQuantity(value=amount * definition.to_base, category=definition.category)


def from_base_units(value: float, category: UnitCategory, to_system: UnitSystem) -> ConversionResult:
    """Express a base-unit value in the preferred display unit of `to_system`."""
    target = select_display_unit(value, category, to_system)
    return ConversionResult(
        amount=value / UNIT_DEFINITIONS[target].to_base,
        unit=target,
        converted=True,
    )


# --- Converters ---

def convert_quantity(amount: float, from_unit: str, to_system: UnitSystem) -> ConversionResult:
    """
    Convert a quantity to the target measurement system.

    Unrecognized units and non volume/weight units come back untouched.
    Units already in the target system only get their label normalized.
    """
    definition = get_unit_definition(from_unit)

    if not definition or definition.category not in CONVERTIBLE_CATEGORIES:
        logger.debug("Passing through non-convertible unit %r", from_unit)
        return ConversionResult(amount, from_unit, converted=False)

    if definition.system == to_system:
        return ConversionResult(amount, definition.name, converted=False)

    return from_base_units(amount * definition.to_base, definition.category, to_system)


def convert_with_ingredient(
    amount: float,
    from_unit: str,
    to_system: UnitSystem,
    ingredient_name: str = "",
    resolver: Optional[DensityResolver] = None,
) -> ConversionResult:
    """
    Ingredient-aware conversion.

    Volumes headed for metric become grams when the density resolver says the
    ingredient is dry and knows its grams per cup; everything else converts
    volume to volume and weight to weight.
    """
    definition = get_unit_definition(from_unit)

    if not definition or definition.category not in CONVERTIBLE_CATEGORIES:
        return ConversionResult(amount, from_unit, converted=False)

    if definition.system == to_system:
        return ConversionResult(amount, definition.name, converted=False)

    if definition.category == UnitCategory.WEIGHT or to_system == UnitSystem.IMPERIAL:
        return convert_quantity(amount, from_unit, to_system)

    # Volume -> metric
    ml = amount * definition.to_base

    if ingredient_name and ingredient_name.strip():
        resolver = resolver or default_density_resolver()
        density = resolver.resolve(ingredient_name)
        if density.is_dry_convertible and density.grams_per_cup:
            cups = ml / UNIT_DEFINITIONS["cup"].to_base
            grams = cups * density.grams_per_cup
            logger.debug(
                "Converted %s %s of %r to %.1f g (%s g/cup, source=%s)",
                amount, definition.name, ingredient_name, grams,
                density.grams_per_cup, density.source,
            )
            return from_base_units(grams, UnitCategory.WEIGHT, UnitSystem.METRIC)

    return from_base_units(ml, UnitCategory.VOLUME, UnitSystem.METRIC)


def convert_ingredient(ingredient: IngredientQuantity, to_system: UnitSystem) -> IngredientQuantity:
    """Convert a whole ingredient record (no density lookup)."""
    if ingredient.amount is None or not ingredient.unit:
        return ingredient
    if not can_convert(ingredient.unit):
        return ingredient

    result = convert_quantity(ingredient.amount, ingredient.unit, to_system)
    return replace(ingredient, amount=result.amount, unit=result.unit)
