"""
Unit Registry for GramGrab.

Canonical culinary units, their base-unit factors and aliases.
Base units: ml (volume), g (weight), each (count).
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional


class UnitCategory(str, Enum):
    VOLUME = "volume"
    WEIGHT = "weight"
    TEMPERATURE = "temperature"
    COUNT = "count"
    OTHER = "other"


class UnitSystem(str, Enum):
    METRIC = "metric"
    IMPERIAL = "imperial"


class MagnitudeTier(str, Enum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


CONVERTIBLE_CATEGORIES = frozenset({UnitCategory.VOLUME, UnitCategory.WEIGHT})


@dataclass(frozen=True)
class UnitDefinition:
    name: str
    category: UnitCategory
    to_base: float
    system: Optional[UnitSystem]
    aliases: frozenset = field(default_factory=frozenset)
    # Matched only with exact case ("T" is tbsp, "t" is tsp)
    case_sensitive_aliases: frozenset = field(default_factory=frozenset)


def _unit(name, category, to_base, system, aliases=(), case_sensitive=()):
    return UnitDefinition(
        name=name,
        category=category,
        to_base=to_base,
        system=system,
        aliases=frozenset(aliases),
        case_sensitive_aliases=frozenset(case_sensitive),
    )


VOLUME = UnitCategory.VOLUME
WEIGHT = UnitCategory.WEIGHT
METRIC = UnitSystem.METRIC
IMPERIAL = UnitSystem.IMPERIAL

# --- Data Tables ---

_DEFINITIONS = (
    # Volume - Imperial (US customary)
    _unit("cup", VOLUME, 236.588, IMPERIAL, ["cups", "c"]),
    _unit("tbsp", VOLUME, 14.787, IMPERIAL,
          ["tablespoon", "tablespoons", "tbs", "tbsp.", "tbl"], case_sensitive=["T"]),
    _unit("tsp", VOLUME, 4.929, IMPERIAL,
          ["teaspoon", "teaspoons", "tsp."], case_sensitive=["t"]),
    _unit("fl oz", VOLUME, 29.574, IMPERIAL,
          ["fluid ounce", "fluid ounces", "fl. oz.", "fl.oz.", "floz"]),
    _unit("qt", VOLUME, 946.353, IMPERIAL, ["quart", "quarts"]),
    _unit("pt", VOLUME, 473.176, IMPERIAL, ["pint", "pints"]),
    _unit("gal", VOLUME, 3785.41, IMPERIAL, ["gallon", "gallons"]),

    # Volume - Metric
    _unit("ml", VOLUME, 1.0, METRIC,
          ["milliliter", "milliliters", "millilitre", "millilitres"]),
    _unit("L", VOLUME, 1000.0, METRIC, ["liter", "liters", "litre", "litres"]),
    _unit("dl", VOLUME, 100.0, METRIC,
          ["deciliter", "deciliters", "decilitre", "decilitres"]),

    # Weight - Imperial
    _unit("lb", WEIGHT, 453.592, IMPERIAL, ["lbs", "lb.", "lbs.", "pound", "pounds"]),
    _unit("oz", WEIGHT, 28.3495, IMPERIAL, ["oz.", "ounce", "ounces"]),

    # Weight - Metric
    _unit("g", WEIGHT, 1.0, METRIC, ["gram", "grams", "gr"]),
    _unit("kg", WEIGHT, 1000.0, METRIC, ["kilogram", "kilograms", "kgs"]),
    _unit("mg", WEIGHT, 0.001, METRIC, ["milligram", "milligrams"]),

    # Temperature (converted by services.temperature, never by the volume/weight path)
    _unit("°C", UnitCategory.TEMPERATURE, 1.0, METRIC, ["celsius", "degc", "deg c"]),
    _unit("°F", UnitCategory.TEMPERATURE, 1.0, IMPERIAL, ["fahrenheit", "degf", "deg f"]),

    # Count (base: each)
    _unit("each", UnitCategory.COUNT, 1.0, None, ["ea", "whole"]),
    _unit("piece", UnitCategory.COUNT, 1.0, None, ["pieces", "pc", "pcs"]),
    _unit("clove", UnitCategory.COUNT, 1.0, None, ["cloves"]),
    _unit("slice", UnitCategory.COUNT, 1.0, None, ["slices"]),
    _unit("can", UnitCategory.COUNT, 1.0, None, ["cans"]),
    _unit("bunch", UnitCategory.COUNT, 1.0, None, ["bunches"]),
    _unit("package", UnitCategory.COUNT, 1.0, None, ["packages", "pkg"]),
    _unit("pinch", UnitCategory.OTHER, 1.0, None, ["pinches"]),
    _unit("dash", UnitCategory.OTHER, 1.0, None, ["dashes"]),
)

UNIT_DEFINITIONS: Mapping[str, UnitDefinition] = MappingProxyType(
    {d.name: d for d in _DEFINITIONS}
)

# Bare single letters only resolve to temperatures when the caller asks for that scope
_SCOPED_ONLY_ALIASES = {
    UnitCategory.TEMPERATURE: {"c": "°C", "f": "°F"},
}

# Preferred display unit per (category, system) and magnitude tier
PREFERRED_UNITS = MappingProxyType({
    (VOLUME, METRIC): {MagnitudeTier.SMALL: "ml", MagnitudeTier.MEDIUM: "ml", MagnitudeTier.LARGE: "L"},
    (WEIGHT, METRIC): {MagnitudeTier.SMALL: "g", MagnitudeTier.MEDIUM: "g", MagnitudeTier.LARGE: "kg"},
    (VOLUME, IMPERIAL): {MagnitudeTier.SMALL: "tsp", MagnitudeTier.MEDIUM: "cup", MagnitudeTier.LARGE: "qt"},
    (WEIGHT, IMPERIAL): {MagnitudeTier.SMALL: "oz", MagnitudeTier.MEDIUM: "oz", MagnitudeTier.LARGE: "lb"},
})

# Upgrade thresholds in base units, largest tier first
UPGRADE_THRESHOLDS = MappingProxyType({
    (VOLUME, METRIC): ((MagnitudeTier.LARGE, 750.0),),
    (VOLUME, IMPERIAL): ((MagnitudeTier.LARGE, 946.0), (MagnitudeTier.MEDIUM, 15.0)),
    (WEIGHT, METRIC): ((MagnitudeTier.LARGE, 750.0),),
    (WEIGHT, IMPERIAL): ((MagnitudeTier.LARGE, 453.0),),
})


def _build_alias_maps(definitions):
    """
    Build (exact-case, case-insensitive) alias maps.

    Raises ValueError when two units claim the same alias.
    """
    exact = {}
    folded = {}
    for d in definitions:
        for alias in d.case_sensitive_aliases:
            if alias in exact:
                raise ValueError(f"Alias {alias!r} maps to both {exact[alias]!r} and {d.name!r}")
            exact[alias] = d.name
        for alias in {d.name, *d.aliases}:
            key = alias.strip().lower()
            if key in folded and folded[key] != d.name:
                raise ValueError(f"Alias {alias!r} maps to both {folded[key]!r} and {d.name!r}")
            folded[key] = d.name
    clash = set(k.lower() for k in exact) & set(folded)
    if clash:
        raise ValueError(f"Case-sensitive aliases shadow folded aliases: {sorted(clash)}")
    return MappingProxyType(exact), MappingProxyType(folded)


_EXACT_ALIASES, _FOLDED_ALIASES = _build_alias_maps(_DEFINITIONS)


# --- Queries ---

def normalize_unit(unit: Optional[str], category: Optional[UnitCategory] = None) -> Optional[str]:
    """
    Normalize unit text to its canonical unit name.

    Lookup is trimmed and exact: case-sensitive aliases first, then a
    case-insensitive match on canonical names and aliases. Passing a
    category restricts the match to units of that category.
    """
    if not unit:
        return None
    raw = unit.strip()
    if not raw:
        return None

    canonical = _EXACT_ALIASES.get(raw) or _FOLDED_ALIASES.get(raw.lower())

    if category is None:
        return canonical

    if canonical and UNIT_DEFINITIONS[canonical].category == category:
        return canonical
    return _SCOPED_ONLY_ALIASES.get(category, {}).get(raw.lower())


def get_unit_definition(unit: Optional[str]) -> Optional[UnitDefinition]:
    canonical = normalize_unit(unit)
    if not canonical:
        return None
    return UNIT_DEFINITIONS[canonical]


def get_unit_category(unit: Optional[str]) -> UnitCategory:
    """Category of a unit; unrecognized text is OTHER."""
    definition = get_unit_definition(unit)
    return definition.category if definition else UnitCategory.OTHER


def get_unit_system(unit: Optional[str]) -> Optional[UnitSystem]:
    definition = get_unit_definition(unit)
    return definition.system if definition else None


def can_convert(unit: Optional[str]) -> bool:
    """True iff the unit is a recognized volume or weight unit."""
    return get_unit_category(unit) in CONVERTIBLE_CATEGORIES


def magnitude_tier(base_value: float, category: UnitCategory, system: UnitSystem) -> MagnitudeTier:
    for tier, threshold in UPGRADE_THRESHOLDS[(category, system)]:
        if base_value >= threshold:
            return tier
    return MagnitudeTier.SMALL


def select_display_unit(base_value: float, category: UnitCategory, system: UnitSystem) -> str:
    """Most legible unit in `system` for a quantity given in base units."""
    return PREFERRED_UNITS[(category, system)][magnitude_tier(base_value, category, system)]
