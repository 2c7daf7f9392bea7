import pytest

from gramgrab.services.unit_conversion import (
    IngredientQuantity,
    convert_ingredient,
    convert_quantity,
    from_base_units,
    to_base_units,
)
from gramgrab.services.unit_registry import UnitCategory, UnitSystem

METRIC = UnitSystem.METRIC
IMPERIAL = UnitSystem.IMPERIAL


def test_cups_to_metric():
    res = convert_quantity(2, "cup", METRIC)
    assert res.unit == "ml"
    assert res.amount == pytest.approx(473.176)
    assert res.converted is True

    # 946 ml crosses the litre threshold
    res = convert_quantity(4, "cups", METRIC)
    assert res.unit == "L"
    assert res.amount == pytest.approx(0.946352)


def test_small_metric_volume_to_imperial():
    res = convert_quantity(60, "ml", IMPERIAL)
    assert res.unit == "cup"
    assert res.amount == pytest.approx(60 / 236.588)

    res = convert_quantity(5, "ml", IMPERIAL)
    assert res.unit == "tsp"
    assert res.amount == pytest.approx(5 / 4.929)


def test_weight_to_imperial():
    res = convert_quantity(500, "g", IMPERIAL)
    assert res.unit == "lb"
    assert res.amount == pytest.approx(500 / 453.592)

    res = convert_quantity(100, "g", IMPERIAL)
    assert res.unit == "oz"
    assert res.amount == pytest.approx(100 / 28.3495)


def test_weight_to_metric():
    res = convert_quantity(2, "lb", METRIC)
    assert res.unit == "kg"
    assert res.amount == pytest.approx(0.907184)


def test_same_system_keeps_amount_and_canonical_label():
    res = convert_quantity(250, "grams", METRIC)
    assert (res.amount, res.unit, res.converted) == (250, "g", False)

    res = convert_quantity(2, "Cups", IMPERIAL)
    assert (res.amount, res.unit, res.converted) == (2, "cup", False)


def test_unknown_and_count_units_pass_through():
    res = convert_quantity(3, "handful", METRIC)
    assert (res.amount, res.unit, res.converted) == (3, "handful", False)

    res = convert_quantity(2, "cloves", METRIC)
    assert (res.amount, res.unit, res.converted) == (2, "cloves", False)

    res = convert_quantity(1, "pinch", IMPERIAL)
    assert res.converted is False


@pytest.mark.parametrize("amount,unit", [
    (500, "g"),
    (200, "ml"),
    (2, "kg"),
    (1.5, "L"),
    (30, "ml"),
])
def test_round_trip_preserves_base_quantity(amount, unit):
    imperial = convert_quantity(amount, unit, IMPERIAL)
    back = convert_quantity(imperial.amount, imperial.unit, METRIC)

    original = to_base_units(amount, unit).value
    restored = to_base_units(back.amount, back.unit).value
    assert restored == pytest.approx(original, rel=0.005)


def test_base_unit_pivot():
    base = to_base_units(2, "tbsp")
    assert base.category == UnitCategory.VOLUME
    assert base.value == pytest.approx(29.574)

    assert to_base_units(1, "clove") is None
    assert to_base_units(1, "glarps") is None

    res = from_base_units(1500, UnitCategory.WEIGHT, METRIC)
    assert (res.unit, res.converted) == ("kg", True)
    assert res.amount == pytest.approx(1.5)


def test_convert_ingredient_record():
    flour = IngredientQuantity(amount=2, unit="cups", ingredient_name="flour")
    res = convert_ingredient(flour, METRIC)
    assert res.unit == "ml"
    assert res.amount == pytest.approx(473.176)
    assert res.ingredient_name == "flour"

    # Untouched records
    salt = IngredientQuantity(amount=None, unit="", ingredient_name="salt")
    assert convert_ingredient(salt, METRIC) is salt

    eggs = IngredientQuantity(amount=2, unit="", ingredient_name="eggs")
    assert convert_ingredient(eggs, IMPERIAL) is eggs

    garlic = IngredientQuantity(amount=3, unit="cloves", ingredient_name="garlic")
    assert convert_ingredient(garlic, METRIC) is garlic
