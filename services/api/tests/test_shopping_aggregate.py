import pytest

from gramgrab.services.shopping_aggregate import aggregate_quantities
from gramgrab.services.unit_conversion import IngredientQuantity
from gramgrab.services.unit_registry import UnitSystem


def _ing(amount, unit, name):
    return IngredientQuantity(amount=amount, unit=unit, ingredient_name=name)


def test_aggregate_across_recipes():
    items = [
        _ing(2, "cups", "flour"),
        _ing(250, "g", "Flour"),
        _ing(1, "cup", "Milk"),
        _ing(500, "ml", "milk"),
        _ing(3, "cloves", "garlic"),
        _ing(2, "clove", "Garlic"),
        _ing(None, "", "salt"),
        _ing(None, "", "Salt"),
    ]
    lines = aggregate_quantities(items, UnitSystem.METRIC)

    assert [(l.ingredient_key, l.unit) for l in lines] == [
        ("flour", "ml"),
        ("flour", "g"),
        ("milk", "ml"),
        ("garlic", "clove"),
        ("salt", ""),
    ]

    by_key = {(l.ingredient_key, l.unit): l for l in lines}
    assert by_key[("flour", "ml")].amount == pytest.approx(473.176)
    assert by_key[("flour", "g")].amount == pytest.approx(250)
    assert by_key[("milk", "ml")].amount == pytest.approx(736.588)
    assert by_key[("garlic", "clove")].amount == 5
    assert by_key[("garlic", "clove")].quantity_text == "5"

    salt = by_key[("salt", "")]
    assert salt.amount is None
    assert salt.quantity_text == ""
    assert salt.ingredient_name == "salt"


def test_aggregate_to_imperial_upgrades_unit():
    lines = aggregate_quantities([_ing(300, "g", "butter"), _ing(200, "g", "butter")], UnitSystem.IMPERIAL)
    assert len(lines) == 1
    assert lines[0].unit == "lb"
    assert lines[0].amount == pytest.approx(500 / 453.592)
    assert lines[0].quantity_text == "1.1"


def test_aggregate_empty():
    assert aggregate_quantities([], UnitSystem.METRIC) == []
