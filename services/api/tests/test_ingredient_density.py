import pytest
import redis

from gramgrab.infra import redis_cache
from gramgrab.services.ingredient_density import (
    CachedDensityResolver,
    DensityInfo,
    TableDensityResolver,
    cups_to_grams,
    default_density_resolver,
    grams_to_cups,
)


@pytest.fixture
def table():
    return TableDensityResolver()


@pytest.fixture
def cached():
    return CachedDensityResolver(default_density_resolver(), ttl_days=30, min_confidence=0.5)


@pytest.mark.parametrize("name,grams,dry", [
    ("flour", 125, True),
    ("All-Purpose Flour", 125, True),
    ("whole milk", 245, False),
    ("unsalted butter", 227, True),
    ("chopped walnuts", 120, True),
    ("Light Brown Sugar", 220, True),
    ("coconut milk", 230, False),
])
def test_table_matches(table, name, grams, dry):
    info = table.resolve(name)
    assert info.grams_per_cup == grams
    assert info.is_dry_convertible is dry
    assert info.source == "table"


def test_category_fallback(table):
    # "buttery" is not the word "butter", only the category pattern catches it
    info = table.resolve("buttery spread")
    assert info.grams_per_cup == 227
    assert info.kind == "fat"


def test_unmatched_names_use_wet_heuristic(table):
    juice = table.resolve("yuzu juice")
    assert juice == DensityInfo(is_dry_convertible=False, source="heuristic")

    nectar = table.resolve("dragonfruit nectar")
    assert nectar.is_dry_convertible is True
    assert nectar.grams_per_cup is None


def test_empty_name_declined(table):
    assert table.resolve("") == DensityInfo.declined()
    assert table.find("   ") is None


def test_custom_table():
    resolver = TableDensityResolver({"zaatar": (100, "powder", ("za'atar",))})
    info = resolver.resolve("za'atar")
    assert info.grams_per_cup == 100
    assert info.is_dry_convertible is True


def test_cup_gram_helpers():
    assert cups_to_grams(2, "flour") == pytest.approx(250)
    assert grams_to_cups(250, "sugar") == pytest.approx(1.25)
    assert cups_to_grams(1, "yuzu juice") is None


def test_cache_key():
    assert CachedDensityResolver.cache_key("Fresh Chopped Onions (diced)") == "density:onion"
    assert CachedDensityResolver.cache_key("") is None


def test_learn_resolve_forget(cached, mock_redis):
    # 1. Learn
    assert cached.learn("My Special Flour", 120, "dry", confidence=0.9) is True
    assert mock_redis.ttl("density:my special flour") > 0

    # 2. Learned value wins, matched by normalized key
    info = cached.resolve("my special flour")
    assert info.grams_per_cup == 120
    assert info.source == "learned"

    # 3. Forget
    assert cached.forget("My Special Flour") is True
    assert cached.forget("My Special Flour") is False
    assert cached.resolve("My Special Flour").source == "table"


def test_learned_entry_overrides_table(cached):
    cached.learn("flour", 140, "dry")
    assert cached.resolve("Flour").grams_per_cup == 140


def test_low_confidence_not_cached(cached):
    assert cached.learn("Dragonfruit Nectar", 300, "dry", confidence=0.3) is False
    assert cached.resolve("Dragonfruit Nectar").source == "heuristic"


@pytest.mark.parametrize("raw", [
    '{"grams_per_cup": 140, "kind": "gravel"}',
    '{"grams_per_cup": "lots", "kind": "dry"}',
    "not json",
    "[1, 2]",
    "42",
])
def test_corrupt_entry_ignored(cached, mock_redis, raw):
    mock_redis.set("density:flour", raw)
    info = cached.resolve("flour")
    assert info.source == "table"
    assert info.grams_per_cup == 125


def test_corrupt_entry_does_not_break_conversion(client, mock_redis):
    mock_redis.set("density:flour", "not json")
    res = client.post("/api/units/convert", json={
        "qty": 1, "from_unit": "cup", "target_system": "metric", "ingredient_name": "flour",
    })
    assert res.status_code == 200
    assert res.json()["unit"] == "g"
    assert res.json()["quantity_text"] == "125"


def test_redis_down_falls_back_to_table(cached, monkeypatch):
    def boom(key):
        raise redis.ConnectionError("down")

    monkeypatch.setattr(redis_cache, "get_json_sync", boom)
    info = cached.resolve("flour")
    assert info.grams_per_cup == 125
    assert info.source == "table"
