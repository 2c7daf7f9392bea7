import pytest


def _upsert(client, name="My Special Flour", grams=120, per_qty=1, per_unit="cup", **extra):
    return client.put("/api/units/densities", json={
        "ingredient_name": name,
        "density": {"grams": grams, "per_qty": per_qty, "per_unit": per_unit},
        **extra,
    })


def test_density_lifecycle(client):
    # 1. Table value before anything is learned
    res = client.get("/api/units/densities/resolve", params={"name": "My Special Flour"})
    assert res.status_code == 200
    assert res.json()["grams_per_cup"] == 125
    assert res.json()["source"] == "table"

    # 2. Learn 120 g / cup
    res = _upsert(client)
    assert res.status_code == 200
    data = res.json()
    assert data["ingredient_key"] == "my special flour"
    assert data["grams_per_cup"] == pytest.approx(120)
    assert data["cached"] is True
    assert data["source"] == "learned"

    # 3. Conversion uses it
    res = client.post("/api/units/convert", json={
        "qty": 1, "from_unit": "cup", "target_system": "metric", "ingredient_name": "My Special Flour",
    })
    assert res.json()["unit"] == "g"
    assert 119.9 < res.json()["qty"] < 120.1

    res = client.get("/api/units/densities/resolve", params={"name": "my special flour"})
    assert res.json()["source"] == "learned"

    # 4. Delete
    res = client.delete("/api/units/densities/My Special Flour")
    assert res.status_code == 200

    res = client.delete("/api/units/densities/My Special Flour")
    assert res.status_code == 404

    res = client.get("/api/units/densities/resolve", params={"name": "My Special Flour"})
    assert res.json()["source"] == "table"


def test_density_from_metric_volume(client):
    # 50 g per 100 ml -> 0.5 g/ml
    res = _upsert(client, name="Oat Bran", grams=50, per_qty=100, per_unit="ml")
    assert res.status_code == 200
    assert res.json()["grams_per_cup"] == pytest.approx(118.294)


def test_density_validation(client):
    assert _upsert(client, per_unit="g").status_code == 400
    assert _upsert(client, per_unit="glarps").status_code == 400

    # 2000 g per ml is not food
    res = _upsert(client, name="Lead", grams=2000, per_unit="ml")
    assert res.status_code == 400

    res = _upsert(client, grams=0)
    assert res.status_code == 422


def test_low_confidence_is_not_cached(client):
    res = _upsert(client, name="Mystery Meal", confidence=0.2)
    assert res.status_code == 200
    assert res.json()["cached"] is False

    res = client.get("/api/units/densities/resolve", params={"name": "Mystery Meal"})
    assert res.json()["source"] != "learned"


def test_wet_density_keeps_volume(client):
    _upsert(client, name="Oat Milk", grams=240, kind="wet")
    res = client.post("/api/units/convert", json={
        "qty": 1, "from_unit": "cup", "target_system": "metric", "ingredient_name": "Oat Milk",
    })
    assert res.json()["unit"] == "ml"
