"""Arithmetic route — GET /operaciones returns 200 with a result or 502 without one.

Invariants:
    - Finite results (zero and negatives included) → 200 {"resultado": x, "mensaje": "operacion exitosa"}
    - Unknown/empty/missing operation → 502
    - Missing or non-numeric a / b → 502
    - Division by zero → 502 with "resultado": null
    - Infinite results → 200 with "resultado": null
"""

import pytest

FAILED = {"resultado": None, "mensaje": "operacion no pudo ser calculada"}


@pytest.mark.parametrize("operacion, a, b, expected", [
    ("suma", 10, 30, 40),
    ("suma", -10, 5, -5),
    ("resta", 30, 10, 20),
    ("resta", 5, 10, -5),
    ("resta", 5, 5, 0),
    ("multiplicacion", 5, 4, 20),
    ("multiplicacion", 0, 10, 0),
    ("multiplicacion", -3, 4, -12),
    ("division", 20, 4, 5),
    ("division", 5, 2, 2.5),
    ("division", 0, 5, 0),
    ("suma", 999999999999, 1, 1000000000000),
])
async def test_successful_operations(client, operacion, a, b, expected):
    res = await client.get(
        "/operaciones", params={"operacion": operacion, "a": a, "b": b},
    )
    assert res.status_code == 200
    assert res.json() == {"resultado": expected, "mensaje": "operacion exitosa"}


async def test_integral_results_are_json_integers(client):
    res = await client.get("/operaciones", params={"operacion": "suma", "a": 10, "b": 30})
    assert '"resultado":40,' in res.text


async def test_decimal_sum(client):
    res = await client.get("/operaciones", params={"operacion": "suma", "a": 1.5, "b": 2.3})
    assert res.status_code == 200
    assert res.json()["resultado"] == pytest.approx(3.8)


async def test_scientific_notation(client):
    res = await client.get("/operaciones", params={"operacion": "suma", "a": "1e2", "b": "5e1"})
    assert res.status_code == 200
    assert res.json()["resultado"] == 150


@pytest.mark.parametrize("params", [
    {"operacion": "multiplicacion", "a": "Infinity", "b": 2},
    {"operacion": "multiplicacion", "a": "1e308", "b": 10},
    {"operacion": "resta", "a": "-1e308", "b": "1e308"},
])
async def test_infinite_results_succeed_with_null_resultado(client, params):
    res = await client.get("/operaciones", params=params)
    assert res.status_code == 200
    assert res.json() == {"resultado": None, "mensaje": "operacion exitosa"}


@pytest.mark.parametrize("params", [
    {"operacion": "division", "a": 10, "b": 0},
    {"operacion": "division", "a": 0, "b": 0},
    {"operacion": "invalid", "a": 10, "b": 5},
    {"operacion": "Suma", "a": 10, "b": 5},
    {"operacion": " suma", "a": 10, "b": 5},
    {"operacion": "", "a": 10, "b": 5},
    {"a": 10, "b": 5},
    {"operacion": "suma", "b": 5},
    {"operacion": "suma", "a": 10},
    {"operacion": "suma"},
    {"operacion": "suma", "a": "abc", "b": 5},
    {"operacion": "suma", "a": 10, "b": "xyz"},
    {"operacion": "suma", "a": "", "b": 5},
    {"operacion": "suma", "a": "1_000", "b": 1},
    {"operacion": "suma", "a": "inf", "b": 1},
    {"operacion": "multiplicacion", "a": "Infinity", "b": 0},
])
async def test_uncomputable_operations_return_502(client, params):
    res = await client.get("/operaciones", params=params)
    assert res.status_code == 502
    assert res.json() == FAILED
