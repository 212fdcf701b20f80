"""Calculator Routes: end-to-end HTTP behavior of the four arithmetic endpoints.

Invariants:
    - Success → 200 {"result": int}
    - Validation failure → 400/415 {"error": message}
    - Every response, success or error, is application/json
"""

import pytest

JSON = {"Content-Type": "application/json"}


# ─── Success ─────────────────────────────────────────────────────

@pytest.mark.parametrize("path, a, b, expected", [
    ("/add", 5, 3, 8),
    ("/add", -5, 3, -2),
    ("/subtract", 5, 3, 2),
    ("/subtract", 3, 5, -2),
    ("/multiply", 5, 3, 15),
    ("/multiply", -4, 6, -24),
    ("/divide", 10, 2, 5),
    ("/divide", 10, 3, 3),
    ("/divide", -10, 3, -3),
])
async def test_operation_returns_result(client, path, a, b, expected):
    res = await client.post(path, json={"a": a, "b": b})
    assert res.status_code == 200
    assert res.json() == {"result": expected}
    assert res.headers["content-type"] == "application/json"


async def test_missing_field_defaults_to_zero(client):
    res = await client.post("/add", json={"a": 5})
    assert res.status_code == 200
    assert res.json() == {"result": 5}


async def test_request_without_content_type_is_accepted(client):
    res = await client.post("/multiply", content=b'{"a": 10, "b": 2}')
    assert "content-type" not in res.request.headers
    assert res.status_code == 200
    assert res.json() == {"result": 20}


async def test_content_type_with_charset_is_accepted(client):
    res = await client.post(
        "/subtract",
        content=b'{"a": 1, "b": 2}',
        headers={"Content-Type": "application/json; charset=utf-8"},
    )
    assert res.status_code == 200
    assert res.json() == {"result": -1}


async def test_add_wraps_at_64_bits(client):
    res = await client.post("/add", json={"a": 2 ** 63 - 1, "b": 1})
    assert res.json() == {"result": -(2 ** 63)}


# ─── Divide by zero ──────────────────────────────────────────────

@pytest.mark.parametrize("a", [0, 7, -7])
async def test_divide_by_zero_returns_400(client, a):
    res = await client.post("/divide", json={"a": a, "b": 0})
    assert res.status_code == 400
    assert res.json() == {"error": "Can't divide by 0"}
    assert res.headers["content-type"] == "application/json"


async def test_divide_with_missing_b_is_divide_by_zero(client):
    res = await client.post("/divide", json={"a": 5})
    assert res.status_code == 400
    assert res.json() == {"error": "Can't divide by 0"}


# ─── Validation errors ───────────────────────────────────────────

@pytest.mark.parametrize("path", ["/add", "/subtract", "/multiply", "/divide"])
async def test_wrong_content_type_returns_415(client, path):
    res = await client.post(
        path, content=b'{"a": 5, "b": 3}', headers={"Content-Type": "text/plain"},
    )
    assert res.status_code == 415
    assert res.json() == {"error": "Content-Type must be application/json"}
    assert res.headers["content-type"] == "application/json"


@pytest.mark.parametrize("path", ["/add", "/subtract", "/multiply", "/divide"])
async def test_unknown_field_returns_400(client, path):
    res = await client.post(path, json={"a": 5, "b": 3, "c": 1})
    assert res.status_code == 400
    assert res.json() == {
        "error": "Invalid request format: only 'a' and 'b' fields are allowed",
    }


async def test_malformed_json_returns_400(client):
    res = await client.post("/add", content=b'{"a": 5, "b":}', headers=JSON)
    assert res.status_code == 400
    assert res.json() == {"error": "Invalid JSON format: malformed JSON structure"}
    assert res.headers["content-type"] == "application/json"


async def test_wrong_field_type_returns_400(client):
    res = await client.post("/multiply", json={"a": "string", "b": 3})
    assert res.status_code == 400
    assert res.json() == {
        "error": "Invalid field type: field 'a' must be an integer",
    }


async def test_float_operand_returns_400(client):
    res = await client.post("/add", json={"a": 1, "b": 2.5})
    assert res.status_code == 400
    assert res.json() == {
        "error": "Invalid field type: field 'b' must be an integer",
    }


@pytest.mark.parametrize("body", [b"", b"[1, 2]", b'{"a": 5'])
async def test_other_bad_bodies_return_generic_400(client, body):
    res = await client.post("/subtract", content=body, headers=JSON)
    assert res.status_code == 400
    assert res.json() == {
        "error": "Invalid request format: expected JSON with 'a' and 'b' integer fields",
    }
