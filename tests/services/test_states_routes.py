"""States Routes — verifies HTTP bindings, status codes and JSON shapes.

Invariants:
    - Client errors return 400 (404 for a random fact with no facts) with a top-level message
    - Mutations return the overlay document as {"stateCode", "funfacts"}
    - Bad state code wins over a bad body
"""

import pytest


# ─── Reads ───────────────────────────────────────────────────────

async def test_list_states(client):
    res = await client.get("/states/")
    assert res.status_code == 200
    assert len(res.json()) == 50


@pytest.mark.parametrize("contig,expected", [("true", 48), ("false", 2), ("maybe", 50)])
async def test_list_states_contig_filter(client, contig, expected):
    res = await client.get("/states/", params={"contig": contig})
    assert len(res.json()) == expected


async def test_list_states_non_contiguous_codes(client):
    res = await client.get("/states/", params={"contig": "false"})
    assert [s["code"] for s in res.json()] == ["AK", "HI"]


async def test_get_state_lowercase(client):
    res = await client.get("/states/ks")
    assert res.status_code == 200
    body = res.json()
    assert body["state"] == "Kansas"
    assert body["code"] == "KS"
    assert "funfacts" not in body


async def test_get_state_invalid_code(client):
    res = await client.get("/states/zz")
    assert res.status_code == 400
    assert res.json()["message"] == "Invalid state abbreviation parameter"
    assert res.json()["error"]["code"] == "INVALID_STATE_CODE"


async def test_get_state_padded_code_is_invalid(client):
    res = await client.get("/states/%20ks%20")
    assert res.status_code == 400
    assert res.json()["message"] == "Invalid state abbreviation parameter"


@pytest.mark.parametrize("path,key,value", [
    ("capital", "capital", "Topeka"),
    ("nickname", "nickname", "Sunflower State"),
    ("population", "population", "2,893,957"),
    ("admission", "admitted", "1861-01-29"),
])
async def test_field_routes(client, path, key, value):
    res = await client.get(f"/states/KS/{path}")
    assert res.status_code == 200
    assert res.json() == {"state": "Kansas", key: value}


async def test_field_route_invalid_code(client):
    res = await client.get("/states/XX/capital")
    assert res.status_code == 400


async def test_random_funfact(client, fixed_rng):
    await client.post("/states/KS/funfact", json={"funfacts": ["A", "B"]})
    fixed_rng.position = 1
    res = await client.get("/states/KS/funfact")
    assert res.status_code == 200
    assert res.json() == {"funfact": "B"}


async def test_random_funfact_not_found(client):
    res = await client.get("/states/KS/funfact")
    assert res.status_code == 404
    assert res.json()["message"] == "No Fun Facts found for Kansas"


# ─── Mutations ───────────────────────────────────────────────────

async def test_create_funfacts(client):
    res = await client.post("/states/ks/funfact", json={"funfacts": ["Fact A", "Fact B"]})
    assert res.status_code == 200
    assert res.json() == {"stateCode": "KS", "funfacts": ["Fact A", "Fact B"]}

    state = (await client.get("/states/KS")).json()
    assert state["funfacts"] == ["Fact A", "Fact B"]


async def test_create_invalid_code_before_body(client):
    res = await client.post("/states/zz/funfact", json={})
    assert res.status_code == 400
    assert res.json()["message"] == "No state matches code zz."


async def test_create_without_body(client):
    res = await client.post("/states/KS/funfact")
    assert res.status_code == 400
    assert res.json()["message"] == "State fun facts value required"


async def test_create_with_non_array(client):
    res = await client.post("/states/KS/funfact", json={"funfacts": "one"})
    assert res.status_code == 400
    assert res.json()["message"] == "State fun facts value must be an array"


async def test_update_funfact(client):
    await client.post("/states/KS/funfact", json={"funfacts": ["A", "B"]})
    res = await client.patch("/states/KS/funfact", json={"index": 1, "funfact": "A2"})
    assert res.status_code == 200
    assert res.json()["funfacts"] == ["A2", "B"]


async def test_update_missing_funfact(client):
    await client.post("/states/KS/funfact", json={"funfacts": ["A"]})
    res = await client.patch("/states/KS/funfact", json={"index": 1})
    assert res.status_code == 400
    assert res.json()["message"] == "State fun fact value required"


async def test_update_without_facts(client):
    res = await client.patch("/states/KS/funfact", json={"index": 1, "funfact": "A"})
    assert res.status_code == 400
    assert res.json()["message"] == "No Fun Facts found for Kansas"


async def test_update_index_out_of_range(client):
    await client.post("/states/KS/funfact", json={"funfacts": ["A"]})
    res = await client.patch("/states/KS/funfact", json={"index": 2, "funfact": "B"})
    assert res.status_code == 400
    assert res.json()["message"] == "No Fun Fact found at that index for Kansas"


async def test_delete_funfact(client):
    await client.post("/states/KS/funfact", json={"funfacts": ["A", "B"]})
    res = await client.request("DELETE", "/states/KS/funfact", json={"index": 2})
    assert res.status_code == 200
    assert res.json() == {"stateCode": "KS", "funfacts": ["A"]}


async def test_delete_missing_index(client):
    res = await client.request("DELETE", "/states/KS/funfact", json={})
    assert res.status_code == 400
    assert res.json()["message"] == "State fun fact index value required"


async def test_delete_index_zero(client):
    await client.post("/states/KS/funfact", json={"funfacts": ["A"]})
    res = await client.request("DELETE", "/states/KS/funfact", json={"index": 0})
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "FUNFACT_INDEX_OUT_OF_RANGE"


async def test_malformed_json_body(client):
    res = await client.post(
        "/states/KS/funfact", content=b"{not json",
        headers={"content-type": "application/json"},
    )
    assert res.status_code == 400
    assert res.json()["message"] == "Request body must be valid JSON"
    assert res.json()["error"]["code"] == "INVALID_PAYLOAD"


async def test_malformed_json_with_unknown_code_reports_code(client):
    res = await client.post(
        "/states/ZZ/funfact", content=b"{bad",
        headers={"content-type": "application/json"},
    )
    assert res.status_code == 400
    assert res.json()["message"] == "No state matches code ZZ."
    assert res.json()["error"]["code"] == "INVALID_STATE_CODE"


async def test_update_accepts_integral_float_index(client):
    await client.post("/states/KS/funfact", json={"funfacts": ["A", "B"]})
    res = await client.patch("/states/KS/funfact", json={"index": 1.0, "funfact": "X"})
    assert res.status_code == 200
    assert res.json()["funfacts"] == ["X", "B"]


async def test_delete_accepts_integral_float_index(client):
    await client.post("/states/KS/funfact", json={"funfacts": ["A", "B"]})
    res = await client.request("DELETE", "/states/KS/funfact", json={"index": 2.0})
    assert res.status_code == 200
    assert res.json()["funfacts"] == ["A"]
