"""Book Routes — verifies the /book HTTP surface end to end over SQLite.

Invariants:
    - GET /book lists records in storage order; empty storage → []
    - GET /book/{id} returns the record or 404 with the not-found message
    - POST /book returns 200 with an assigned id; a client id is ignored
    - PUT /book overwrites name/description/rating; id preserved
    - DELETE /book/{id} returns 200 with empty body; unknown id → 404
"""


def _error(res) -> dict:
    return res.json()["error"]


# ─── GET /book ───────────────────────────────────────────────────

async def test_list_empty_storage_returns_empty_list(client):
    res = await client.get("/book")
    assert res.status_code == 200
    assert res.json() == []


async def test_list_returns_records_in_storage_order(client, seed_books):
    res = await client.get("/book")
    assert res.status_code == 200
    assert res.json() == [
        {"id": 1, "name": "A", "description": None, "rating": 5},
        {"id": 2, "name": "B", "description": None, "rating": 5},
    ]


# ─── GET /book/{id} ──────────────────────────────────────────────

async def test_get_known_id_returns_record(client, seed_books):
    res = await client.get("/book/1")
    assert res.status_code == 200
    assert res.json() == {"id": 1, "name": "A", "description": None, "rating": 5}


async def test_get_unknown_id_returns_404(client, seed_books):
    res = await client.get("/book/99")
    assert res.status_code == 404
    assert _error(res)["code"] == "BOOK_NOT_FOUND"
    assert _error(res)["message"] == "Not found book record with id = 99"


# ─── POST /book ──────────────────────────────────────────────────

async def test_create_returns_record_with_assigned_id(client):
    res = await client.post("/book", json={
        "name": "Introduction to Java", "description": "Java core", "rating": 5,
    })
    assert res.status_code == 200
    assert res.json() == {
        "id": 1, "name": "Introduction to Java",
        "description": "Java core", "rating": 5,
    }

    listed = await client.get("/book")
    assert [b["name"] for b in listed.json()] == ["Introduction to Java"]


async def test_create_ignores_client_supplied_id(client, seed_books):
    res = await client.post("/book", json={"id": 1, "name": "C", "rating": 1})
    assert res.status_code == 200
    assert res.json()["id"] == 3

    original = await client.get("/book/1")
    assert original.json()["name"] == "A"


async def test_create_defaults_optional_fields(client):
    res = await client.post("/book", json={"name": "Only a name"})
    assert res.status_code == 200
    assert res.json()["description"] is None
    assert res.json()["rating"] == 0


async def test_create_with_empty_name_returns_400(client):
    res = await client.post("/book", json={"name": "", "rating": 1})
    assert res.status_code == 400
    assert _error(res)["code"] == "VALIDATION_ERROR"
    assert _error(res)["details"][0]["field"] == "body.name"

    listed = await client.get("/book")
    assert listed.json() == []


async def test_create_without_name_returns_400(client):
    res = await client.post("/book", json={"description": "no name"})
    assert res.status_code == 400
    assert _error(res)["category"] == "validation"


# ─── PUT /book ───────────────────────────────────────────────────

async def test_update_overwrites_fields_and_preserves_id(client, seed_books):
    res = await client.put("/book", json={
        "id": 1, "name": "A2", "description": "d", "rating": 4,
    })
    assert res.status_code == 200
    assert res.json() == {"id": 1, "name": "A2", "description": "d", "rating": 4}

    stored = await client.get("/book/1")
    assert stored.json() == {"id": 1, "name": "A2", "description": "d", "rating": 4}


async def test_update_unknown_id_returns_404_and_leaves_storage(client, seed_books):
    before = (await client.get("/book")).json()

    res = await client.put("/book", json={"id": 9, "name": "X", "rating": 1})
    assert res.status_code == 404
    assert _error(res)["message"] == "Not found book record with id = 9"

    assert (await client.get("/book")).json() == before


async def test_update_without_id_returns_400_bad_argument(client, seed_books):
    res = await client.put("/book", json={"name": "X", "rating": 1})
    assert res.status_code == 400
    assert _error(res)["code"] == "BAD_ARGUMENT"


# ─── PUT /book/{id} ──────────────────────────────────────────────

async def test_update_by_path_overwrites_record(client, seed_books):
    res = await client.put("/book/2", json={"name": "B2", "rating": 2})
    assert res.status_code == 200
    assert res.json() == {"id": 2, "name": "B2", "description": None, "rating": 2}


async def test_update_by_path_with_mismatched_id_returns_400(client, seed_books):
    res = await client.put("/book/2", json={"id": 1, "name": "B2", "rating": 2})
    assert res.status_code == 400
    assert _error(res)["code"] == "BAD_ARGUMENT"
    assert _error(res)["message"] == "Book id 1 does not match path id 2"

    untouched = await client.get("/book/1")
    assert untouched.json()["name"] == "A"


# ─── DELETE /book/{id} ───────────────────────────────────────────

async def test_delete_known_id_returns_200_with_empty_body(client, seed_books):
    res = await client.delete("/book/2")
    assert res.status_code == 200
    assert res.content == b""

    remaining = await client.get("/book")
    assert [b["id"] for b in remaining.json()] == [1]


async def test_delete_unknown_id_returns_404_and_leaves_storage(client, seed_books):
    res = await client.delete("/book/5")
    assert res.status_code == 404
    assert _error(res)["message"] == "Not found book with id = 5"

    remaining = await client.get("/book")
    assert [b["id"] for b in remaining.json()] == [1, 2]


# ─── scenario ────────────────────────────────────────────────────

async def test_list_update_delete_scenario(client, seed_books):
    listed = await client.get("/book")
    assert [(b["id"], b["name"]) for b in listed.json()] == [(1, "A"), (2, "B")]

    await client.put("/book", json={
        "id": 1, "name": "A2", "description": "d", "rating": 4,
    })
    assert (await client.get("/book/1")).json() == {
        "id": 1, "name": "A2", "description": "d", "rating": 4,
    }

    assert (await client.delete("/book/2")).status_code == 200
    assert [b["id"] for b in (await client.get("/book")).json()] == [1]

    again = await client.delete("/book/2")
    assert again.status_code == 404
