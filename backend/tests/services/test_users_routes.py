"""Users Routes — GET/POST /api/users.

Invariants:
    - Listing returns {_id, username} only, never exercises
    - Creating returns 200 with the stored user and an empty exercise log
    - JSON and url-encoded bodies are both accepted
    - Missing username is accepted and stored as null
"""


async def test_list_users_empty(client):
    res = await client.get("/api/users")
    assert res.status_code == 200
    assert res.json() == []


async def test_create_then_list(client):
    created = await client.post("/api/users", json={"username": "ada"})
    assert created.status_code == 200

    res = await client.get("/api/users")
    users = res.json()
    assert len(users) == 1
    assert users[0]["username"] == "ada"
    assert users[0]["_id"] == created.json()["_id"]
    assert "exercises" not in users[0]


async def test_create_returns_stored_user_with_empty_log(client):
    res = await client.post("/api/users", json={"username": "ada"})
    body = res.json()
    assert body["username"] == "ada"
    assert body["exercises"] == []
    assert len(body["_id"]) == 36


async def test_create_from_form_body(client):
    res = await client.post("/api/users", data={"username": "grace"})
    assert res.status_code == 200
    assert res.json()["username"] == "grace"


async def test_create_without_username_is_accepted(client):
    res = await client.post("/api/users", json={})
    assert res.status_code == 200
    assert res.json()["username"] is None


async def test_create_ignores_unknown_fields(client):
    res = await client.post(
        "/api/users", json={"username": "ada", "exercises": [{"description": "x"}]},
    )
    assert res.json()["exercises"] == []


async def test_create_numeric_username_is_stringified(client):
    res = await client.post("/api/users", json={"username": 42})
    assert res.json()["username"] == "42"


async def test_create_with_malformed_json_returns_400(client):
    res = await client.post(
        "/api/users", content=b"{not json",
        headers={"content-type": "application/json"},
    )
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_create_with_non_object_body_returns_400(client):
    res = await client.post("/api/users", json=["ada"])
    assert res.status_code == 400


async def test_trailing_slash_is_served(client):
    await client.post("/api/users/", json={"username": "ada"})
    res = await client.get("/api/users/")
    assert res.status_code == 200
    assert [u["username"] for u in res.json()] == ["ada"]


async def test_duplicate_usernames_are_allowed(client):
    await client.post("/api/users", json={"username": "ada"})
    await client.post("/api/users", json={"username": "ada"})
    res = await client.get("/api/users")
    assert [u["username"] for u in res.json()] == ["ada", "ada"]
