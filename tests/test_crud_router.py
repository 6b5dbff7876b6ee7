def test_list_on_empty_store(client):
    response = client.get("/basic")

    assert response.status_code == 200
    assert response.json() == []


def test_create_then_get(client):
    created = client.post("/basic", json={"name": "Test"})

    assert created.status_code == 201
    body = created.json()
    assert body["name"] == "Test"

    fetched = client.get(f"/basic/{body['id']}")
    assert fetched.status_code == 200
    assert fetched.json() == body


def test_get_missing_returns_404(client):
    response = client.get("/basic/999")

    assert response.status_code == 404
    assert response.content == b""


def test_create_with_existing_id_returns_409(client):
    created = client.post("/basic", json={"name": "Test"}).json()

    response = client.post("/basic", json={"id": created["id"], "name": "Again"})

    assert response.status_code == 409
    assert response.content == b""


def test_create_with_blank_name_returns_400_without_payload(client):
    response = client.post("/basic", json={"name": "   "})

    assert response.status_code == 400
    assert response.content == b""


def test_update_with_mismatched_ids_returns_400(client):
    created = client.post("/basic", json={"name": "Test"}).json()

    response = client.put(f"/basic/{created['id']}", json={"id": created["id"] + 1, "name": "Other"})

    assert response.status_code == 400
    assert response.content == b""


def test_update_by_id(client):
    created = client.post("/basic", json={"name": "Test"}).json()

    response = client.put(f"/basic/{created['id']}", json={"id": created["id"], "name": "Updated Test"})

    assert response.status_code == 200
    assert client.get(f"/basic/{created['id']}").json()["name"] == "Updated Test"


def test_delete_by_id_returns_204(client):
    created = client.post("/basic", json={"name": "Test"}).json()

    response = client.delete(f"/basic/{created['id']}")

    assert response.status_code == 204
    assert response.content == b""
    assert client.get("/basic").json() == []


def test_delete_all_returns_204(client):
    client.post("/basic", json={"name": "Test"})

    assert client.delete("/basic").status_code == 204
    assert client.get("/basic").json() == []


def test_batch_add_and_batch_update(client):
    added = client.post("/basic/batch", json=[{"name": "Test 1"}, {"name": "Test 2"}])

    assert added.status_code == 201
    items = added.json()
    assert [item["name"] for item in items] == ["Test 1", "Test 2"]

    updated = client.put("/basic/batch", json=[
        {"id": items[0]["id"], "name": "Updated 1"},
        {"id": items[1]["id"], "name": "Updated 2"},
    ])
    assert updated.status_code == 200
    assert sorted(item["name"] for item in client.get("/basic").json()) == ["Updated 1", "Updated 2"]


def test_batch_update_with_missing_target_returns_404_and_changes_nothing(client):
    created = client.post("/basic", json={"name": "Original"}).json()

    response = client.put("/basic/batch", json=[
        {"id": created["id"], "name": "Changed"},
        {"id": 999, "name": "Ghost"},
    ])

    assert response.status_code == 404
    assert client.get(f"/basic/{created['id']}").json()["name"] == "Original"


def test_malformed_path_id_returns_400_without_payload(client):
    response = client.get("/basic/not-a-number")

    assert response.status_code == 400
    assert response.content == b""


def test_malformed_body_returns_400_without_payload(client):
    response = client.post("/basic", json={"name": ["not", "a", "string"]})

    assert response.status_code == 400
    assert response.content == b""


def test_embedded_resource_round_trip(client):
    created = client.post("/embedded", json={"name": "Parent", "embedded": {"name": "Child"}})

    assert created.status_code == 201
    body = created.json()
    assert body["embedded"] == {"name": "Child"}

    client.put(f"/embedded/{body['id']}", json={"name": "Parent", "embedded": {"name": "New child"}})
    assert client.get(f"/embedded/{body['id']}").json()["embedded"]["name"] == "New child"
