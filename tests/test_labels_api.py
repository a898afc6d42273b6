import uuid


def test_label_api_crud_flow(client):
    resp = client.post("/labels", json={"name": "label-1"})
    assert resp.status_code == 201
    label = resp.json()
    assert label["name"] == "label-1"
    label_id = label["id"]

    resp = client.get(f"/labels/{label_id}")
    assert resp.status_code == 200
    assert resp.json() == {"id": label_id, "name": "label-1"}

    resp = client.patch(f"/labels/{label_id}", json={"name": "update-label"})
    assert resp.status_code == 200
    assert resp.json() == {"id": label_id, "name": "update-label"}

    resp = client.delete(f"/labels/{label_id}")
    assert resp.status_code == 204
    assert client.get(f"/labels/{label_id}").status_code == 404
    assert client.delete(f"/labels/{label_id}").status_code == 404


def test_get_all_labels(client):
    names = {"get label-1", "get label-2", "get label-3"}
    created = {client.post("/labels", json={"name": name}).json()["id"] for name in names}

    resp = client.get("/labels")

    assert resp.status_code == 200
    assert {label["id"] for label in resp.json()} == created
    assert {label["name"] for label in resp.json()} == names


def test_label_name_validation(client):
    assert client.post("/labels", json={"name": ""}).status_code == 400
    assert client.post("/labels", json={"name": "a" * 16}).status_code == 400
    assert client.post("/labels", json={}).status_code == 400
    assert client.get("/labels").json() == []


def test_duplicate_label_name_is_rejected(client):
    assert client.post("/labels", json={"name": "home"}).status_code == 201
    work_id = client.post("/labels", json={"name": "work"}).json()["id"]

    assert client.post("/labels", json={"name": "home"}).status_code == 400
    assert client.patch(f"/labels/{work_id}", json={"name": "home"}).status_code == 400
    assert len(client.get("/labels").json()) == 2


def test_update_missing_label(client):
    resp = client.patch(f"/labels/{uuid.uuid4()}", json={"name": "home"})

    assert resp.status_code == 404


def test_deleting_label_detaches_it_from_todos(client):
    label_id = client.post("/labels", json={"name": "home"}).json()["id"]
    todo_id = client.post("/todos", json={"text": "buy milk", "label_ids": [label_id]}).json()["id"]

    assert client.delete(f"/labels/{label_id}").status_code == 204

    assert client.get(f"/todos/{todo_id}").json()["label_ids"] == []
    assert client.get("/todos", params={"label_id": label_id}).json() == []
