def test_create_user(client):
    response = client.post("/v1/users", json={"name": "alice"})
    assert response.status_code == 200
    assert response.headers["content-type"] == "application/json"

    body = response.json()
    assert body["name"] == "alice"
    assert len(body["api_key"]) == 64
    assert set(body) == {"id", "created_at", "updated_at", "name", "api_key"}


def test_create_user_ids_and_keys_are_unique(make_user):
    first = make_user("alice")
    second = make_user("alice")
    assert first["id"] != second["id"]
    assert first["api_key"] != second["api_key"]


def test_create_user_allows_empty_name(make_user):
    assert make_user("")["name"] == ""


def test_create_user_undecodable_body_is_500(client):
    response = client.post(
        "/v1/users", content="not json", headers={"Content-Type": "application/json"}
    )
    assert response.status_code == 500
    assert response.json() == {"error": "Could not decode parameters"}


def test_create_user_without_name_uses_empty_name(client):
    response = client.post("/v1/users", json={})
    assert response.status_code == 200
    assert response.json()["name"] == ""
