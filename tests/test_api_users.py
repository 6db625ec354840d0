USER = {"username": "jdoe", "email": "jdoe@example.com", "name": "John Doe", "password": "secret"}


def test_create_and_get_user(client):
    created = client.post("/api/users", json=USER)
    assert created.status_code == 201
    body = created.json()
    assert body["username"] == "jdoe"
    assert "password" not in body
    assert "createdAt" in body

    fetched = client.get(f"/api/users/{body['id']}")
    assert fetched.status_code == 200
    assert fetched.json()["email"] == "jdoe@example.com"


def test_duplicate_user_is_400(client):
    client.post("/api/users", json=USER)
    response = client.post("/api/users", json={**USER, "email": "new@example.com"})
    assert response.status_code == 400
    assert "username" in response.json()["detail"]


def test_update_user(client):
    user_id = client.post("/api/users", json=USER).json()["id"]
    response = client.put(f"/api/users/{user_id}", json={"address": "221B Baker Street"})
    assert response.status_code == 200
    assert response.json()["address"] == "221B Baker Street"
    assert response.json()["name"] == "John Doe"


def test_unknown_user_is_404(client):
    assert client.get("/api/users/999").status_code == 404
    assert client.put("/api/users/999", json={"name": "x"}).status_code == 404


def test_missing_fields_are_400(client):
    response = client.post("/api/users", json={"username": "x"})
    assert response.status_code == 400
    assert response.json()["errors"]
