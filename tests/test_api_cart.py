def test_add_and_merge_cart_items(client):
    first = client.post("/api/cart", json={"userId": 1, "productId": 1, "quantity": 2})
    assert first.status_code == 201
    assert first.json()["product"]["name"] == "Smartphone X Pro"

    second = client.post("/api/cart", json={"userId": 1, "productId": 1})
    assert second.json()["id"] == first.json()["id"]
    assert second.json()["quantity"] == 3

    cart = client.get("/api/cart/1").json()
    assert len(cart) == 1
    assert cart[0]["product"]["id"] == 1


def test_zero_quantity_is_400(client):
    response = client.post("/api/cart", json={"userId": 1, "productId": 1, "quantity": 0})
    assert response.status_code == 400
    assert client.get("/api/cart/1").json() == []


def test_update_and_remove_item(client):
    item_id = client.post("/api/cart", json={"userId": 1, "productId": 2}).json()["id"]

    updated = client.put(f"/api/cart/{item_id}", json={"quantity": 4})
    assert updated.status_code == 200
    assert updated.json()["quantity"] == 4
    assert client.put(f"/api/cart/{item_id}", json={"quantity": 0}).status_code == 400

    assert client.delete(f"/api/cart/{item_id}").json() == {"message": "Item removed from cart"}
    assert client.delete(f"/api/cart/{item_id}").status_code == 404
    assert client.put(f"/api/cart/{item_id}", json={"quantity": 1}).status_code == 404


def test_clear_cart(client):
    client.post("/api/cart", json={"userId": 1, "productId": 1})
    client.post("/api/cart", json={"userId": 1, "productId": 2})
    client.post("/api/cart", json={"userId": 2, "productId": 1})

    response = client.delete("/api/cart/user/1")

    assert response.status_code == 200
    assert client.get("/api/cart/1").json() == []
    assert len(client.get("/api/cart/2").json()) == 1
