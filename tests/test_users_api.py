"""Tests for the user and category endpoints."""


def test_register_then_duplicate_is_rejected(client, store):
    first = client.post("/users", json={"email": "a@x.com", "name": "Alice", "status": "Seller"})
    assert first.status_code == 200
    assert first.json()["insertedId"] == "1"

    second = client.post("/users", json={"email": "a@x.com", "name": "Other"})
    assert second.status_code == 400
    assert second.json()["detail"] == "User with email a@x.com already exists."

    matching = [u for u in store.collections["users"] if u["email"] == "a@x.com"]
    assert len(matching) == 1
    assert matching[0]["name"] == "Alice"


def test_register_requires_email(client):
    assert client.post("/users", json={"name": "No Email"}).status_code == 400


def test_get_user_by_email(client, store):
    store.add("users", {"email": "a@x.com", "name": "Alice"})
    response = client.get("/users/a@x.com")
    assert response.status_code == 200
    assert response.json()["name"] == "Alice"

    assert client.get("/users/nobody@x.com").status_code == 404


def test_admin_check(client, store):
    store.add("users", {"email": "admin@x.com", "status": "Admin"})
    store.add("users", {"email": "a@x.com", "status": "Seller"})

    assert client.get("/users/admin/admin@x.com").json() == {"isAdmin": True}
    assert client.get("/users/admin/a@x.com").json() == {"isAdmin": False}
    assert client.get("/users/admin/nobody@x.com").json() == {"isAdmin": False}


def test_list_users_requires_admin(client, store, auth_headers):
    store.add("users", {"email": "a@x.com", "status": "Seller"})

    assert client.get("/users").status_code == 401
    assert client.get("/users", headers=auth_headers("a@x.com")).status_code == 403
    assert client.get("/users", headers=auth_headers("nobody@x.com")).status_code == 403


def test_list_users_filters_newest_first(client, store, admin_headers):
    store.add("users", {"email": "sam@shop.com", "status": "Seller"})
    store.add("users", {"email": "bea@x.com", "status": "Buyer"})
    store.add("users", {"email": "SAMIR@x.com", "status": "Seller"})

    everyone = client.get("/users", headers=admin_headers).json()
    assert [u["_id"] for u in everyone] == ["4", "3", "2", "1"]

    sellers = client.get("/users", params={"status": "Seller", "search": "sam"}, headers=admin_headers).json()
    assert [u["email"] for u in sellers] == ["SAMIR@x.com", "sam@shop.com"]


def test_update_user_merges_fields(client, store, auth_headers):
    store.add("users", {"email": "a@x.com", "name": "Alice"})

    response = client.put("/users/1", json={"mobile": "017", "img": "a.png"}, headers=auth_headers())
    assert response.status_code == 200
    assert response.json() == {"acknowledged": True, "matchedCount": 1, "modifiedCount": 1}
    assert store.find("users", "1") == {
        "_id": "1",
        "email": "a@x.com",
        "name": "Alice",
        "mobile": "017",
        "img": "a.png",
    }

    again = client.put("/users/1", json={"mobile": "017"}, headers=auth_headers())
    assert again.json()["modifiedCount"] == 0


def test_update_user_errors(client, store, auth_headers):
    store.add("users", {"email": "a@x.com"})
    store.add("users", {"email": "b@x.com"})

    assert client.put("/users/9", json={"name": "X"}, headers=auth_headers()).status_code == 404
    assert client.put("/users/zz", json={"name": "X"}, headers=auth_headers()).status_code == 400
    assert client.put("/users/1", json={}, headers=auth_headers()).status_code == 400
    assert client.put("/users/1", json={"email": "b@x.com"}, headers=auth_headers()).status_code == 400
    assert client.put("/users/1", json={"name": "X"}).status_code == 401


def test_set_status_is_admin_only(client, store, admin_headers, auth_headers):
    store.add("users", {"email": "a@x.com", "status": "Buyer"})

    forbidden = client.put("/users/status/2", params={"status": "Seller"}, headers=auth_headers("a@x.com"))
    assert forbidden.status_code == 403

    response = client.put("/users/status/2", params={"status": "Seller"}, headers=admin_headers)
    assert response.status_code == 200
    assert store.find("users", "2")["status"] == "Seller"

    missing = client.put("/users/status/77", params={"status": "Seller"}, headers=admin_headers)
    assert missing.status_code == 404


def test_list_categories(client, store):
    store.add("categories", {"name": "Television"})
    store.add("categories", {"name": "Fridge"})

    response = client.get("/categories")
    assert response.status_code == 200
    assert [c["name"] for c in response.json()] == ["Television", "Fridge"]


def test_update_cannot_change_status(client, store, auth_headers):
    store.add("users", {"email": "a@x.com", "status": "Buyer"})
    headers = auth_headers("a@x.com")

    response = client.put("/users/1", json={"status": "Admin"}, headers=headers)
    assert response.status_code == 403
    assert store.find("users", "1")["status"] == "Buyer"
    assert client.get("/users", headers=headers).status_code == 403


def test_update_rejects_null_email(client, store, auth_headers):
    store.add("users", {"email": "a@x.com", "name": "Alice"})

    response = client.put("/users/1", json={"email": None}, headers=auth_headers())
    assert response.status_code == 400
    assert store.find("users", "1")["email"] == "a@x.com"
