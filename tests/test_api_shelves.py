from tests.helpers import add_work, signup


def create_shelf(client, user_id, name, description=""):
    return client.post(f"/api/users/{user_id}/shelves", json={"name": name, "description": description})


def test_shelf_lifecycle(client):
    alice = signup(client, "alice")
    inception = add_work(client, "Inception")

    response = create_shelf(client, alice["userId"], "Weekend", "Lazy days")
    assert response.status_code == 201
    shelf = response.json()["data"]
    assert shelf["works"] == []

    for _ in range(2):
        added = client.post(f"/api/shelves/{shelf['shelfId']}/works/{inception['workId']}")
        assert added.status_code == 200
    assert client.get(f"/api/shelves/{shelf['shelfId']}/works").json()["data"] == [inception["workId"]]

    for _ in range(2):
        removed = client.delete(f"/api/shelves/{shelf['shelfId']}/works/{inception['workId']}")
        assert removed.status_code == 200
    assert client.get(f"/api/shelves/{shelf['shelfId']}/works").json()["data"] == []

    renamed = client.put(f"/api/shelves/{shelf['shelfId']}", json={"name": "Sunday"})
    assert renamed.json()["data"]["name"] == "Sunday"
    assert renamed.json()["data"]["description"] == "Lazy days"

    assert [s["shelfId"] for s in client.get(f"/api/users/{alice['userId']}/shelves").json()["data"]] == [
        shelf["shelfId"]
    ]
    assert client.delete(f"/api/shelves/{shelf['shelfId']}").status_code == 204
    assert client.get(f"/api/shelves/{shelf['shelfId']}").status_code == 404


def test_shelf_names_unique_per_owner(client):
    alice = signup(client, "alice")
    bob = signup(client, "bob")

    assert create_shelf(client, alice["userId"], "Favorites").status_code == 201

    duplicate = create_shelf(client, alice["userId"], "Favorites")
    assert duplicate.status_code == 400
    assert duplicate.json()["error"]["message"] == "Shelf name already exists"

    assert create_shelf(client, bob["userId"], "Favorites").status_code == 201
    assert len(client.get("/api/shelves").json()["data"]) == 2


def test_shelf_update_requires_a_field(client):
    alice = signup(client, "alice")
    shelf = create_shelf(client, alice["userId"], "Favorites").json()["data"]

    assert client.put(f"/api/shelves/{shelf['shelfId']}", json={}).status_code == 400


def test_shelf_for_unknown_user(client):
    assert create_shelf(client, 77, "Favorites").status_code == 404
