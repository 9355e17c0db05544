from tests.helpers import add_work, signup


def test_signup_and_login(client):
    user = signup(client, "alice", "Alice@X.com")

    assert user["username"] == "alice"
    assert user["email"] == "alice@x.com"
    assert user["ratedWorks"] == 0
    assert "password" not in user

    response = client.post("/api/auth/login", json={"identifier": "alice@x.com", "password": "secret1"})
    assert response.status_code == 200
    assert response.json()["data"]["userId"] == user["userId"]


def test_login_with_wrong_password(client):
    signup(client, "alice")

    response = client.post("/api/auth/login", json={"identifier": "alice", "password": "nope123"})

    assert response.status_code == 401
    assert response.json()["error"]["code"] == "AUTHENTICATION_ERROR"


def test_signup_duplicate_email(client):
    signup(client, "alice", "alice@x.com")

    response = client.post(
        "/api/auth/signup",
        json={"username": "alice2", "email": "alice@x.com", "password": "secret1"},
    )

    assert response.status_code == 400
    assert response.json()["error"]["message"] == "Email already exists"


def test_signup_validation(client):
    response = client.post("/api/auth/signup", json={"username": "al", "email": "bad", "password": "1"})

    assert response.status_code == 400
    body = response.json()
    assert body["error"]["code"] == "VALIDATION_ERROR"
    assert len(body["error"]["details"]["errors"]) == 3


def test_user_crud(client):
    created = client.post(
        "/api/users",
        json={"username": "carol", "email": "carol@x.com", "password": "secret1"},
    )
    assert created.status_code == 201
    user_id = created.json()["data"]["userId"]

    updated = client.put(f"/api/users/{user_id}", json={"profilePictureUrl": "avatars/carol.png"})
    assert updated.status_code == 200
    assert updated.json()["data"]["profilePictureUrl"].endswith("/avatars/carol.png")

    assert client.put(f"/api/users/{user_id}", json={}).status_code == 400

    assert client.delete(f"/api/users/{user_id}").status_code == 204
    assert client.get(f"/api/users/{user_id}").status_code == 404


def test_path_id_must_be_positive(client):
    response = client.get("/api/users/0")

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"


def test_follow_graph(client):
    alice = signup(client, "alice")
    bob = signup(client, "bob")

    response = client.post(f"/api/users/{alice['userId']}/following/{bob['userId']}")
    assert response.status_code == 200

    following = client.get(f"/api/users/{alice['userId']}/following").json()["data"]
    followers = client.get(f"/api/users/{bob['userId']}/followers").json()["data"]
    assert [user["userId"] for user in following] == [bob["userId"]]
    assert [user["userId"] for user in followers] == [alice["userId"]]

    again = client.post(f"/api/users/{alice['userId']}/following/{bob['userId']}")
    assert again.status_code == 400
    assert again.json()["error"]["message"] == "Already following this user"

    response = client.delete(f"/api/users/{alice['userId']}/following/{bob['userId']}")
    assert response.status_code == 200
    assert client.get(f"/api/users/{bob['userId']}/followers").json()["data"] == []


def test_self_follow_rejected_without_changes(client):
    alice = signup(client, "alice")

    response = client.post(f"/api/users/{alice['userId']}/following/{alice['userId']}")

    assert response.status_code == 400
    assert response.json()["error"]["message"] == "Cannot follow yourself"
    assert client.get(f"/api/users/{alice['userId']}/following").json()["data"] == []
    assert client.get(f"/api/users/{alice['userId']}/followers").json()["data"] == []


def test_deleting_user_cleans_follow_lists(client):
    alice = signup(client, "alice")
    bob = signup(client, "bob")
    client.post(f"/api/users/{alice['userId']}/following/{bob['userId']}")
    client.post(f"/api/users/{bob['userId']}/following/{alice['userId']}")

    assert client.delete(f"/api/users/{alice['userId']}").status_code == 204

    assert client.get(f"/api/users/{bob['userId']}/followers").json()["data"] == []
    assert client.get(f"/api/users/{bob['userId']}/following").json()["data"] == []


def test_recommendations(client):
    alice = signup(client, "alice")
    for index in range(12):
        add_work(client, f"Work {index}")

    data = client.get(f"/api/users/{alice['userId']}/recommendations").json()["data"]

    current = {work["workId"] for work in data["current"]}
    profile = {work["workId"] for work in data["profile"]}
    assert len(current) == 5
    assert len(profile) == 5
    assert current.isdisjoint(profile)
    assert isinstance(data["version"], int)
