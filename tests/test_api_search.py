from tests.helpers import add_work, signup


def test_search_everything(client):
    signup(client, "nolanfan")
    add_work(client, "Inception", "movie", creator="Christopher Nolan")
    add_work(client, "Dune", "book", creator="Frank Herbert")

    data = client.get("/api/search", params={"query": "nolan"}).json()["data"]

    assert [work["title"] for work in data["works"]] == ["Inception"]
    assert [user["username"] for user in data["users"]] == ["nolanfan"]


def test_search_item_type_and_filters(client):
    alice = signup(client, "alice")
    inception = add_work(client, "Inception", "movie", year=2010, genres=["Sci-Fi"])
    add_work(client, "Dune", "book", year=1965, genres=["Sci-Fi"])
    add_work(client, "Heat", "movie", year=1995, genres=["Crime"])
    client.post(f"/api/works/{inception['workId']}/ratings", json={"userId": alice["userId"], "score": 4})

    def titles(**params):
        data = client.get("/api/search", params={"itemType": "work", **params}).json()["data"]
        assert data["users"] == []
        return [work["title"] for work in data["works"]]

    # Rated works first, then by title
    assert titles() == ["Inception", "Dune", "Heat"]
    assert titles(workType="movie") == ["Inception", "Heat"]
    assert titles(genre="Sci-Fi", year=2000) == ["Inception"]
    assert titles(minRating=3) == ["Inception"]


def test_search_users_only(client):
    signup(client, "alice")
    add_work(client, "Alice in Wonderland", "book")

    data = client.get("/api/search", params={"query": "alice", "itemType": "user"}).json()["data"]

    assert data["works"] == []
    assert [user["username"] for user in data["users"]] == ["alice"]


def test_search_min_rating_out_of_range(client):
    assert client.get("/api/search", params={"minRating": 6}).status_code == 400


def test_search_item_type_ignores_case(client):
    signup(client, "alice")
    add_work(client, "Alice in Wonderland", "book")

    users_only = client.get("/api/search", params={"query": "alice", "itemType": "User"}).json()["data"]
    works_only = client.get("/api/search", params={"query": "alice", "itemType": " WORK "}).json()["data"]

    assert users_only["works"] == []
    assert [user["username"] for user in users_only["users"]] == ["alice"]
    assert works_only["users"] == []
    assert [work["title"] for work in works_only["works"]] == ["Alice in Wonderland"]


def test_search_user_result_fields(client):
    alice = signup(client, "alice")
    inception = add_work(client, "Inception")
    dune = add_work(client, "Dune", "book")
    for work in (inception, dune):
        client.post(f"/api/works/{work['workId']}/ratings", json={"userId": alice["userId"], "score": 4})

    [user] = client.get("/api/search", params={"query": "alice", "itemType": "user"}).json()["data"]["users"]

    assert user["userId"] == alice["userId"]
    assert user["ratedWorksCount"] == 2
    assert user["createdAt"]
    assert user["updatedAt"]
    assert "password" not in user
