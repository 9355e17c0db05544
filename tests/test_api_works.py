from tests.helpers import add_work, signup


def test_create_and_fetch_work(client):
    work = add_work(client, "Watchmen", "graphic-novel", year=1986, genres=["Drama", "Mystery"])

    assert work["type"] == "graphic-novel"
    assert work["rating"] == 0
    assert work["ratingCount"] == 0
    assert work["coverUrl"].endswith("/placeholders/graphic-novel-placeholder.jpg")

    fetched = client.get(f"/api/works/{work['workId']}")
    assert fetched.status_code == 200
    assert fetched.json()["data"]["title"] == "Watchmen"


def test_work_validation(client):
    bad_type = client.post("/api/works", json={"title": "X", "type": "podcast"})
    bad_genre = client.post("/api/works", json={"title": "X", "type": "movie", "genres": ["Jazz"]})
    bad_year = client.post("/api/works", json={"title": "X", "type": "movie", "year": 1800})
    no_title = client.post("/api/works", json={"type": "movie"})

    for response in (bad_type, bad_genre, bad_year, no_title):
        assert response.status_code == 400


def test_list_works_filters(client):
    add_work(client, "Inception", "movie", year=2010, genres=["Sci-Fi", "Thriller"])
    add_work(client, "Dune", "book", year=1965, genres=["Sci-Fi", "Adventure"])
    add_work(client, "Heat", "movie", year=1995, genres=["Crime"])

    def titles(**params):
        return [work["title"] for work in client.get("/api/works", params=params).json()["data"]]

    assert titles(type="movie") == ["Inception", "Heat"]
    assert titles(year=1995) == ["Inception", "Heat"]
    assert titles(genres="Adventure,Crime") == ["Dune", "Heat"]
    assert titles(type="movie", genres="Sci-Fi") == ["Inception"]


def test_update_and_delete_work(client):
    alice = signup(client, "alice")
    work = add_work(client, "Inception")
    client.post(f"/api/works/{work['workId']}/ratings", json={"userId": alice["userId"], "score": 4})

    updated = client.put(f"/api/works/{work['workId']}", json={"year": 2010})
    assert updated.status_code == 200
    assert updated.json()["data"]["year"] == 2010
    assert updated.json()["data"]["rating"] == 4.0

    assert client.delete(f"/api/works/{work['workId']}").status_code == 204
    assert client.get(f"/api/works/{work['workId']}").status_code == 404
    assert client.get("/api/ratings").json()["data"] == []
    assert client.get(f"/api/users/{alice['userId']}").json()["data"]["ratedWorks"] == 0


def test_similar_and_popular(client):
    alice = signup(client, "alice")
    inception = add_work(client, "Inception", "movie", genres=["Sci-Fi"])
    dune = add_work(client, "Dune", "book", genres=["Sci-Fi"])
    add_work(client, "Emma", "book", genres=["Romance"])

    similar = client.get(f"/api/works/{inception['workId']}/similar").json()["data"]
    assert [work["workId"] for work in similar] == [dune["workId"]]

    client.post(f"/api/works/{dune['workId']}/ratings", json={"userId": alice["userId"], "score": 5})
    popular = client.get("/api/works/popular").json()["data"]
    assert popular[0]["workId"] == dune["workId"]
    assert len(popular) == 3


def test_unknown_work(client):
    response = client.get("/api/works/42")

    assert response.status_code == 404
    assert response.json()["error"]["message"] == "Work with id '42' not found"
