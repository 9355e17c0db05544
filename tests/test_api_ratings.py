from tests.helpers import add_work, signup


def rate(client, work_id, user_id, score):
    return client.post(f"/api/works/{work_id}/ratings", json={"userId": user_id, "score": score})


def test_rate_inception_end_to_end(client):
    alice = signup(client, "alice")
    inception = add_work(client, "Inception", "movie", year=2010, genres=["Sci-Fi"])

    response = rate(client, inception["workId"], alice["userId"], 5)
    assert response.status_code == 201
    rating = response.json()["data"]
    assert rating["score"] == 5

    average = client.get(f"/api/works/{inception['workId']}/ratings/average").json()["data"]
    assert average == {"workId": inception["workId"], "averageRating": 5.0, "totalRatings": 1}

    work = client.get(f"/api/works/{inception['workId']}").json()["data"]
    assert work["rating"] == 5.0
    assert work["ratingCount"] == 1

    rated = client.get(f"/api/users/{alice['userId']}/ratings").json()["data"]
    assert rated[str(inception["workId"])]["score"] == 5
    assert client.get(f"/api/users/{alice['userId']}").json()["data"]["ratedWorks"] == 1


def test_rating_twice_updates_in_place(client):
    alice = signup(client, "alice")
    work = add_work(client, "Inception")

    first = rate(client, work["workId"], alice["userId"], 2).json()["data"]
    second = rate(client, work["workId"], alice["userId"], 4).json()["data"]

    assert first["ratingId"] == second["ratingId"]
    ratings = client.get(f"/api/works/{work['workId']}/ratings").json()["data"]
    assert [rating["score"] for rating in ratings] == [4]


def test_average_of_three(client):
    work = add_work(client, "Inception")
    for name, score in (("alice", 4), ("bob", 5), ("carol", 3)):
        user = signup(client, name)
        assert rate(client, work["workId"], user["userId"], score).status_code == 201

    average = client.get(f"/api/works/{work['workId']}/ratings/average").json()["data"]

    assert average["averageRating"] == 4.0
    assert average["totalRatings"] == 3


def test_invalid_scores_rejected(client):
    alice = signup(client, "alice")
    work = add_work(client, "Inception")

    for score in (6, 0, 4.5, "4"):
        response = rate(client, work["workId"], alice["userId"], score)
        assert response.status_code == 400, score
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"

    assert client.get(f"/api/works/{work['workId']}/ratings").json()["data"] == []


def test_rating_unknown_work_or_user(client):
    alice = signup(client, "alice")
    work = add_work(client, "Inception")

    assert rate(client, 999, alice["userId"], 3).status_code == 404
    assert rate(client, work["workId"], 999, 3).status_code == 404


def test_user_scoped_rating_endpoint(client):
    alice = signup(client, "alice")
    work = add_work(client, "Dune", "book")

    response = client.post(f"/api/users/{alice['userId']}/ratings", json={"workId": work["workId"], "score": 3})

    assert response.status_code == 201
    assert response.json()["data"]["workId"] == work["workId"]


def test_rating_writes_bump_recommendation_version(client):
    alice = signup(client, "alice")
    work = add_work(client, "Inception")

    def version():
        return client.get(f"/api/users/{alice['userId']}/recommendations").json()["data"]["version"]

    before = version()
    rating = rate(client, work["workId"], alice["userId"], 3).json()["data"]
    after_create = version()
    client.put(f"/api/ratings/{rating['ratingId']}", json={"score": 4})
    after_update = version()

    assert before < after_create < after_update


def test_rating_by_id_crud(client):
    alice = signup(client, "alice")
    work = add_work(client, "Inception")
    rating = rate(client, work["workId"], alice["userId"], 3).json()["data"]

    fetched = client.get(f"/api/ratings/{rating['ratingId']}").json()["data"]
    assert fetched["score"] == 3

    updated = client.put(f"/api/ratings/{rating['ratingId']}", json={"score": 1})
    assert updated.json()["data"]["score"] == 1
    assert client.get(f"/api/users/{alice['userId']}/ratings").json()["data"][str(work["workId"])]["score"] == 1

    assert len(client.get("/api/ratings").json()["data"]) == 1
    assert client.delete(f"/api/ratings/{rating['ratingId']}").status_code == 204
    assert client.get(f"/api/ratings/{rating['ratingId']}").status_code == 404
    assert client.get(f"/api/users/{alice['userId']}/ratings").json()["data"] == {}
