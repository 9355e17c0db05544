def test_health_reports_memory_backend(client):
    response = client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["backend"] == "memory"


def test_ready_and_live(client):
    assert client.get("/ready").json() == {"status": "ready"}
    assert client.get("/live").json() == {"status": "alive"}


def test_request_id_header(client):
    response = client.get("/live", headers={"X-Request-ID": "abc-123"})

    assert response.headers["X-Request-ID"] == "abc-123"


def test_unknown_route_uses_error_envelope(client):
    response = client.get("/api/nope")

    assert response.status_code == 404
    body = response.json()
    assert set(body) == {"success", "error"}
    assert body["success"] is False
    assert body["error"]["code"] == "NOT_FOUND"
    assert body["error"]["message"]
    assert body["error"]["details"] == {}


def test_seeded_app_serves_sample_catalog(seeded_client):
    works = seeded_client.get("/api/works").json()["data"]
    users = seeded_client.get("/api/users").json()["data"]

    assert len(works) == 12
    assert [user["username"] for user in users] == ["spiros", "maria", "john"]
