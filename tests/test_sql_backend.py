from datetime import timezone

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from mediashelf.api.main import create_application
from mediashelf.config.settings import settings
from mediashelf.shared.core.exceptions import DuplicateResourceError
from mediashelf.shared.db import SqlBackend, close_db, init_db, session_scope
from mediashelf.shared.models import Rating, Shelf, User, Work, WorkType
from tests.helpers import signup, sqlite_url


@pytest_asyncio.fixture
async def database(tmp_path):
    assert await init_db(sqlite_url(tmp_path))
    yield
    await close_db()


# ═══════════════════════════════════════════════════════════════════════════════
# LIFECYCLE
# ═══════════════════════════════════════════════════════════════════════════════


@pytest.mark.asyncio
async def test_init_db_without_url_stays_in_memory():
    assert await init_db("") is False

    with pytest.raises(RuntimeError):
        async with session_scope():
            pass


@pytest.mark.asyncio
async def test_init_db_unreachable_database_falls_back(tmp_path):
    assert await init_db(sqlite_url(tmp_path / "missing" / "dir")) is False


@pytest.mark.asyncio
async def test_session_scope_commits_on_success(database):
    async with session_scope() as session:
        await SqlBackend(session).create(Work, title="Inception", type=WorkType.MOVIE)

    async with session_scope() as session:
        works = await SqlBackend(session).list(Work)

    assert [work.title for work in works] == ["Inception"]
    assert works[0].type is WorkType.MOVIE


@pytest.mark.asyncio
async def test_session_scope_rolls_back_on_error(database):
    with pytest.raises(LookupError):
        async with session_scope() as session:
            await SqlBackend(session).create(Work, title="Inception", type=WorkType.MOVIE)
            raise LookupError("request failed")

    async with session_scope() as session:
        assert await SqlBackend(session).count(Work) == 0


# ═══════════════════════════════════════════════════════════════════════════════
# WRITES
# ═══════════════════════════════════════════════════════════════════════════════


@pytest.mark.asyncio
async def test_duplicate_insert_keeps_earlier_writes(database):
    async with session_scope() as session:
        backend = SqlBackend(session)
        await backend.create(Rating, user_id=1, work_id=2, score=3)

        with pytest.raises(DuplicateResourceError):
            await backend.create(Rating, user_id=1, work_id=2, score=4)

        await backend.create(Rating, user_id=1, work_id=3, score=4)

    async with session_scope() as session:
        ratings = await SqlBackend(session).list(Rating)

    assert [(rating.work_id, rating.score) for rating in ratings] == [(2, 3), (3, 4)]


@pytest.mark.asyncio
async def test_duplicate_update_restores_record(database):
    async with session_scope() as session:
        backend = SqlBackend(session)
        await backend.create(Shelf, user_id=1, name="Favorites")
        shelf = await backend.create(Shelf, user_id=1, name="Later")

        with pytest.raises(DuplicateResourceError):
            await backend.update(shelf, name="Favorites")
        assert shelf.name == "Later"

        await backend.update(shelf, works=[7])

    async with session_scope() as session:
        stored = await SqlBackend(session).get(Shelf, shelf.id)

    assert (stored.name, stored.works) == ("Later", [7])


@pytest.mark.asyncio
async def test_timestamps_load_as_utc(database):
    async with session_scope() as session:
        backend = SqlBackend(session)
        user = await backend.create(User, username="alice", email="alice@x.com", password="secret1")
        rating = await backend.create(Rating, user_id=user.id, work_id=1, score=5)

    assert user.created_at.tzinfo == timezone.utc
    assert rating.rated_at.tzinfo == timezone.utc
    assert rating.rated_at.isoformat().endswith("+00:00")


# ═══════════════════════════════════════════════════════════════════════════════
# API
# ═══════════════════════════════════════════════════════════════════════════════


def test_app_uses_sql_backend_when_database_reachable(tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "DATABASE_URL", sqlite_url(tmp_path))

    with TestClient(create_application(seed_sample_data=True)) as client:
        assert client.get("/health").json()["backend"] == "sql"

        alice = signup(client, "alice")
        duplicate = client.post(
            "/api/auth/signup",
            json={"username": "alice", "email": "other@x.com", "password": "secret1"},
        )
        assert duplicate.status_code == 400

        users = client.get("/api/users").json()["data"]

    # Sample catalog is only seeded in memory
    assert [user["userId"] for user in users] == [alice["userId"]]
