"""
Shared fixtures.

Service tests run twice: once on a fresh in-memory backend and once on a
SQL backend over a throwaway SQLite file. DATABASE_URL is cleared before
the application is imported so the API tests stay in memory.
"""

import os

os.environ["DATABASE_URL"] = ""

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from mediashelf.api.main import create_application
from mediashelf.shared.db import MemoryBackend, SqlBackend, close_db, init_db, session_scope
from mediashelf.shared.models import WorkType
from mediashelf.shared.services import RatingService, UserService, WorkService
from tests.helpers import sqlite_url


@pytest_asyncio.fixture(params=["memory", "sql"])
async def backend(request, tmp_path):
    if request.param == "memory":
        yield MemoryBackend()
        return

    assert await init_db(sqlite_url(tmp_path))
    try:
        async with session_scope() as session:
            yield SqlBackend(session)
    finally:
        await close_db()


@pytest.fixture
def client():
    app = create_application(seed_sample_data=False)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def seeded_client():
    app = create_application(seed_sample_data=True)
    with TestClient(app) as test_client:
        yield test_client


@pytest_asyncio.fixture
async def alice(backend):
    return await UserService(backend).create_user("alice", "alice@x.com", "secret1")


@pytest_asyncio.fixture
async def bob(backend):
    return await UserService(backend).create_user("bob", "bob@x.com", "secret2")


@pytest_asyncio.fixture
async def inception(backend):
    return await WorkService(backend).create_work(
        title="Inception",
        type=WorkType.MOVIE,
        year=2010,
        genres=["Sci-Fi", "Thriller"],
        creator="Christopher Nolan",
    )


@pytest_asyncio.fixture
async def dune(backend):
    return await WorkService(backend).create_work(
        title="Dune",
        type=WorkType.BOOK,
        year=1965,
        genres=["Sci-Fi", "Adventure"],
        creator="Frank Herbert",
    )


@pytest.fixture
def rating_service(backend) -> RatingService:
    return RatingService(backend)

