"""
Request helpers for the API tests.
"""

from pathlib import Path
from typing import Optional

from fastapi.testclient import TestClient


def signup(client: TestClient, username: str, email: Optional[str] = None, password: str = "secret1") -> dict:
    response = client.post(
        "/api/auth/signup",
        json={"username": username, "email": email or f"{username}@x.com", "password": password},
    )
    assert response.status_code == 201, response.text
    return response.json()["data"]


def add_work(client: TestClient, title: str, work_type: str = "movie", **fields) -> dict:
    response = client.post("/api/works", json={"title": title, "type": work_type, **fields})
    assert response.status_code == 201, response.text
    return response.json()["data"]


def sqlite_url(directory: Path) -> str:
    return f"sqlite+aiosqlite:///{directory / 'mediashelf.db'}"
