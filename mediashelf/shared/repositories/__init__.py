"""
Repository Layer

Repositories wrap a StorageBackend with entity-specific queries. Services
construct them per request from the backend the API layer resolved.

Usage:
======
    from mediashelf.shared.repositories import RatingRepository, UserRepository

    async def rate(backend: StorageBackend, user_id: int, work_id: int, score: int):
        ratings = RatingRepository(backend)
        existing = await ratings.get_for_user_and_work(user_id, work_id)
        if existing:
            return await ratings.update(existing, score=score)
        return await ratings.create(user_id=user_id, work_id=work_id, score=score)
"""

from mediashelf.shared.repositories.base import BaseRepository
from mediashelf.shared.repositories.user_repository import UserRepository
from mediashelf.shared.repositories.work_repository import WorkRepository
from mediashelf.shared.repositories.rating_repository import RatingRepository
from mediashelf.shared.repositories.shelf_repository import ShelfRepository

__all__ = [
    # Base class
    "BaseRepository",
    # Entity-specific repositories
    "UserRepository",
    "WorkRepository",
    "RatingRepository",
    "ShelfRepository",
]
