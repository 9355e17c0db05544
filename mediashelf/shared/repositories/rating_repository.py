"""
Rating Repository

Storage operations specific to the Rating model.
"""

from typing import Optional

from mediashelf.shared.db.backends import StorageBackend
from mediashelf.shared.models.rating import Rating
from mediashelf.shared.repositories.base import BaseRepository


class RatingRepository(BaseRepository[Rating]):
    """Repository for Rating storage operations."""

    def __init__(self, backend: StorageBackend) -> None:
        super().__init__(Rating, backend)

    async def get_for_user_and_work(self, user_id: int, work_id: int) -> Optional[Rating]:
        """The single rating a user gave a work, if any."""
        return await self.find_one(user_id=user_id, work_id=work_id)

    async def list_for_work(self, work_id: int) -> list[Rating]:
        """All ratings of a work, oldest first."""
        return await self.list(filters={"work_id": work_id})

    async def list_for_user(self, user_id: int) -> list[Rating]:
        """All ratings a user has given."""
        return await self.list(filters={"user_id": user_id})

    async def scores_by_work(self, work_ids: Optional[list[int]] = None) -> dict[int, list[int]]:
        """
        Group scores by work id.

        Args:
            work_ids: Restrict to these works, all works when None

        Returns:
            work_id → list of scores (works without ratings are absent)
        """
        filters = {"work_id": list(work_ids)} if work_ids is not None else None
        grouped: dict[int, list[int]] = {}
        for rating in await self.list(filters=filters):
            grouped.setdefault(rating.work_id, []).append(rating.score)
        return grouped
