"""
Shelf Repository

Storage operations specific to the Shelf model.
"""

from typing import Optional

from mediashelf.shared.db.backends import StorageBackend
from mediashelf.shared.models.shelf import Shelf
from mediashelf.shared.repositories.base import BaseRepository


class ShelfRepository(BaseRepository[Shelf]):
    """Repository for Shelf storage operations."""

    def __init__(self, backend: StorageBackend) -> None:
        super().__init__(Shelf, backend)

    async def list_for_user(self, user_id: int) -> list[Shelf]:
        """Shelves owned by a user, oldest first."""
        return await self.list(filters={"user_id": user_id})

    async def get_by_name(self, user_id: int, name: str) -> Optional[Shelf]:
        """A user's shelf with this exact name."""
        return await self.find_one(user_id=user_id, name=name)
