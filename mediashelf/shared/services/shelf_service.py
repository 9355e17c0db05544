"""
Shelf Service

Named, user-owned lists of work ids.

Rules:
======
- Shelf names are trimmed and unique per owner. The store enforces the
  (user_id, name) constraint; a clash surfaces as "Shelf name already exists".
- Adding a work already on the shelf and removing one that is not there
  are both no-ops.
- Work ids are not checked against the catalog.

Usage:
======
    from mediashelf.shared.services.shelf_service import ShelfService

    service = ShelfService(backend)
    shelf = await service.create_shelf(user_id, "Weekend Movies")
    shelf = await service.add_work_to_shelf(shelf.shelf_id, work_id=6)
"""

from typing import Optional

from mediashelf.shared.core.exceptions import (
    DuplicateResourceError,
    ShelfNotFoundError,
    ValidationError,
)
from mediashelf.shared.core.logging import logger
from mediashelf.shared.db.backends import StorageBackend
from mediashelf.shared.models.shelf import Shelf
from mediashelf.shared.repositories.shelf_repository import ShelfRepository
from mediashelf.shared.schemas.shelf import ShelfResponse
from mediashelf.shared.services.formatters import format_shelf
from mediashelf.shared.services.user_service import UserService


SHELF_NAME_MAX_LENGTH = 50
SHELF_DESCRIPTION_MAX_LENGTH = 500
DUPLICATE_NAME_MESSAGE = "Shelf name already exists"


class ShelfService:
    """Service for shelves and their work lists."""

    def __init__(self, backend: StorageBackend) -> None:
        self.repo = ShelfRepository(backend)
        self.users = UserService(backend)

    # ═══════════════════════════════════════════════════════════════════════════
    # HELPERS
    # ═══════════════════════════════════════════════════════════════════════════

    async def _get_shelf_model(self, shelf_id: int) -> Shelf:
        shelf = await self.repo.get(shelf_id)
        if shelf is None:
            raise ShelfNotFoundError(shelf_id)
        return shelf

    @staticmethod
    def _clean_name(name: str) -> str:
        name = name.strip()
        if not name:
            raise ValidationError("Invalid shelf data", errors=["Shelf name is required"])
        if len(name) > SHELF_NAME_MAX_LENGTH:
            raise ValidationError(
                "Invalid shelf data",
                errors=[f"Shelf name cannot exceed {SHELF_NAME_MAX_LENGTH} characters"],
            )
        return name

    @staticmethod
    def _clean_description(description: str) -> str:
        description = description.strip()
        if len(description) > SHELF_DESCRIPTION_MAX_LENGTH:
            raise ValidationError(
                "Invalid shelf data",
                errors=[f"Shelf description cannot exceed {SHELF_DESCRIPTION_MAX_LENGTH} characters"],
            )
        return description

    # ═══════════════════════════════════════════════════════════════════════════
    # CRUD
    # ═══════════════════════════════════════════════════════════════════════════

    async def create_shelf(self, user_id: int, name: str, description: str = "") -> ShelfResponse:
        """
        Create an empty shelf for a user.

        Raises:
            UserNotFoundError: If the owner does not exist
            ValidationError: If the name is empty or too long
            DuplicateResourceError: If the owner already has a shelf with this name
        """
        await self.users.get_user_model(user_id)

        try:
            shelf = await self.repo.create(
                user_id=user_id,
                name=self._clean_name(name),
                description=self._clean_description(description or ""),
                works=[],
            )
        except DuplicateResourceError as e:
            raise DuplicateResourceError(DUPLICATE_NAME_MESSAGE) from e

        logger.info("Shelf created", shelf_id=shelf.id, user_id=user_id, name=shelf.name)
        return format_shelf(shelf)

    async def get_shelf(self, shelf_id: int) -> ShelfResponse:
        return format_shelf(await self._get_shelf_model(shelf_id))

    async def list_shelves(self) -> list[ShelfResponse]:
        return [format_shelf(shelf) for shelf in await self.repo.list()]

    async def list_user_shelves(self, user_id: int) -> list[ShelfResponse]:
        """
        Raises:
            UserNotFoundError: If the user does not exist
        """
        await self.users.get_user_model(user_id)
        return [format_shelf(shelf) for shelf in await self.repo.list_for_user(user_id)]

    async def update_shelf(
        self,
        shelf_id: int,
        name: Optional[str] = None,
        description: Optional[str] = None,
    ) -> ShelfResponse:
        """
        Rename a shelf and/or change its description.

        Raises:
            ShelfNotFoundError: If the shelf does not exist
            ValidationError: If neither field is given or a field is invalid
            DuplicateResourceError: If the new name is taken by another of the owner's shelves
        """
        if name is None and description is None:
            raise ValidationError(
                "Invalid shelf data",
                errors=["At least one field (name or description) must be provided"],
            )

        shelf = await self._get_shelf_model(shelf_id)

        try:
            shelf = await self.repo.update(
                shelf,
                name=self._clean_name(name) if name is not None else None,
                description=self._clean_description(description) if description is not None else None,
            )
        except DuplicateResourceError as e:
            raise DuplicateResourceError(DUPLICATE_NAME_MESSAGE) from e

        logger.info("Shelf updated", shelf_id=shelf.id)
        return format_shelf(shelf)

    async def delete_shelf(self, shelf_id: int) -> None:
        shelf = await self._get_shelf_model(shelf_id)
        await self.repo.delete(shelf)
        logger.info("Shelf deleted", shelf_id=shelf_id, user_id=shelf.user_id)

    # ═══════════════════════════════════════════════════════════════════════════
    # SHELF CONTENTS
    # ═══════════════════════════════════════════════════════════════════════════

    async def get_shelf_works(self, shelf_id: int) -> list[int]:
        """Work ids on the shelf, in the order they were added."""
        shelf = await self._get_shelf_model(shelf_id)
        return list(shelf.works or [])

    async def add_work_to_shelf(self, shelf_id: int, work_id: int) -> ShelfResponse:
        """
        Append a work id. No-op if it is already on the shelf.

        Raises:
            ShelfNotFoundError: If the shelf does not exist
        """
        shelf = await self._get_shelf_model(shelf_id)
        works = list(shelf.works or [])

        if work_id in works:
            return format_shelf(shelf)

        shelf = await self.repo.update(shelf, works=[*works, work_id])
        logger.info("Work added to shelf", shelf_id=shelf.id, work_id=work_id)
        return format_shelf(shelf)

    async def remove_work_from_shelf(self, shelf_id: int, work_id: int) -> ShelfResponse:
        """
        Remove a work id. No-op if it is not on the shelf.

        Raises:
            ShelfNotFoundError: If the shelf does not exist
        """
        shelf = await self._get_shelf_model(shelf_id)
        works = list(shelf.works or [])

        if work_id not in works:
            return format_shelf(shelf)

        shelf = await self.repo.update(shelf, works=[wid for wid in works if wid != work_id])
        logger.info("Work removed from shelf", shelf_id=shelf.id, work_id=work_id)
        return format_shelf(shelf)
