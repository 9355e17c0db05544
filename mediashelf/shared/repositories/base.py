"""
Base Repository

This module provides a generic base repository with common CRUD operations.
All entity-specific repositories inherit from this class.

Repositories sit on top of a StorageBackend, so the same repository code
runs against the SQL database or the in-memory store.

What This Provides:
===================
- get(id)        → Fetch single record by id
- get_by_ids()   → Fetch multiple records by ids
- list()         → List records with filtering and ordering
- find_one()     → First record matching equality filters
- count()        → Count records with filtering
- exists()       → Check if record exists
- create()       → Create new record
- update()       → Update existing record
- delete()       → Delete record

Generic Type Pattern:
=====================
    class WorkRepository(BaseRepository[Work]):
        pass

    repo = WorkRepository(backend)
    work = await repo.get(6)  # Returns Work, not Any
"""

from typing import Any, Generic, Optional, Type, TypeVar

from mediashelf.shared.db.backends import StorageBackend
from mediashelf.shared.models.base import Base


# TypeVar bound to Base ensures we only work with mapped models
ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """
    Generic base repository providing common CRUD operations.

    Type Parameter:
        ModelType: The SQLAlchemy model class this repository manages

    Attributes:
        model: The SQLAlchemy model class
        backend: The storage backend for the current request

    Example:
        class ShelfRepository(BaseRepository[Shelf]):
            def __init__(self, backend: StorageBackend):
                super().__init__(Shelf, backend)
    """

    def __init__(self, model: Type[ModelType], backend: StorageBackend) -> None:
        self.model = model
        self.backend = backend

    # ═══════════════════════════════════════════════════════════════════════════
    # READ OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def get(self, record_id: int) -> Optional[ModelType]:
        """
        Get a single record by its id.

        Args:
            record_id: The id of the record to fetch

        Returns:
            The model instance if found, None otherwise
        """
        return await self.backend.get(self.model, record_id)

    async def get_by_ids(self, ids: list[int]) -> list[ModelType]:
        """
        Get multiple records by their ids, in the order the ids were given.

        Ids that do not resolve are skipped.

        Args:
            ids: List of ids to fetch

        Returns:
            List of model instances (may be fewer than requested)
        """
        if not ids:
            return []

        records = await self.backend.list(self.model, filters={"id": list(ids)})
        by_id = {record.id: record for record in records}
        return [by_id[record_id] for record_id in ids if record_id in by_id]

    async def list(
        self,
        *,
        filters: Optional[dict[str, Any]] = None,
        order_by: Optional[str] = None,
        order_desc: bool = False,
        offset: int = 0,
        limit: Optional[int] = None,
    ) -> list[ModelType]:
        """
        List records with optional filtering and ordering.

        Args:
            filters: Dict of field=value (or field=[values]) conditions
            order_by: Field name to order results by, id when omitted
            order_desc: If True, order descending
            offset: Number of records to skip
            limit: Maximum records to return, unbounded when None

        Returns:
            List of model instances

        Example:
            ratings = await repo.list(filters={"work_id": 6}, order_by="rated_at", order_desc=True)
        """
        return await self.backend.list(
            self.model,
            filters=filters,
            order_by=order_by,
            order_desc=order_desc,
            offset=offset,
            limit=limit,
        )

    async def find_one(self, **filters: Any) -> Optional[ModelType]:
        """
        Get the first record matching all equality filters.

        Example:
            rating = await repo.find_one(user_id=3, work_id=6)
        """
        records = await self.backend.list(self.model, filters=filters, limit=1)
        return records[0] if records else None

    async def count(self, filters: Optional[dict[str, Any]] = None) -> int:
        """
        Count records with optional filtering.

        Args:
            filters: Dict of field=value conditions

        Returns:
            Number of matching records
        """
        return await self.backend.count(self.model, filters)

    async def exists(self, record_id: int) -> bool:
        """
        Check if a record exists.

        Args:
            record_id: The id to check

        Returns:
            True if record exists, False otherwise
        """
        return await self.backend.get(self.model, record_id) is not None

    # ═══════════════════════════════════════════════════════════════════════════
    # WRITE OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def create(self, **kwargs: Any) -> ModelType:
        """
        Create a new record.

        Args:
            **kwargs: Field values for the new record

        Returns:
            The created model instance with its generated id

        Raises:
            DuplicateResourceError: If a uniqueness rule is violated
        """
        return await self.backend.create(self.model, **kwargs)

    async def update(self, record: ModelType, **kwargs: Any) -> ModelType:
        """
        Update a loaded record.

        Unlike create(), None values are skipped so callers can pass a
        partial payload straight through.

        Args:
            record: Instance returned by get()/list()
            **kwargs: Fields to update

        Returns:
            Updated model instance

        Raises:
            DuplicateResourceError: If a uniqueness rule is violated
        """
        changes = {field: value for field, value in kwargs.items() if value is not None}
        if not changes:
            return record
        return await self.backend.update(record, **changes)

    async def delete(self, record: ModelType) -> None:
        """
        Delete a loaded record.

        Args:
            record: Instance to remove
        """
        await self.backend.delete(record)
