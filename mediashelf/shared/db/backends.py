"""
Storage Backends

One storage interface, two implementations. Repositories and services talk
to a StorageBackend and never ask which one they got.

Backends:
=========
┌─────────────────────────────────────────────────────────────────────────────┐
│                        STORAGE INTERFACE                                    │
├─────────────────────────────────────────────────────────────────────────────┤
│                                                                             │
│   StorageBackend (abstract)                                                 │
│       get(model, id)        → record | None                                 │
│       list(model, filters)  → [record, ...]                                 │
│       count(model, filters) → int                                           │
│       create(model, **f)    → record with generated id                      │
│       update(record, **f)   → record                                        │
│       delete(record)        → None                                          │
│          │                                                                  │
│     ┌────┴───────────────────────┐                                          │
│     ▼                            ▼                                          │
│   SqlBackend(session)          MemoryBackend()                              │
│   - AsyncSession per request   - dict per model, keyed by id                │
│   - SAVEPOINT per write        - own id sequence per model                  │
│   - IntegrityError →           - checks unique columns and                  │
│     DuplicateResourceError       UniqueConstraints itself                   │
│                                                                             │
└─────────────────────────────────────────────────────────────────────────────┘

Both return instances of the same SQLAlchemy model classes. The memory
backend keeps transient instances and applies the columns' Python-side
defaults (ids, timestamps, empty JSON containers) on its own.

Filters:
========
    filters={"user_id": 3}               → user_id == 3
    filters={"id": [1, 2, 5]}            → id IN (1, 2, 5)

JSON columns are never filtered on, and callers always assign new containers
to them instead of mutating the stored ones in place.
"""

from abc import ABC, abstractmethod
from functools import lru_cache
from itertools import count as id_sequence
from typing import Any, Iterator, Optional, Type, TypeVar

from sqlalchemy import UniqueConstraint, inspect as sa_inspect, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.functions import count as sql_count

from mediashelf.shared.core.exceptions import DuplicateResourceError
from mediashelf.shared.core.logging import get_logger
from mediashelf.shared.models.base import Base


ModelType = TypeVar("ModelType", bound=Base)

storage_logger = get_logger("storage")

MULTI_VALUE_TYPES = (list, tuple, set, frozenset)


class StorageBackend(ABC):
    """
    Abstract storage interface shared by the SQL and in-memory backends.

    Attributes:
        name: Short backend identifier used in logs and health output
    """

    name: str = "abstract"

    @abstractmethod
    async def get(self, model: Type[ModelType], record_id: int) -> Optional[ModelType]:
        """Fetch one record by primary key, or None."""

    @abstractmethod
    async def list(
        self,
        model: Type[ModelType],
        *,
        filters: Optional[dict[str, Any]] = None,
        order_by: Optional[str] = None,
        order_desc: bool = False,
        offset: int = 0,
        limit: Optional[int] = None,
    ) -> list[ModelType]:
        """List records matching equality (or membership) filters."""

    @abstractmethod
    async def count(self, model: Type[ModelType], filters: Optional[dict[str, Any]] = None) -> int:
        """Count records matching the filters."""

    @abstractmethod
    async def create(self, model: Type[ModelType], **fields: Any) -> ModelType:
        """
        Insert a new record and return it with its generated id.

        Raises:
            DuplicateResourceError: If a unique column or constraint is violated
        """

    @abstractmethod
    async def update(self, record: ModelType, **fields: Any) -> ModelType:
        """
        Apply field changes to an existing record.

        Raises:
            DuplicateResourceError: If a unique column or constraint is violated
        """

    @abstractmethod
    async def delete(self, record: ModelType) -> None:
        """Remove a record."""


# ═══════════════════════════════════════════════════════════════════════════════
# SQL BACKEND
# ═══════════════════════════════════════════════════════════════════════════════


class SqlBackend(StorageBackend):
    """
    Storage backend over an async SQLAlchemy session.

    Methods flush but never commit; session_scope() commits once the
    request finishes. Each write runs in a SAVEPOINT, so a unique violation
    undoes only that write and the session stays usable.
    """

    name = "sql"

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _apply_filters(self, query: Any, model: Type[ModelType], filters: Optional[dict[str, Any]]) -> Any:
        if not filters:
            return query

        for field, value in filters.items():
            column = getattr(model, field)
            if isinstance(value, MULTI_VALUE_TYPES):
                query = query.where(column.in_(list(value)))
            else:
                query = query.where(column == value)
        return query

    @staticmethod
    def _duplicate(model: Type[ModelType]) -> DuplicateResourceError:
        storage_logger.info("Unique constraint violated", model=model.__name__)
        return DuplicateResourceError(f"{model.__name__} already exists")

    async def get(self, model: Type[ModelType], record_id: int) -> Optional[ModelType]:
        return await self.session.get(model, record_id)

    async def list(
        self,
        model: Type[ModelType],
        *,
        filters: Optional[dict[str, Any]] = None,
        order_by: Optional[str] = None,
        order_desc: bool = False,
        offset: int = 0,
        limit: Optional[int] = None,
    ) -> list[ModelType]:
        query = self._apply_filters(select(model), model, filters)

        if order_by:
            order_field = getattr(model, order_by)
            query = query.order_by(order_field.desc() if order_desc else order_field.asc())
        else:
            query = query.order_by(model.id)

        if offset:
            query = query.offset(offset)
        if limit is not None:
            query = query.limit(limit)

        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def count(self, model: Type[ModelType], filters: Optional[dict[str, Any]] = None) -> int:
        query = self._apply_filters(select(sql_count()).select_from(model), model, filters)
        result = await self.session.execute(query)
        return result.scalar() or 0

    async def create(self, model: Type[ModelType], **fields: Any) -> ModelType:
        instance = model(**fields)
        try:
            # Leaving the savepoint flushes; a failed insert is expunged
            async with self.session.begin_nested():
                self.session.add(instance)
        except IntegrityError as e:
            raise self._duplicate(model) from e

        await self.session.refresh(instance)
        return instance

    async def update(self, record: ModelType, **fields: Any) -> ModelType:
        try:
            async with self.session.begin_nested():
                for field, value in fields.items():
                    setattr(record, field, value)
        except IntegrityError as e:
            # Savepoint rollback expired the record, reload the stored values
            await self.session.refresh(record)
            raise self._duplicate(type(record)) from e

        await self.session.refresh(record)
        return record

    async def delete(self, record: ModelType) -> None:
        await self.session.delete(record)
        await self.session.flush()


# ═══════════════════════════════════════════════════════════════════════════════
# IN-MEMORY BACKEND
# ═══════════════════════════════════════════════════════════════════════════════


@lru_cache(maxsize=None)
def _unique_keys(model: Type[Base]) -> tuple[tuple[str, ...], ...]:
    """Column-name tuples that must be unique for a model, read from its table."""
    table = model.__table__
    keys = [(column.key,) for column in table.columns if column.unique and not column.primary_key]
    for constraint in table.constraints:
        if isinstance(constraint, UniqueConstraint):
            keys.append(tuple(column.key for column in constraint.columns))
    return tuple(keys)


def _sort_key(value: Any) -> tuple[bool, Any]:
    # Missing values sort last in ascending order
    return (value is None, value if value is not None else 0)


class MemoryBackend(StorageBackend):
    """
    Process-local storage backend.

    One instance is created per application and shared by every request.
    Each model gets its own collection and monotonic id sequence. Writes
    are applied immediately and cannot be rolled back.

    Example:
        backend = MemoryBackend()
        work = await backend.create(Work, title="Inception", type=WorkType.MOVIE)
        work.id  # 1
    """

    name = "memory"

    def __init__(self) -> None:
        self._collections: dict[type, dict[int, Base]] = {}
        self._sequences: dict[type, Iterator[int]] = {}

    def _collection(self, model: Type[ModelType]) -> dict[int, ModelType]:
        return self._collections.setdefault(model, {})  # type: ignore[return-value]

    def _next_id(self, model: Type[ModelType]) -> int:
        sequence = self._sequences.setdefault(model, id_sequence(1))
        collection = self._collection(model)
        record_id = next(sequence)
        # Skip ids taken by records inserted with an explicit id
        while record_id in collection:
            record_id = next(sequence)
        return record_id

    @staticmethod
    def _matches(record: Base, filters: Optional[dict[str, Any]]) -> bool:
        if not filters:
            return True
        for field, value in filters.items():
            current = getattr(record, field)
            if isinstance(value, MULTI_VALUE_TYPES):
                if current not in value:
                    return False
            elif current != value:
                return False
        return True

    @staticmethod
    def _apply_defaults(instance: Base, *, on_update: bool = False, explicit: frozenset = frozenset()) -> None:
        """Fill Python-side column defaults (or onupdate values) the way a flush would."""
        mapper = sa_inspect(type(instance))
        for attr in mapper.column_attrs:
            column = attr.columns[0]
            if column.primary_key:
                continue

            generator = column.onupdate if on_update else column.default
            if generator is None or attr.key in explicit:
                continue
            if not on_update and getattr(instance, attr.key) is not None:
                continue

            if generator.is_callable:
                value = generator.arg(None)
            elif generator.is_scalar:
                value = generator.arg
            else:
                continue
            setattr(instance, attr.key, value)

    def _check_unique(self, model: Type[ModelType], values: dict[str, Any], exclude_id: Optional[int]) -> None:
        for key in _unique_keys(model):
            candidate = tuple(values.get(field) for field in key)
            # NULLs never collide, same as in SQL
            if any(part is None for part in candidate):
                continue
            for record_id, record in self._collection(model).items():
                if record_id == exclude_id:
                    continue
                if tuple(getattr(record, field) for field in key) == candidate:
                    storage_logger.info(
                        "Unique constraint violated",
                        model=model.__name__,
                        fields=list(key),
                    )
                    raise DuplicateResourceError(
                        f"{model.__name__} already exists",
                        details={"fields": list(key)},
                    )

    async def get(self, model: Type[ModelType], record_id: int) -> Optional[ModelType]:
        return self._collection(model).get(record_id)

    async def list(
        self,
        model: Type[ModelType],
        *,
        filters: Optional[dict[str, Any]] = None,
        order_by: Optional[str] = None,
        order_desc: bool = False,
        offset: int = 0,
        limit: Optional[int] = None,
    ) -> list[ModelType]:
        records = [record for record in self._collection(model).values() if self._matches(record, filters)]

        if order_by:
            records.sort(key=lambda record: _sort_key(getattr(record, order_by)), reverse=order_desc)
        else:
            records.sort(key=lambda record: record.id)

        records = records[offset:]
        if limit is not None:
            records = records[:limit]
        return records

    async def count(self, model: Type[ModelType], filters: Optional[dict[str, Any]] = None) -> int:
        return sum(1 for record in self._collection(model).values() if self._matches(record, filters))

    async def create(self, model: Type[ModelType], **fields: Any) -> ModelType:
        instance = model(**fields)
        self._apply_defaults(instance)

        values = {attr.key: getattr(instance, attr.key) for attr in sa_inspect(model).column_attrs}
        self._check_unique(model, values, exclude_id=None)

        if instance.id is None:
            instance.id = self._next_id(model)

        self._collection(model)[instance.id] = instance
        storage_logger.debug("Record inserted", model=model.__name__, record_id=instance.id)
        return instance

    async def update(self, record: ModelType, **fields: Any) -> ModelType:
        model = type(record)
        values = {attr.key: getattr(record, attr.key) for attr in sa_inspect(model).column_attrs}
        values.update(fields)
        self._check_unique(model, values, exclude_id=record.id)

        for field, value in fields.items():
            setattr(record, field, value)
        self._apply_defaults(record, on_update=True, explicit=frozenset(fields))

        storage_logger.debug("Record updated", model=model.__name__, record_id=record.id)
        return record

    async def delete(self, record: ModelType) -> None:
        self._collection(type(record)).pop(record.id, None)
        storage_logger.debug("Record deleted", model=type(record).__name__, record_id=record.id)
