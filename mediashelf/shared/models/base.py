"""
Base Model Classes

This module provides the foundational classes for all SQLAlchemy models in
Mediashelf: the declarative base, the timestamp mixin and the JSON column type
shared by the document-shaped fields and the UTC timestamp type.

Model Hierarchy:
================
    Base                    ← SQLAlchemy declarative base
       │
       └── TimestampMixin   ← Automatic created_at/updated_at

Both storage backends work with these classes. The SQL backend persists them
through a session; the in-memory backend keeps transient instances and fills
the same Python-side defaults itself.

Usage:
======
    from mediashelf.shared.models.base import Base, TimestampMixin, JSONType

    class Shelf(Base, TimestampMixin):
        __tablename__ = "shelves"
        id: Mapped[int] = mapped_column(Integer, primary_key=True)
        works: Mapped[list[int]] = mapped_column(JSONType, default=list)
"""

from datetime import datetime, timezone
from typing import Any, Optional

from sqlalchemy import JSON, DateTime
from sqlalchemy.types import TypeDecorator
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from mediashelf.shared.utils.clock import utcnow


# JSONB on PostgreSQL, plain JSON everywhere else
JSONType = JSON().with_variant(JSONB(), "postgresql")


class UTCDateTime(TypeDecorator):
    """
    Timestamp column that always loads as an aware UTC datetime.

    PostgreSQL keeps the offset; SQLite stores naive text, so naive values
    read back are tagged as UTC. Writes are always UTC (see utcnow()).
    """

    impl = DateTime
    cache_ok = True

    def process_result_value(self, value: Optional[datetime], dialect: Any) -> Optional[datetime]:
        if value is not None and value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    All models in the application inherit from this class, usually together
    with TimestampMixin.

    Example:
        class Work(Base, TimestampMixin):
            __tablename__ = "works"

            id: Mapped[int] = mapped_column(Integer, primary_key=True)
    """


class TimestampMixin:
    """
    Mixin that adds automatic timestamp tracking to models.

    Provides two timestamp columns:
    - created_at: Set when the record is first inserted
    - updated_at: Refreshed whenever the record is modified

    Defaults are Python-side so the in-memory backend can apply them
    without a database.
    """

    created_at: Mapped[datetime] = mapped_column(
        UTCDateTime(timezone=True),
        default=utcnow,
        nullable=False,
    )

    updated_at: Mapped[datetime] = mapped_column(
        UTCDateTime(timezone=True),
        default=utcnow,
        onupdate=utcnow,
        nullable=False,
    )
