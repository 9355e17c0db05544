"""
Mediashelf SQLAlchemy Models

This package contains all models for the Mediashelf application. The same
classes back both storage backends.

Models Overview:
================
- Base: Declarative base, timestamp mixin and JSON column type
- User: Registered user with rated_works index and follow lists
- Work: Catalog item (movie, series, music, book, graphic novel)
- Rating: One score per (user, work)
- Shelf: Named, user-owned list of work ids

Usage:
======
    from mediashelf.shared.models import User, Work, Rating, Shelf
"""

from mediashelf.shared.models.base import Base, TimestampMixin, JSONType, UTCDateTime
from mediashelf.shared.models.enums import WorkType, SearchItemType, GENRES
from mediashelf.shared.models.user import User
from mediashelf.shared.models.work import Work
from mediashelf.shared.models.rating import Rating
from mediashelf.shared.models.shelf import Shelf

__all__ = [
    # Base classes and mixins
    "Base",
    "TimestampMixin",
    "JSONType",
    "UTCDateTime",
    # Enums
    "WorkType",
    "SearchItemType",
    "GENRES",
    # Models
    "User",
    "Work",
    "Rating",
    "Shelf",
]
