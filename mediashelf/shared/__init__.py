"""
Shared Module

Domain code behind the API:
- Models: SQLAlchemy models used by both storage backends
- Repositories: Data access over a StorageBackend
- Services: Business logic (ratings, follows, shelves, search)
- Schemas: Pydantic request/response models
- Core: Logging, exceptions

Package Structure:
==================
    shared/
    ├── core/           ← Logging, exceptions
    ├── db/             ← Engine, sessions, storage backends, sample data
    ├── models/         ← SQLAlchemy models
    ├── repositories/   ← Data access layer
    ├── services/       ← Business logic
    ├── schemas/        ← Pydantic schemas
    └── utils/          ← Clock, image URLs, rating math

Usage:
======
    from mediashelf.shared.models import User, Work
    from mediashelf.shared.services import RatingService
    from mediashelf.shared.schemas import WorkCreate, RatingResponse
    from mediashelf.shared.core import logger, MediashelfException
"""
