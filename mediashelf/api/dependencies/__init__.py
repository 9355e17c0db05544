"""
API Dependencies

FastAPI dependencies for injection into route handlers.

Dependencies:
=============
- Storage: get_backend(), Backend
- Services: get_*_service() functions

Usage:
======
    from mediashelf.api.dependencies import Backend

    @router.get("/works/count")
    async def count_works(backend: Backend):
        return await backend.count(Work)
"""

from mediashelf.api.dependencies.backend import get_backend, Backend
from mediashelf.api.dependencies.services import (
    get_auth_service,
    get_user_service,
    get_work_service,
    get_rating_service,
    get_social_service,
    get_shelf_service,
    get_search_service,
    get_recommendation_service,
)

__all__ = [
    # Storage
    "get_backend",
    "Backend",
    # Services
    "get_auth_service",
    "get_user_service",
    "get_work_service",
    "get_rating_service",
    "get_social_service",
    "get_shelf_service",
    "get_search_service",
    "get_recommendation_service",
]
