"""
Service Dependencies

FastAPI dependencies for service injection.

Services are created per request around the request's storage backend.
They hold no state of their own beyond that reference.

Usage:
======
    from mediashelf.api.dependencies.services import get_rating_service

    @router.get("/{work_id}/ratings/average")
    async def get_average(
        work_id: int,
        rating_service: RatingService = Depends(get_rating_service),
    ):
        return await rating_service.get_work_average_rating(work_id)
"""

from mediashelf.api.dependencies.backend import Backend
from mediashelf.shared.services import (
    AuthService,
    RatingService,
    RecommendationService,
    SearchService,
    ShelfService,
    SocialService,
    UserService,
    WorkService,
)


async def get_auth_service(backend: Backend) -> AuthService:
    """Dependency to get AuthService instance."""
    return AuthService(backend)


async def get_user_service(backend: Backend) -> UserService:
    return UserService(backend)


async def get_work_service(backend: Backend) -> WorkService:
    return WorkService(backend)


async def get_rating_service(backend: Backend) -> RatingService:
    return RatingService(backend)


async def get_social_service(backend: Backend) -> SocialService:
    return SocialService(backend)


async def get_shelf_service(backend: Backend) -> ShelfService:
    return ShelfService(backend)


async def get_search_service(backend: Backend) -> SearchService:
    return SearchService(backend)


async def get_recommendation_service(backend: Backend) -> RecommendationService:
    return RecommendationService(backend)
