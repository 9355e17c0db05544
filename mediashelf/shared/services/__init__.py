"""
Business Logic Services

Services encapsulate business logic and coordinate between repositories
and domain rules.

Service Pattern:
================
    Handler → Service → Repository → StorageBackend

Services should:
- Contain business logic and validation
- Coordinate multiple repositories if needed
- Raise domain exceptions, never HTTP responses
- NOT branch on which backend they were given

Available Services:
===================
- AuthService: Signup and placeholder login
- UserService: User CRUD and recommendation version
- WorkService: Catalog CRUD, similar and popular works
- RatingService: Rating upsert and averages
- SocialService: Follow graph
- ShelfService: Shelves and their work lists
- SearchService: Work and user search
- RecommendationService: Placeholder recommendations

Usage:
======
    from mediashelf.shared.services import RatingService

    service = RatingService(backend)
    rating = await service.create_or_update_rating(user_id, work_id, score=5)
"""

from mediashelf.shared.services.auth_service import AuthService
from mediashelf.shared.services.user_service import UserService
from mediashelf.shared.services.work_service import WorkService
from mediashelf.shared.services.rating_service import RatingService
from mediashelf.shared.services.social_service import SocialService
from mediashelf.shared.services.shelf_service import ShelfService
from mediashelf.shared.services.search_service import SearchService
from mediashelf.shared.services.recommendation_service import RecommendationService

__all__ = [
    "AuthService",
    "UserService",
    "WorkService",
    "RatingService",
    "SocialService",
    "ShelfService",
    "SearchService",
    "RecommendationService",
]
