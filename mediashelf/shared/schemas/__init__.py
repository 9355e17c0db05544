"""
Schemas Package

Pydantic request/response models. Field names are snake_case in Python and
camelCase on the wire.
"""

from mediashelf.shared.schemas.common import (
    BaseSchema,
    ApiResponse,
    ErrorDetail,
    ErrorResponse,
    HealthResponse,
)
from mediashelf.shared.schemas.user import (
    UserCreate,
    UserLogin,
    UserUpdate,
    UserResponse,
    UserSummary,
    UserSearchResult,
    RatedWorkEntry,
)
from mediashelf.shared.schemas.work import (
    WorkCreate,
    WorkUpdate,
    WorkResponse,
    RecommendationResponse,
)
from mediashelf.shared.schemas.rating import (
    WorkRatingCreate,
    UserRatingCreate,
    RatingUpdate,
    RatingResponse,
    AverageRatingResponse,
)
from mediashelf.shared.schemas.shelf import ShelfCreate, ShelfUpdate, ShelfResponse
from mediashelf.shared.schemas.search import SearchResponse

__all__ = [
    # Common
    "BaseSchema",
    "ApiResponse",
    "ErrorDetail",
    "ErrorResponse",
    "HealthResponse",
    # Users
    "UserCreate",
    "UserLogin",
    "UserUpdate",
    "UserResponse",
    "UserSummary",
    "UserSearchResult",
    "RatedWorkEntry",
    # Works
    "WorkCreate",
    "WorkUpdate",
    "WorkResponse",
    "RecommendationResponse",
    # Ratings
    "WorkRatingCreate",
    "UserRatingCreate",
    "RatingUpdate",
    "RatingResponse",
    "AverageRatingResponse",
    # Shelves
    "ShelfCreate",
    "ShelfUpdate",
    "ShelfResponse",
    # Search
    "SearchResponse",
]
