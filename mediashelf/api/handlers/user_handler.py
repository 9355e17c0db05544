"""
User Handler

User CRUD plus the user-scoped rating, recommendation and shelf endpoints.

Routes (prefix /api/users):
===========================
    GET    /                          → list users
    POST   /                          → create user (201)
    GET    /{user_id}                 → get user
    PUT    /{user_id}                 → update user
    DELETE /{user_id}                 → delete user (204)
    GET    /{user_id}/ratings         → rated_works map
    POST   /{user_id}/ratings         → rate a work (upsert)
    GET    /{user_id}/recommendations → recommendation batches
    GET    /{user_id}/shelves         → user's shelves
    POST   /{user_id}/shelves         → create shelf (201)
"""

from fastapi import APIRouter, Depends, Path, Response, status

from mediashelf.api.dependencies.services import (
    get_rating_service,
    get_recommendation_service,
    get_shelf_service,
    get_user_service,
)
from mediashelf.shared.schemas.common import ApiResponse
from mediashelf.shared.schemas.rating import RatingResponse, UserRatingCreate
from mediashelf.shared.schemas.shelf import ShelfCreate, ShelfResponse
from mediashelf.shared.schemas.user import RatedWorkEntry, UserCreate, UserResponse, UserUpdate
from mediashelf.shared.schemas.work import RecommendationResponse
from mediashelf.shared.services.rating_service import RatingService
from mediashelf.shared.services.recommendation_service import RecommendationService
from mediashelf.shared.services.shelf_service import ShelfService
from mediashelf.shared.services.user_service import UserService


router = APIRouter()


# ═══════════════════════════════════════════════════════════════════════════════
# USER CRUD
# ═══════════════════════════════════════════════════════════════════════════════


@router.get("", response_model=ApiResponse[list[UserResponse]])
async def list_users(user_service: UserService = Depends(get_user_service)):
    users = await user_service.list_users()
    return ApiResponse(data=users, message="Users retrieved successfully")


@router.post(
    "",
    response_model=ApiResponse[UserResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create_user(
    user_data: UserCreate,
    user_service: UserService = Depends(get_user_service),
):
    user = await user_service.create_user(
        username=user_data.username,
        email=user_data.email,
        password=user_data.password,
        profile_picture_url=user_data.profile_picture_url,
    )
    return ApiResponse(data=user, message="User created successfully")


@router.get("/{user_id}", response_model=ApiResponse[UserResponse])
async def get_user(
    user_id: int = Path(gt=0),
    user_service: UserService = Depends(get_user_service),
):
    user = await user_service.get_user(user_id)
    return ApiResponse(data=user, message="User retrieved successfully")


@router.put("/{user_id}", response_model=ApiResponse[UserResponse])
async def update_user(
    user_data: UserUpdate,
    user_id: int = Path(gt=0),
    user_service: UserService = Depends(get_user_service),
):
    user = await user_service.update_user(user_id, **user_data.model_dump(exclude_unset=True))
    return ApiResponse(data=user, message="User updated successfully")


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(
    user_id: int = Path(gt=0),
    user_service: UserService = Depends(get_user_service),
):
    """Delete a user along with their ratings, shelves and follow links."""
    await user_service.delete_user(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ═══════════════════════════════════════════════════════════════════════════════
# USER RATINGS & RECOMMENDATIONS
# ═══════════════════════════════════════════════════════════════════════════════


@router.get("/{user_id}/ratings", response_model=ApiResponse[dict[str, RatedWorkEntry]])
async def get_user_ratings(
    user_id: int = Path(gt=0),
    rating_service: RatingService = Depends(get_rating_service),
):
    """The user's rated works, keyed by work id."""
    ratings = await rating_service.get_user_ratings(user_id)
    return ApiResponse(data=ratings, message="User ratings retrieved successfully")


@router.post(
    "/{user_id}/ratings",
    response_model=ApiResponse[RatingResponse],
    status_code=status.HTTP_201_CREATED,
)
async def add_user_rating(
    rating_data: UserRatingCreate,
    user_id: int = Path(gt=0),
    rating_service: RatingService = Depends(get_rating_service),
):
    """Rate a work as this user. Rating the same work again overwrites the score."""
    rating = await rating_service.add_user_rating(user_id, rating_data.work_id, rating_data.score)
    return ApiResponse(data=rating, message="Rating saved successfully")


@router.get("/{user_id}/recommendations", response_model=ApiResponse[RecommendationResponse])
async def get_user_recommendations(
    user_id: int = Path(gt=0),
    recommendation_service: RecommendationService = Depends(get_recommendation_service),
):
    recommendations = await recommendation_service.get_user_recommendations(user_id)
    return ApiResponse(data=recommendations, message="Recommendations retrieved successfully")


# ═══════════════════════════════════════════════════════════════════════════════
# USER SHELVES
# ═══════════════════════════════════════════════════════════════════════════════


@router.get("/{user_id}/shelves", response_model=ApiResponse[list[ShelfResponse]])
async def get_user_shelves(
    user_id: int = Path(gt=0),
    shelf_service: ShelfService = Depends(get_shelf_service),
):
    shelves = await shelf_service.list_user_shelves(user_id)
    return ApiResponse(data=shelves, message="Shelves retrieved successfully")


@router.post(
    "/{user_id}/shelves",
    response_model=ApiResponse[ShelfResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create_shelf(
    shelf_data: ShelfCreate,
    user_id: int = Path(gt=0),
    shelf_service: ShelfService = Depends(get_shelf_service),
):
    """
    Create an empty shelf.

    Raises:
        400: If the user already has a shelf with this name
    """
    shelf = await shelf_service.create_shelf(user_id, shelf_data.name, shelf_data.description)
    return ApiResponse(data=shelf, message="Shelf created successfully")
