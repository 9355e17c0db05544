"""
Work Handler

Catalog endpoints plus the work-scoped rating endpoints.

Routes (prefix /api/works):
===========================
    GET    /                          → list works (?type=&year=&genres=A,B)
    POST   /                          → create work (201)
    GET    /popular                   → top rated works
    GET    /{work_id}                 → get work
    PUT    /{work_id}                 → update work
    DELETE /{work_id}                 → delete work (204)
    GET    /{work_id}/similar         → similar works
    GET    /{work_id}/ratings         → ratings of the work
    POST   /{work_id}/ratings         → rate the work (upsert, 201)
    GET    /{work_id}/ratings/average → average rating
"""

from typing import Optional

from fastapi import APIRouter, Depends, Path, Query, Response, status

from mediashelf.api.dependencies.services import get_rating_service, get_work_service
from mediashelf.shared.models.enums import WorkType
from mediashelf.shared.schemas.common import ApiResponse
from mediashelf.shared.schemas.rating import AverageRatingResponse, RatingResponse, WorkRatingCreate
from mediashelf.shared.schemas.work import WorkCreate, WorkResponse, WorkUpdate
from mediashelf.shared.services.rating_service import RatingService
from mediashelf.shared.services.work_service import WorkService


router = APIRouter()


def _split_genres(genres: Optional[str]) -> Optional[list[str]]:
    """Parse a comma-separated genres query value."""
    if not genres:
        return None
    parsed = [genre.strip() for genre in genres.split(",") if genre.strip()]
    return parsed or None


# ═══════════════════════════════════════════════════════════════════════════════
# CATALOG
# ═══════════════════════════════════════════════════════════════════════════════


@router.get("", response_model=ApiResponse[list[WorkResponse]])
async def list_works(
    work_type: Optional[WorkType] = Query(None, alias="type"),
    year: Optional[int] = Query(None, description="Only works released in or after this year"),
    genres: Optional[str] = Query(None, description="Comma-separated genres, any match"),
    work_service: WorkService = Depends(get_work_service),
):
    works = await work_service.list_works(work_type=work_type, year=year, genres=_split_genres(genres))
    return ApiResponse(data=works, message="Works retrieved successfully")


@router.post(
    "",
    response_model=ApiResponse[WorkResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create_work(
    work_data: WorkCreate,
    work_service: WorkService = Depends(get_work_service),
):
    work = await work_service.create_work(**work_data.model_dump())
    return ApiResponse(data=work, message="Work created successfully")


@router.get("/popular", response_model=ApiResponse[list[WorkResponse]])
async def get_popular_works(work_service: WorkService = Depends(get_work_service)):
    works = await work_service.get_popular_works()
    return ApiResponse(data=works, message="Popular works retrieved successfully")


@router.get("/{work_id}", response_model=ApiResponse[WorkResponse])
async def get_work(
    work_id: int = Path(gt=0),
    work_service: WorkService = Depends(get_work_service),
):
    work = await work_service.get_work(work_id)
    return ApiResponse(data=work, message="Work retrieved successfully")


@router.put("/{work_id}", response_model=ApiResponse[WorkResponse])
async def update_work(
    work_data: WorkUpdate,
    work_id: int = Path(gt=0),
    work_service: WorkService = Depends(get_work_service),
):
    work = await work_service.update_work(work_id, **work_data.model_dump(exclude_unset=True))
    return ApiResponse(data=work, message="Work updated successfully")


@router.delete("/{work_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_work(
    work_id: int = Path(gt=0),
    work_service: WorkService = Depends(get_work_service),
):
    """Delete a work and its ratings. Shelves keep the id."""
    await work_service.delete_work(work_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{work_id}/similar", response_model=ApiResponse[list[WorkResponse]])
async def get_similar_works(
    work_id: int = Path(gt=0),
    work_service: WorkService = Depends(get_work_service),
):
    works = await work_service.get_similar_works(work_id)
    return ApiResponse(data=works, message="Similar works retrieved successfully")


# ═══════════════════════════════════════════════════════════════════════════════
# WORK RATINGS
# ═══════════════════════════════════════════════════════════════════════════════


@router.get("/{work_id}/ratings", response_model=ApiResponse[list[RatingResponse]])
async def get_work_ratings(
    work_id: int = Path(gt=0),
    rating_service: RatingService = Depends(get_rating_service),
):
    ratings = await rating_service.list_work_ratings(work_id)
    return ApiResponse(data=ratings, message="Ratings retrieved successfully")


@router.post(
    "/{work_id}/ratings",
    response_model=ApiResponse[RatingResponse],
    status_code=status.HTTP_201_CREATED,
)
async def rate_work(
    rating_data: WorkRatingCreate,
    work_id: int = Path(gt=0),
    rating_service: RatingService = Depends(get_rating_service),
):
    """
    Create or update a user's rating of this work.

    Raises:
        400: Score is not an integer from 1 to 5
        404: User or work does not exist
    """
    rating = await rating_service.create_or_update_rating(rating_data.user_id, work_id, rating_data.score)
    return ApiResponse(data=rating, message="Rating saved successfully")


@router.get("/{work_id}/ratings/average", response_model=ApiResponse[AverageRatingResponse])
async def get_work_average_rating(
    work_id: int = Path(gt=0),
    rating_service: RatingService = Depends(get_rating_service),
):
    average = await rating_service.get_work_average_rating(work_id)
    return ApiResponse(data=average, message="Average rating retrieved successfully")
