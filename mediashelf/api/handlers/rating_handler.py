"""
Rating Handler

Direct rating endpoints (prefix /api/ratings).
"""

from fastapi import APIRouter, Depends, Path, Response, status

from mediashelf.api.dependencies.services import get_rating_service
from mediashelf.shared.schemas.common import ApiResponse
from mediashelf.shared.schemas.rating import RatingResponse, RatingUpdate
from mediashelf.shared.services.rating_service import RatingService


router = APIRouter()


@router.get("", response_model=ApiResponse[list[RatingResponse]])
async def list_ratings(rating_service: RatingService = Depends(get_rating_service)):
    ratings = await rating_service.list_ratings()
    return ApiResponse(data=ratings, message="Ratings retrieved successfully")


@router.get("/{rating_id}", response_model=ApiResponse[RatingResponse])
async def get_rating(
    rating_id: int = Path(gt=0),
    rating_service: RatingService = Depends(get_rating_service),
):
    rating = await rating_service.get_rating(rating_id)
    return ApiResponse(data=rating, message="Rating retrieved successfully")


@router.put("/{rating_id}", response_model=ApiResponse[RatingResponse])
async def update_rating(
    rating_data: RatingUpdate,
    rating_id: int = Path(gt=0),
    rating_service: RatingService = Depends(get_rating_service),
):
    rating = await rating_service.update_rating(rating_id, rating_data.score)
    return ApiResponse(data=rating, message="Rating updated successfully")


@router.delete("/{rating_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_rating(
    rating_id: int = Path(gt=0),
    rating_service: RatingService = Depends(get_rating_service),
):
    await rating_service.delete_rating(rating_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
