"""
Search Handler

GET /api/search?query=&itemType=&workType=&genre=&minRating=&year=
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from mediashelf.api.dependencies.services import get_search_service
from mediashelf.shared.models.enums import WorkType
from mediashelf.shared.schemas.common import ApiResponse
from mediashelf.shared.schemas.search import SearchResponse
from mediashelf.shared.services.search_service import SearchService


router = APIRouter()


@router.get("", response_model=ApiResponse[SearchResponse])
async def search(
    query: Optional[str] = Query(None, description="Text to match"),
    item_type: Optional[str] = Query(None, alias="itemType", description="work, user, or omit for both"),
    work_type: Optional[WorkType] = Query(None, alias="workType"),
    genre: Optional[str] = Query(None),
    min_rating: Optional[float] = Query(None, alias="minRating", ge=0, le=5),
    year: Optional[int] = Query(None, description="Only works released in or after this year"),
    search_service: SearchService = Depends(get_search_service),
):
    results = await search_service.search_items(
        query=query,
        item_type=item_type,
        work_type=work_type,
        genre=genre,
        min_rating=min_rating,
        year=year,
    )
    return ApiResponse(data=results, message="Search completed successfully")
