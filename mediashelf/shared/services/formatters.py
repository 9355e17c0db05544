"""
Response Formatters

Turn model instances into response schemas. Internal column names are
renamed to API ids (id → userId, workId, ...), derived fields are computed
and credentials never leave the service layer.
"""

from typing import Optional

from mediashelf.shared.models import Rating, Shelf, User, Work
from mediashelf.shared.schemas.rating import RatingResponse
from mediashelf.shared.schemas.shelf import ShelfResponse
from mediashelf.shared.schemas.user import UserResponse, UserSearchResult, UserSummary
from mediashelf.shared.schemas.work import WorkResponse
from mediashelf.shared.utils.images import build_image_url, build_profile_picture_url
from mediashelf.shared.utils.ratings import average_score


def format_user(user: User) -> UserResponse:
    """Public user fields; rated_works becomes a count."""
    return UserResponse(
        user_id=user.id,
        username=user.username,
        email=user.email,
        profile_picture_url=build_profile_picture_url(user.profile_picture_url),
        rated_works=len(user.rated_works or {}),
    )


def format_user_summary(user: User) -> UserSummary:
    return UserSummary(
        user_id=user.id,
        username=user.username,
        email=user.email,
        profile_picture_url=build_profile_picture_url(user.profile_picture_url),
    )


def format_user_search_result(user: User) -> UserSearchResult:
    return UserSearchResult(
        user_id=user.id,
        username=user.username,
        email=user.email,
        profile_picture_url=build_profile_picture_url(user.profile_picture_url),
        rated_works_count=len(user.rated_works or {}),
        created_at=user.created_at,
        updated_at=user.updated_at,
    )


def format_work(work: Work, scores: Optional[list[int]] = None) -> WorkResponse:
    """
    Work fields plus the average of the given scores.

    Args:
        work: Work instance
        scores: All scores for this work, none when omitted
    """
    rating, rating_count = average_score(scores or [])
    return WorkResponse(
        work_id=work.id,
        title=work.title,
        description=work.description,
        type=work.type,
        year=work.year,
        genres=list(work.genres or []),
        creator=work.creator,
        cover_url=build_image_url(work.cover_url, work.type),
        found_at=work.found_at,
        rating=rating,
        rating_count=rating_count,
        created_at=work.created_at,
        updated_at=work.updated_at,
    )


def format_rating(rating: Rating) -> RatingResponse:
    return RatingResponse(
        rating_id=rating.id,
        user_id=rating.user_id,
        work_id=rating.work_id,
        score=rating.score,
        rated_at=rating.rated_at,
    )


def format_shelf(shelf: Shelf) -> ShelfResponse:
    return ShelfResponse(
        shelf_id=shelf.id,
        user_id=shelf.user_id,
        name=shelf.name,
        description=shelf.description or "",
        works=list(shelf.works or []),
        created_at=shelf.created_at,
        updated_at=shelf.updated_at,
    )
