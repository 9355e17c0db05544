"""
Rating Schemas

Request/response models for rating endpoints.

Scores are strict integers: 4.5, "4" and true are all rejected.
"""

from datetime import datetime
from typing import Annotated

from pydantic import Field

from mediashelf.shared.schemas.common import BaseSchema


Score = Annotated[int, Field(strict=True, ge=1, le=5, description="Integer score from 1 to 5")]
RecordId = Annotated[int, Field(strict=True, gt=0)]


class WorkRatingCreate(BaseSchema):
    """Body of POST /works/{workId}/ratings."""

    user_id: RecordId
    score: Score


class UserRatingCreate(BaseSchema):
    """Body of POST /users/{userId}/ratings."""

    work_id: RecordId
    score: Score


class RatingUpdate(BaseSchema):
    """Body of PUT /ratings/{ratingId}."""

    score: Score


class RatingResponse(BaseSchema):
    """A rating record."""

    rating_id: int
    user_id: int
    work_id: int
    score: int
    rated_at: datetime


class AverageRatingResponse(BaseSchema):
    """Average score of a work, rounded to two decimals."""

    work_id: int
    average_rating: float
    total_ratings: int
