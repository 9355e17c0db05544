"""
Work Schemas

Request/response models for catalog endpoints and recommendations.
"""

from datetime import datetime
from typing import Annotated, Optional

from pydantic import Field, StringConstraints, field_validator, model_validator

from mediashelf.shared.models.enums import GENRES, WorkType
from mediashelf.shared.schemas.common import BaseSchema
from mediashelf.shared.utils.clock import utcnow


MIN_YEAR = 1900

Title = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=255)]


def _check_year(year: Optional[int]) -> Optional[int]:
    max_year = utcnow().year + 5
    if year is not None and not MIN_YEAR <= year <= max_year:
        raise ValueError(f"Year must be between {MIN_YEAR} and {max_year}")
    return year


def _check_genres(genres: Optional[list[str]]) -> Optional[list[str]]:
    if genres is None:
        return None
    invalid = [genre for genre in genres if genre not in GENRES]
    if invalid:
        raise ValueError(f"Invalid genre provided: {', '.join(invalid)}")
    # Keep first occurrence order, drop repeats
    return list(dict.fromkeys(genres))


class WorkCreate(BaseSchema):
    """Schema for adding a work to the catalog."""

    title: Title
    description: Optional[str] = None
    type: WorkType
    year: Optional[int] = None
    genres: list[str] = Field(default_factory=list)
    creator: Optional[str] = None
    cover_url: Optional[str] = None
    found_at: Optional[str] = None

    @field_validator("year")
    @classmethod
    def validate_year(cls, value: Optional[int]) -> Optional[int]:
        return _check_year(value)

    @field_validator("genres")
    @classmethod
    def validate_genres(cls, value: Optional[list[str]]) -> Optional[list[str]]:
        return _check_genres(value)


class WorkUpdate(BaseSchema):
    """Partial work update. At least one field is required."""

    title: Optional[Title] = None
    description: Optional[str] = None
    type: Optional[WorkType] = None
    year: Optional[int] = None
    genres: Optional[list[str]] = None
    creator: Optional[str] = None
    cover_url: Optional[str] = None
    found_at: Optional[str] = None

    @field_validator("year")
    @classmethod
    def validate_year(cls, value: Optional[int]) -> Optional[int]:
        return _check_year(value)

    @field_validator("genres")
    @classmethod
    def validate_genres(cls, value: Optional[list[str]]) -> Optional[list[str]]:
        return _check_genres(value)

    @model_validator(mode="after")
    def require_one_field(self) -> "WorkUpdate":
        if not self.model_fields_set:
            raise ValueError("At least one field must be provided")
        return self


class WorkResponse(BaseSchema):
    """Work with its derived rating and resolved cover URL."""

    work_id: int
    title: str
    description: Optional[str] = None
    type: WorkType
    year: Optional[int] = None
    genres: list[str]
    creator: Optional[str] = None
    cover_url: str
    found_at: Optional[str] = None
    rating: float
    rating_count: int
    created_at: datetime
    updated_at: datetime


class RecommendationResponse(BaseSchema):
    """Two disjoint batches of works plus the user's recommendation version."""

    current: list[WorkResponse]
    profile: list[WorkResponse]
    version: int
