"""
User Schemas

Request/response models for authentication, user CRUD and social endpoints.
"""

from datetime import datetime
from typing import Annotated, Optional

from pydantic import EmailStr, Field, StringConstraints, model_validator

from mediashelf.shared.schemas.common import BaseSchema


Username = Annotated[str, StringConstraints(strip_whitespace=True, min_length=3, max_length=20)]
Password = Annotated[str, StringConstraints(min_length=6)]


class UserCreate(BaseSchema):
    """Schema for user registration and admin user creation."""

    username: Username = Field(description="Username (3-20 characters)")
    email: EmailStr
    password: Password = Field(description="Password (minimum 6 characters)")
    profile_picture_url: Optional[str] = None


class UserLogin(BaseSchema):
    """Schema for user login by email or username."""

    identifier: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
    password: Annotated[str, StringConstraints(min_length=1)]


class UserUpdate(BaseSchema):
    """Partial user update. At least one field is required."""

    username: Optional[Username] = None
    email: Optional[EmailStr] = None
    password: Optional[Password] = None
    profile_picture_url: Optional[str] = None

    @model_validator(mode="after")
    def require_one_field(self) -> "UserUpdate":
        if not self.model_fields_set:
            raise ValueError("At least one field must be provided")
        return self


class UserResponse(BaseSchema):
    """Public user representation. rated_works is the number of rated works."""

    user_id: int
    username: str
    email: str
    profile_picture_url: str
    rated_works: int


class UserSummary(BaseSchema):
    """Lightweight user representation used in follow lists."""

    user_id: int
    username: str
    email: str
    profile_picture_url: str


class UserSearchResult(UserSummary):
    """User entry in search results."""

    rated_works_count: int
    created_at: datetime
    updated_at: datetime


class RatedWorkEntry(BaseSchema):
    """One entry of a user's rated_works map."""

    score: int
    rated_at: str
