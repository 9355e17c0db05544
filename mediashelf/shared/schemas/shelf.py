"""
Shelf Schemas

Request/response models for shelf endpoints.
"""

from datetime import datetime
from typing import Annotated, Optional

from pydantic import StringConstraints, model_validator

from mediashelf.shared.schemas.common import BaseSchema


ShelfName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=50)]
ShelfDescription = Annotated[str, StringConstraints(strip_whitespace=True, max_length=500)]


class ShelfCreate(BaseSchema):
    """Schema for creating a shelf."""

    name: ShelfName
    description: ShelfDescription = ""


class ShelfUpdate(BaseSchema):
    """Partial shelf update. At least one field is required."""

    name: Optional[ShelfName] = None
    description: Optional[ShelfDescription] = None

    @model_validator(mode="after")
    def require_one_field(self) -> "ShelfUpdate":
        if self.name is None and self.description is None:
            raise ValueError("At least one field (name or description) must be provided")
        return self


class ShelfResponse(BaseSchema):
    """A shelf with its ordered work ids."""

    shelf_id: int
    user_id: int
    name: str
    description: str
    works: list[int]
    created_at: datetime
    updated_at: datetime
