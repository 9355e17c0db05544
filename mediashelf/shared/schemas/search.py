"""
Search Schemas
"""

from mediashelf.shared.schemas.common import BaseSchema
from mediashelf.shared.schemas.user import UserSearchResult
from mediashelf.shared.schemas.work import WorkResponse


class SearchResponse(BaseSchema):
    """Matching works and users. A list is empty when its type was not searched."""

    works: list[WorkResponse]
    users: list[UserSearchResult]
