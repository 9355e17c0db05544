"""
Search Service

Filters works and users for the search endpoint.

Work Pipeline:
==============
    all works
       │  query     → substring of title / description / creator (any case)
       │  work_type → exact type
       │  genre     → genre in work.genres
       │  year      → work.year >= year
       ▼
    attach rating + count
       │  min_rating → rating >= min_rating
       ▼
    sort: rating desc, then title asc  →  first 50

Users match on username or email substring and are sorted by username.
"""

from typing import Optional

from mediashelf.config.settings import settings
from mediashelf.shared.db.backends import StorageBackend
from mediashelf.shared.models.enums import SearchItemType, WorkType
from mediashelf.shared.repositories.user_repository import UserRepository
from mediashelf.shared.repositories.work_repository import WorkRepository
from mediashelf.shared.schemas.search import SearchResponse
from mediashelf.shared.schemas.user import UserSearchResult
from mediashelf.shared.schemas.work import WorkResponse
from mediashelf.shared.services.formatters import format_user_search_result
from mediashelf.shared.services.work_service import WorkService


class SearchService:
    """Service for catalog and user search."""

    def __init__(self, backend: StorageBackend) -> None:
        self.work_repo = WorkRepository(backend)
        self.user_repo = UserRepository(backend)
        self.works = WorkService(backend)

    async def search_works(
        self,
        query: Optional[str] = None,
        work_type: Optional[WorkType] = None,
        genre: Optional[str] = None,
        min_rating: Optional[float] = None,
        year: Optional[int] = None,
    ) -> list[WorkResponse]:
        candidates = await self.work_repo.filter_works(
            query=query,
            work_type=work_type,
            min_year=year,
            genres=[genre] if genre else None,
        )
        results = await self.works.format_works(candidates)

        if min_rating is not None:
            results = [work for work in results if work.rating >= min_rating]

        # Title ascending first, then a stable sort on rating descending
        results.sort(key=lambda work: work.title.lower())
        results.sort(key=lambda work: work.rating, reverse=True)
        return results[: settings.SEARCH_MAX_RESULTS]

    async def search_users(self, query: Optional[str] = None) -> list[UserSearchResult]:
        users = await self.user_repo.search(query)
        return [format_user_search_result(user) for user in users[: settings.SEARCH_MAX_RESULTS]]

    async def search_items(
        self,
        query: Optional[str] = None,
        item_type: Optional[str] = None,
        work_type: Optional[WorkType] = None,
        genre: Optional[str] = None,
        min_rating: Optional[float] = None,
        year: Optional[int] = None,
    ) -> SearchResponse:
        """
        Search works, users or both.

        Args:
            query: Free text, matched case-insensitively
            item_type: "work", "user" (any case), or anything else for both
            work_type: Only works of this type
            genre: Only works in this genre
            min_rating: Only works rated at least this
            year: Only works released in or after this year

        Returns:
            {works: [...], users: [...]}
        """
        item_type = (item_type or "").strip().lower()
        search_works = item_type != SearchItemType.USER.value
        search_users = item_type != SearchItemType.WORK.value

        works = await self.search_works(query, work_type, genre, min_rating, year) if search_works else []
        users = await self.search_users(query) if search_users else []

        return SearchResponse(works=works, users=users)
