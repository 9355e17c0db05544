"""
Work Repository

Storage operations specific to the Work model.

Filtering mirrors the catalog query parameters:
- work_type: exact match
- min_year: year >= value (works without a year never match)
- genres: at least one genre in common
- query: case-insensitive substring of title, description or creator
"""

from typing import Iterable, Optional

from mediashelf.shared.db.backends import StorageBackend
from mediashelf.shared.models.enums import WorkType
from mediashelf.shared.models.work import Work
from mediashelf.shared.repositories.base import BaseRepository


class WorkRepository(BaseRepository[Work]):
    """Repository for Work storage operations."""

    def __init__(self, backend: StorageBackend) -> None:
        super().__init__(Work, backend)

    async def filter_works(
        self,
        *,
        query: Optional[str] = None,
        work_type: Optional[WorkType] = None,
        min_year: Optional[int] = None,
        genres: Optional[Iterable[str]] = None,
    ) -> list[Work]:
        """
        List works matching every given predicate, ordered by id.

        Args:
            query: Text to look for in title, description or creator
            work_type: Only works of this type
            min_year: Only works released in or after this year
            genres: Only works sharing at least one of these genres

        Returns:
            Matching works
        """
        filters = {"type": work_type} if work_type is not None else None
        works = await self.list(filters=filters)

        needle = (query or "").strip().lower()
        if needle:
            works = [
                work for work in works
                if any(needle in (text or "").lower() for text in (work.title, work.description, work.creator))
            ]

        if min_year is not None:
            works = [work for work in works if work.year is not None and work.year >= min_year]

        wanted = set(genres or ())
        if wanted:
            works = [work for work in works if wanted.intersection(work.genres or ())]

        return works
