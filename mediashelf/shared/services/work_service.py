"""
Work Service

Catalog CRUD plus the similar and popular listings. Every work returned
carries its average rating and rating count, computed from the Rating
records at read time.

Deletion:
=========
    delete_work(6)
       ├── delete every Rating with work_id = 6
       ├── drop "6" from each affected user's rated_works (version bumped)
       └── delete the Work record

Shelves keep the id; it becomes a dangling reference.
"""

from typing import Any, Iterable, Optional

from mediashelf.config.settings import settings
from mediashelf.shared.core.exceptions import WorkNotFoundError
from mediashelf.shared.core.logging import logger
from mediashelf.shared.db.backends import StorageBackend
from mediashelf.shared.models.enums import WorkType
from mediashelf.shared.models.work import Work
from mediashelf.shared.repositories.rating_repository import RatingRepository
from mediashelf.shared.repositories.user_repository import UserRepository
from mediashelf.shared.repositories.work_repository import WorkRepository
from mediashelf.shared.schemas.work import WorkResponse
from mediashelf.shared.services.formatters import format_work
from mediashelf.shared.services.user_service import UserService


class WorkService:
    """Service for the work catalog."""

    def __init__(self, backend: StorageBackend) -> None:
        self.repo = WorkRepository(backend)
        self.rating_repo = RatingRepository(backend)
        self.user_repo = UserRepository(backend)
        self.users = UserService(backend)

    # ═══════════════════════════════════════════════════════════════════════════
    # HELPERS
    # ═══════════════════════════════════════════════════════════════════════════

    async def _get_work_model(self, work_id: int) -> Work:
        work = await self.repo.get(work_id)
        if work is None:
            raise WorkNotFoundError(work_id)
        return work

    async def format_works(self, works: Iterable[Work]) -> list[WorkResponse]:
        """Attach ratings to works with a single ratings query."""
        works = list(works)
        if not works:
            return []
        scores = await self.rating_repo.scores_by_work([work.id for work in works])
        return [format_work(work, scores.get(work.id)) for work in works]

    # ═══════════════════════════════════════════════════════════════════════════
    # CRUD
    # ═══════════════════════════════════════════════════════════════════════════

    async def list_works(
        self,
        work_type: Optional[WorkType] = None,
        year: Optional[int] = None,
        genres: Optional[list[str]] = None,
    ) -> list[WorkResponse]:
        """
        List the catalog.

        Args:
            work_type: Only works of this type
            year: Only works released in or after this year
            genres: Only works sharing at least one of these genres
        """
        works = await self.repo.filter_works(work_type=work_type, min_year=year, genres=genres)
        return await self.format_works(works)

    async def get_work(self, work_id: int) -> WorkResponse:
        work = await self._get_work_model(work_id)
        return (await self.format_works([work]))[0]

    async def create_work(self, **fields: Any) -> WorkResponse:
        """
        Add a work to the catalog.

        Args:
            **fields: title, type and the optional description, year,
                genres, creator, cover_url, found_at
        """
        fields["type"] = WorkType(fields["type"])
        fields["genres"] = list(fields.get("genres") or [])
        work = await self.repo.create(**fields)
        logger.info("Work created", work_id=work.id, title=work.title, type=work.type.value)
        return format_work(work)

    async def update_work(self, work_id: int, **changes: Any) -> WorkResponse:
        """
        Partially update a work. None values are ignored.

        Raises:
            WorkNotFoundError: If the work does not exist
        """
        work = await self._get_work_model(work_id)
        if changes.get("type") is not None:
            changes["type"] = WorkType(changes["type"])
        if changes.get("genres") is not None:
            changes["genres"] = list(changes["genres"])

        work = await self.repo.update(work, **changes)
        logger.info("Work updated", work_id=work.id)
        return (await self.format_works([work]))[0]

    async def delete_work(self, work_id: int) -> None:
        """
        Delete a work and its ratings.

        Raises:
            WorkNotFoundError: If the work does not exist
        """
        work = await self._get_work_model(work_id)

        ratings = await self.rating_repo.list_for_work(work.id)
        for rating in ratings:
            await self.rating_repo.delete(rating)

        key = str(work.id)
        for user in await self.user_repo.get_by_ids(sorted({rating.user_id for rating in ratings})):
            rated_works = {wid: entry for wid, entry in (user.rated_works or {}).items() if wid != key}
            await self.users.bump_recommendation_version(user, rated_works=rated_works)

        await self.repo.delete(work)
        logger.info("Work deleted", work_id=work_id, ratings_removed=len(ratings))

    # ═══════════════════════════════════════════════════════════════════════════
    # DISCOVERY
    # ═══════════════════════════════════════════════════════════════════════════

    async def get_similar_works(self, work_id: int) -> list[WorkResponse]:
        """
        Works of the same type or sharing a genre, excluding the work itself.

        Raises:
            WorkNotFoundError: If the work does not exist
        """
        work = await self._get_work_model(work_id)
        genres = set(work.genres or [])

        similar = [
            other for other in await self.repo.list()
            if other.id != work.id and (other.type == work.type or genres.intersection(other.genres or []))
        ]
        return await self.format_works(similar[: settings.SIMILAR_WORKS_LIMIT])

    async def get_popular_works(self) -> list[WorkResponse]:
        """Highest rated works first, ties broken by number of ratings."""
        works = await self.format_works(await self.repo.list())
        works.sort(key=lambda work: (work.rating, work.rating_count), reverse=True)
        return works[: settings.POPULAR_WORKS_LIMIT]
