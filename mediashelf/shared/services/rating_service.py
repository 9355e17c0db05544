"""
Rating Service

The rating aggregator: one rating per (user, work), averages computed on
read, and a recommendation version bump on every rating write.

Upsert Flow:
============
    create_or_update_rating(user_id=3, work_id=6, score=5)
       │
       ├── load user, load work              → NotFound if either is missing
       ├── rating for (3, 6) exists?
       │       yes → overwrite score + rated_at
       │       no  → insert new Rating
       └── user.rated_works["6"] = {score, ratedAt}
           user.recommendation_version = next_version(...)

The Rating row is the source of truth. rated_works is a derived index
written right after it, in a second store operation.

Usage:
======
    from mediashelf.shared.services.rating_service import RatingService

    service = RatingService(backend)
    rating = await service.create_or_update_rating(user_id, work_id, score=4)
    average = await service.get_work_average_rating(work_id)
"""

from typing import Optional

from mediashelf.shared.core.exceptions import RatingNotFoundError, WorkNotFoundError
from mediashelf.shared.core.logging import logger
from mediashelf.shared.db.backends import StorageBackend
from mediashelf.shared.models.rating import Rating
from mediashelf.shared.models.user import User
from mediashelf.shared.repositories.rating_repository import RatingRepository
from mediashelf.shared.repositories.user_repository import UserRepository
from mediashelf.shared.repositories.work_repository import WorkRepository
from mediashelf.shared.schemas.rating import AverageRatingResponse, RatingResponse
from mediashelf.shared.schemas.user import RatedWorkEntry
from mediashelf.shared.services.formatters import format_rating
from mediashelf.shared.services.user_service import UserService
from mediashelf.shared.utils.clock import utcnow
from mediashelf.shared.utils.ratings import average_score


class RatingService:
    """
    Service for ratings and their aggregates.

    Attributes:
        repo: RatingRepository instance
        users: UserService, owner of the recommendation version
    """

    def __init__(self, backend: StorageBackend) -> None:
        self.backend = backend
        self.repo = RatingRepository(backend)
        self.user_repo = UserRepository(backend)
        self.work_repo = WorkRepository(backend)
        self.users = UserService(backend)

    # ═══════════════════════════════════════════════════════════════════════════
    # HELPERS
    # ═══════════════════════════════════════════════════════════════════════════

    async def _get_rating_model(self, rating_id: int) -> Rating:
        rating = await self.repo.get(rating_id)
        if rating is None:
            raise RatingNotFoundError(rating_id)
        return rating

    async def _ensure_work(self, work_id: int) -> None:
        if not await self.work_repo.exists(work_id):
            raise WorkNotFoundError(work_id)

    async def _sync_rated_work(self, user: Optional[User], rating: Rating, *, removed: bool = False) -> None:
        """
        Mirror a rating write into the owner's rated_works and bump the
        owner's recommendation version.

        A missing owner is skipped; the rating row has already been written.
        """
        if user is None:
            return

        rated_works = dict(user.rated_works or {})
        key = str(rating.work_id)
        if removed:
            rated_works.pop(key, None)
        else:
            rated_works[key] = {"score": rating.score, "ratedAt": rating.rated_at.isoformat()}

        await self.users.bump_recommendation_version(user, rated_works=rated_works)

    # ═══════════════════════════════════════════════════════════════════════════
    # WRITES
    # ═══════════════════════════════════════════════════════════════════════════

    async def create_or_update_rating(self, user_id: int, work_id: int, score: int) -> RatingResponse:
        """
        Create the user's rating for a work, or overwrite it if one exists.

        Args:
            user_id: Rating owner
            work_id: Rated work
            score: Integer 1-5, validated upstream

        Returns:
            The stored rating

        Raises:
            UserNotFoundError: If the user does not exist
            WorkNotFoundError: If the work does not exist
        """
        user = await self.users.get_user_model(user_id)
        await self._ensure_work(work_id)

        existing = await self.repo.get_for_user_and_work(user_id, work_id)
        if existing is not None:
            rating = await self.repo.update(existing, score=score, rated_at=utcnow())
            logger.info("Rating updated", rating_id=rating.id, user_id=user_id, work_id=work_id, score=score)
        else:
            rating = await self.repo.create(user_id=user_id, work_id=work_id, score=score, rated_at=utcnow())
            logger.info("Rating created", rating_id=rating.id, user_id=user_id, work_id=work_id, score=score)

        await self._sync_rated_work(user, rating)
        return format_rating(rating)

    async def add_user_rating(self, user_id: int, work_id: int, score: int) -> RatingResponse:
        """User-scoped entry point; same upsert as create_or_update_rating()."""
        return await self.create_or_update_rating(user_id, work_id, score)

    async def update_rating(self, rating_id: int, score: int) -> RatingResponse:
        """
        Change the score of an existing rating.

        Raises:
            RatingNotFoundError: If the rating does not exist
        """
        rating = await self._get_rating_model(rating_id)
        rating = await self.repo.update(rating, score=score, rated_at=utcnow())

        await self._sync_rated_work(await self.user_repo.get(rating.user_id), rating)

        logger.info("Rating updated", rating_id=rating.id, user_id=rating.user_id, score=score)
        return format_rating(rating)

    async def delete_rating(self, rating_id: int) -> None:
        """
        Remove a rating and its rated_works entry.

        Raises:
            RatingNotFoundError: If the rating does not exist
        """
        rating = await self._get_rating_model(rating_id)
        await self.repo.delete(rating)

        await self._sync_rated_work(await self.user_repo.get(rating.user_id), rating, removed=True)

        logger.info("Rating deleted", rating_id=rating_id, user_id=rating.user_id, work_id=rating.work_id)

    # ═══════════════════════════════════════════════════════════════════════════
    # READS
    # ═══════════════════════════════════════════════════════════════════════════

    async def get_rating(self, rating_id: int) -> RatingResponse:
        return format_rating(await self._get_rating_model(rating_id))

    async def list_ratings(self) -> list[RatingResponse]:
        return [format_rating(rating) for rating in await self.repo.list()]

    async def list_work_ratings(self, work_id: int) -> list[RatingResponse]:
        await self._ensure_work(work_id)
        return [format_rating(rating) for rating in await self.repo.list_for_work(work_id)]

    async def get_work_average_rating(self, work_id: int) -> AverageRatingResponse:
        """
        Average score of a work, recomputed from its ratings.

        Returns:
            {workId, averageRating, totalRatings}; 0 and 0 when unrated

        Raises:
            WorkNotFoundError: If the work does not exist
        """
        await self._ensure_work(work_id)
        ratings = await self.repo.list_for_work(work_id)
        average, total = average_score(rating.score for rating in ratings)
        return AverageRatingResponse(work_id=work_id, average_rating=average, total_ratings=total)

    async def get_user_ratings(self, user_id: int) -> dict[str, RatedWorkEntry]:
        """
        A user's rated_works map, keyed by work id.

        Raises:
            UserNotFoundError: If the user does not exist
        """
        user = await self.users.get_user_model(user_id)
        return {
            work_id: RatedWorkEntry(score=entry["score"], rated_at=entry["ratedAt"])
            for work_id, entry in (user.rated_works or {}).items()
        }
