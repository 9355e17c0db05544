"""
Recommendation Service

Placeholder recommendations: the catalog is shuffled and split into two
disjoint batches. The user's recommendation version is returned alongside
so clients can tell when ratings changed and a refetch is due.
"""

import random
from typing import Optional

from mediashelf.config.settings import settings
from mediashelf.shared.db.backends import StorageBackend
from mediashelf.shared.repositories.work_repository import WorkRepository
from mediashelf.shared.schemas.work import RecommendationResponse
from mediashelf.shared.services.user_service import UserService
from mediashelf.shared.services.work_service import WorkService


class RecommendationService:
    """
    Service for user recommendations.

    Attributes:
        rng: Random source used for the shuffle, injectable for tests
    """

    def __init__(self, backend: StorageBackend, rng: Optional[random.Random] = None) -> None:
        self.work_repo = WorkRepository(backend)
        self.works = WorkService(backend)
        self.users = UserService(backend)
        self.rng = rng or random.Random()

    async def get_user_recommendations(self, user_id: int) -> RecommendationResponse:
        """
        Two batches of up to RECOMMENDATION_BATCH_SIZE works with no work
        in both.

        Raises:
            UserNotFoundError: If the user does not exist
        """
        user = await self.users.get_user_model(user_id)

        works = await self.work_repo.list()
        self.rng.shuffle(works)

        size = settings.RECOMMENDATION_BATCH_SIZE
        picked = await self.works.format_works(works[: size * 2])

        return RecommendationResponse(
            current=picked[:size],
            profile=picked[size:],
            version=user.recommendation_version,
        )
