"""
Social Service

The follow graph. One follow edge is stored twice: the target id in the
actor's following list and the actor id in the target's followers list.
Both sides are always written together.

Rules:
======
    follow_user(a, a)           → SelfFollowError, nothing written
    follow_user(a, b) twice     → AlreadyFollowingError
    unfollow_user(a, b) no edge → NotFollowingError

Follow lists can hold ids of deleted users; listing skips them.
"""

from mediashelf.shared.core.exceptions import (
    AlreadyFollowingError,
    NotFollowingError,
    SelfFollowError,
)
from mediashelf.shared.core.logging import logger
from mediashelf.shared.db.backends import StorageBackend
from mediashelf.shared.repositories.user_repository import UserRepository
from mediashelf.shared.schemas.user import UserSummary
from mediashelf.shared.services.formatters import format_user_summary
from mediashelf.shared.services.user_service import UserService


class SocialService:
    """Service for follow/unfollow and follow lists."""

    def __init__(self, backend: StorageBackend) -> None:
        self.backend = backend
        self.repo = UserRepository(backend)
        self.users = UserService(backend)

    async def follow_user(self, user_id: int, target_user_id: int) -> UserSummary:
        """
        Make user_id follow target_user_id.

        Returns:
            Summary of the acting user

        Raises:
            SelfFollowError: If both ids are equal
            UserNotFoundError: If either user does not exist
            AlreadyFollowingError: If the edge already exists
        """
        if user_id == target_user_id:
            raise SelfFollowError()

        user = await self.users.get_user_model(user_id)
        target = await self.users.get_user_model(target_user_id)

        if target.id in (user.following or []):
            raise AlreadyFollowingError()

        user = await self.backend.update(user, following=[*(user.following or []), target.id])
        followers = [uid for uid in target.followers or [] if uid != user.id]
        await self.backend.update(target, followers=[*followers, user.id])

        logger.info("User followed", user_id=user.id, target_user_id=target.id)
        return format_user_summary(user)

    async def unfollow_user(self, user_id: int, target_user_id: int) -> UserSummary:
        """
        Remove the follow edge from user_id to target_user_id.

        Raises:
            UserNotFoundError: If either user does not exist
            NotFollowingError: If the edge does not exist
        """
        user = await self.users.get_user_model(user_id)
        target = await self.users.get_user_model(target_user_id)

        if target.id not in (user.following or []):
            raise NotFollowingError()

        user = await self.backend.update(
            user,
            following=[uid for uid in user.following or [] if uid != target.id],
        )
        await self.backend.update(
            target,
            followers=[uid for uid in target.followers or [] if uid != user.id],
        )

        logger.info("User unfollowed", user_id=user.id, target_user_id=target.id)
        return format_user_summary(user)

    async def get_user_following(self, user_id: int) -> list[UserSummary]:
        """Users this user follows, dangling ids skipped."""
        user = await self.users.get_user_model(user_id)
        return [format_user_summary(other) for other in await self.repo.get_by_ids(list(user.following or []))]

    async def get_user_followers(self, user_id: int) -> list[UserSummary]:
        """Users following this user, dangling ids skipped."""
        user = await self.users.get_user_model(user_id)
        return [format_user_summary(other) for other in await self.repo.get_by_ids(list(user.followers or []))]
