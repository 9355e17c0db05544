"""
User Service

Business logic for user accounts: CRUD, the account deletion cascade and
the recommendation version token.

Deletion Cascade:
=================
    delete_user(7)
       ├── delete every Rating with user_id = 7
       ├── delete every Shelf with user_id = 7
       ├── remove 7 from followers/following of the users it was linked to
       └── delete the User record

Each step is a separate write. On the in-memory backend a failure part way
leaves the earlier steps applied; on the SQL backend the request session
rolls everything back.

Usage:
======
    from mediashelf.shared.services.user_service import UserService

    service = UserService(backend)
    user = await service.create_user("alice", "alice@x.com", "secret1")
"""

import re
from typing import Any, Optional

from mediashelf.shared.core.exceptions import (
    DuplicateResourceError,
    UserNotFoundError,
    ValidationError,
)
from mediashelf.shared.core.logging import logger
from mediashelf.shared.db.backends import StorageBackend
from mediashelf.shared.models.user import User
from mediashelf.shared.repositories.rating_repository import RatingRepository
from mediashelf.shared.repositories.shelf_repository import ShelfRepository
from mediashelf.shared.repositories.user_repository import UserRepository
from mediashelf.shared.schemas.user import UserResponse
from mediashelf.shared.services.formatters import format_user
from mediashelf.shared.utils.clock import next_version


EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
USERNAME_MIN_LENGTH = 3
USERNAME_MAX_LENGTH = 20
PASSWORD_MIN_LENGTH = 6


class UserService:
    """
    Service for user accounts.

    Attributes:
        backend: Storage backend for the current request
        repo: UserRepository instance
    """

    def __init__(self, backend: StorageBackend) -> None:
        self.backend = backend
        self.repo = UserRepository(backend)
        self.rating_repo = RatingRepository(backend)
        self.shelf_repo = ShelfRepository(backend)

    # ═══════════════════════════════════════════════════════════════════════════
    # HELPERS
    # ═══════════════════════════════════════════════════════════════════════════

    async def get_user_model(self, user_id: int) -> User:
        """
        Load a user record.

        Raises:
            UserNotFoundError: If the user does not exist
        """
        user = await self.repo.get(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    @staticmethod
    def _validate_fields(
        username: Optional[str] = None,
        email: Optional[str] = None,
        password: Optional[str] = None,
    ) -> None:
        errors = []
        if username is not None and not USERNAME_MIN_LENGTH <= len(username) <= USERNAME_MAX_LENGTH:
            errors.append(f"Username must be between {USERNAME_MIN_LENGTH} and {USERNAME_MAX_LENGTH} characters")
        if email is not None and not EMAIL_PATTERN.match(email):
            errors.append("Please provide a valid email address")
        if password is not None and len(password) < PASSWORD_MIN_LENGTH:
            errors.append(f"Password must be at least {PASSWORD_MIN_LENGTH} characters long")
        if errors:
            raise ValidationError("Invalid user data", errors=errors)

    async def _ensure_available(
        self,
        username: Optional[str],
        email: Optional[str],
        exclude_id: Optional[int] = None,
    ) -> None:
        if username is not None and await self.repo.username_exists(username, exclude_id):
            raise DuplicateResourceError("Username already exists")
        if email is not None and await self.repo.email_exists(email, exclude_id):
            raise DuplicateResourceError("Email already exists")

    # ═══════════════════════════════════════════════════════════════════════════
    # CRUD
    # ═══════════════════════════════════════════════════════════════════════════

    async def list_users(self) -> list[UserResponse]:
        return [format_user(user) for user in await self.repo.list()]

    async def get_user(self, user_id: int) -> UserResponse:
        return format_user(await self.get_user_model(user_id))

    async def create_user(
        self,
        username: str,
        email: str,
        password: str,
        profile_picture_url: Optional[str] = None,
    ) -> UserResponse:
        """
        Create a user account.

        Raises:
            ValidationError: If a field breaks a format rule
            DuplicateResourceError: If the username or email is taken
        """
        username = username.strip()
        email = email.strip().lower()
        self._validate_fields(username, email, password)
        await self._ensure_available(username, email)

        user = await self.repo.create(
            username=username,
            email=email,
            password=password,
            profile_picture_url=profile_picture_url,
        )

        logger.info("User created", user_id=user.id, username=user.username)
        return format_user(user)

    async def update_user(self, user_id: int, **changes: Any) -> UserResponse:
        """
        Partially update a user. Only username, email, password and
        profile_picture_url can change.

        Raises:
            UserNotFoundError: If the user does not exist
            ValidationError: If a field breaks a format rule
            DuplicateResourceError: If the new username or email is taken
        """
        user = await self.get_user_model(user_id)

        username = changes.get("username")
        email = changes.get("email")
        if username is not None:
            username = username.strip()
        if email is not None:
            email = email.strip().lower()

        self._validate_fields(username, email, changes.get("password"))
        await self._ensure_available(username, email, exclude_id=user.id)

        user = await self.repo.update(
            user,
            username=username,
            email=email,
            password=changes.get("password"),
            profile_picture_url=changes.get("profile_picture_url"),
        )

        logger.info("User updated", user_id=user.id)
        return format_user(user)

    async def delete_user(self, user_id: int) -> None:
        """
        Delete a user with a best-effort cascade over ratings, shelves and
        follow lists.

        Raises:
            UserNotFoundError: If the user does not exist
        """
        user = await self.get_user_model(user_id)

        ratings = await self.rating_repo.list_for_user(user.id)
        for rating in ratings:
            await self.rating_repo.delete(rating)

        shelves = await self.shelf_repo.list_for_user(user.id)
        for shelf in shelves:
            await self.shelf_repo.delete(shelf)

        linked_ids = set(user.followers or []) | set(user.following or [])
        linked_ids.discard(user.id)
        for other in await self.repo.get_by_ids(sorted(linked_ids)):
            await self.backend.update(
                other,
                followers=[uid for uid in other.followers or [] if uid != user.id],
                following=[uid for uid in other.following or [] if uid != user.id],
            )

        await self.repo.delete(user)

        logger.info(
            "User deleted",
            user_id=user_id,
            ratings_removed=len(ratings),
            shelves_removed=len(shelves),
            links_removed=len(linked_ids),
        )

    # ═══════════════════════════════════════════════════════════════════════════
    # RECOMMENDATION VERSION
    # ═══════════════════════════════════════════════════════════════════════════

    async def get_recommendation_version(self, user_id: int) -> int:
        user = await self.get_user_model(user_id)
        return user.recommendation_version

    async def bump_recommendation_version(self, user: User, **extra_fields: Any) -> User:
        """
        Give the user a new recommendation version, strictly greater than
        the current one.

        Args:
            user: User record to update
            **extra_fields: Other fields written in the same update

        Returns:
            Updated user
        """
        version = next_version(user.recommendation_version)
        return await self.backend.update(user, recommendation_version=version, **extra_fields)
