"""
Authentication Service

Signup and login for the placeholder authentication flow. Credentials are
compared as stored; there is no hashing and no token.

Usage:
======
    from mediashelf.shared.services.auth_service import AuthService

    service = AuthService(backend)
    user = await service.login("alice@x.com", "secret1")
"""

from typing import Optional

from mediashelf.shared.core.exceptions import AuthenticationError
from mediashelf.shared.core.logging import logger
from mediashelf.shared.db.backends import StorageBackend
from mediashelf.shared.repositories.user_repository import UserRepository
from mediashelf.shared.schemas.user import UserResponse
from mediashelf.shared.services.formatters import format_user
from mediashelf.shared.services.user_service import UserService


class AuthService:
    """
    Service for authentication-related business logic.

    Attributes:
        repo: UserRepository instance
        users: UserService used for account creation
    """

    def __init__(self, backend: StorageBackend) -> None:
        self.repo = UserRepository(backend)
        self.users = UserService(backend)

    async def signup(
        self,
        username: str,
        email: str,
        password: str,
        profile_picture_url: Optional[str] = None,
    ) -> UserResponse:
        """
        Register a new user.

        Same validation and uniqueness rules as UserService.create_user().

        Raises:
            ValidationError: If a field breaks a format rule
            DuplicateResourceError: If the username or email is taken
        """
        return await self.users.create_user(username, email, password, profile_picture_url)

    async def login(self, identifier: str, password: str) -> UserResponse:
        """
        Authenticate by email or username.

        Args:
            identifier: Email or username, case-insensitive
            password: Credential to compare

        Returns:
            The authenticated user

        Raises:
            AuthenticationError: If the identifier is unknown or the password is wrong
        """
        user = await self.repo.find_by_identifier(identifier)

        if user is None or user.password != password:
            logger.info("Login failed", identifier=identifier)
            raise AuthenticationError("Invalid credentials")

        logger.info("User logged in", user_id=user.id)
        return format_user(user)
