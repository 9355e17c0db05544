"""
User Repository

Storage operations specific to the User model.

Common Operations:
==================
- get_by_email()       → Find user by email address
- get_by_username()    → Find user by exact username
- find_by_identifier() → Login lookup by email or username
- search()             → Substring search over username/email
"""

from typing import Optional

from mediashelf.shared.db.backends import StorageBackend
from mediashelf.shared.models.user import User
from mediashelf.shared.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Repository for User storage operations."""

    def __init__(self, backend: StorageBackend) -> None:
        super().__init__(User, backend)

    # ═══════════════════════════════════════════════════════════════════════════
    # LOOKUP METHODS
    # ═══════════════════════════════════════════════════════════════════════════

    async def get_by_email(self, email: str) -> Optional[User]:
        """
        Get user by email address.

        Emails are stored lowercased, so the lookup is case-insensitive.
        """
        return await self.find_one(email=email.strip().lower())

    async def get_by_username(self, username: str) -> Optional[User]:
        """Get user by exact username."""
        return await self.find_one(username=username.strip())

    async def find_by_identifier(self, identifier: str) -> Optional[User]:
        """
        Find a user whose email or username matches the identifier,
        ignoring case.
        """
        needle = identifier.strip().lower()
        user = await self.get_by_email(needle)
        if user:
            return user

        for candidate in await self.list():
            if candidate.username.lower() == needle:
                return candidate
        return None

    async def search(self, query: Optional[str] = None) -> list[User]:
        """
        Users whose username or email contains the query, ignoring case,
        sorted by username.
        """
        users = await self.list(order_by="username")
        needle = (query or "").strip().lower()
        if not needle:
            return users
        return [
            user for user in users
            if needle in user.username.lower() or needle in user.email.lower()
        ]

    async def username_exists(self, username: str, exclude_id: Optional[int] = None) -> bool:
        """Check if a username is taken by another user."""
        user = await self.get_by_username(username)
        return user is not None and user.id != exclude_id

    async def email_exists(self, email: str, exclude_id: Optional[int] = None) -> bool:
        """Check if an email is registered to another user."""
        user = await self.get_by_email(email)
        return user is not None and user.id != exclude_id
