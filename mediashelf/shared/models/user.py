"""
User Entity Model

Represents a registered application user together with the denormalized
rating index and the follow graph adjacency lists.

SAMPLE USER RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id                      │ 2                                                  │
│ username                │ "maria"                                            │
│ email                   │ "maria@example.com"                                │
│ password                │ "password123"                                      │
│ profile_picture_url     │ "profiles/2.jpg"                                   │
│ rated_works             │ {"1": {"score": 4, "ratedAt": "2025-01-10T..."}}   │
│ followers               │ [3]                                                │
│ following               │ [1, 3]                                             │
│ recommendation_version  │ 1736503200000                                      │
│ created_at              │ 2025-01-01T00:00:00Z                               │
│ updated_at              │ 2025-01-10T10:00:00Z                               │
└──────────────────────────────────────────────────────────────────────────────┘

rated_works mirrors the Rating table: key is the work id as a string, value
holds the score and the ISO timestamp of the matching Rating row.
"""

from typing import Any, Optional

from sqlalchemy import BigInteger, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from mediashelf.shared.models.base import Base, JSONType, TimestampMixin
from mediashelf.shared.utils.clock import now_ms


class User(Base, TimestampMixin):
    """
    User model representing a registered application user.

    Attributes:
        id: Unique identifier
        username: Display/login name (unique, 3-20 chars)
        email: Email address (unique, stored lowercased)
        password: Credential as supplied at signup
        profile_picture_url: Relative path or absolute URL, nullable
        rated_works: Work id → {score, ratedAt}
        followers: Ids of users following this user
        following: Ids of users this user follows
        recommendation_version: Millisecond token bumped on every rating write
    """

    __tablename__ = "users"

    # ═══════════════════════════════════════════════════════════════════════════
    # PRIMARY KEY
    # ═══════════════════════════════════════════════════════════════════════════

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # ═══════════════════════════════════════════════════════════════════════════
    # IDENTITY
    # ═══════════════════════════════════════════════════════════════════════════

    username: Mapped[str] = mapped_column(
        String(20),
        unique=True,
        nullable=False,
        index=True,
    )

    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
    )

    # Placeholder credential, compared as-is on login
    password: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )

    profile_picture_url: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True,
        default=None,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # RATINGS & SOCIAL
    # ═══════════════════════════════════════════════════════════════════════════

    rated_works: Mapped[dict[str, Any]] = mapped_column(
        JSONType,
        nullable=False,
        default=dict,
    )

    followers: Mapped[list[int]] = mapped_column(
        JSONType,
        nullable=False,
        default=list,
    )

    following: Mapped[list[int]] = mapped_column(
        JSONType,
        nullable=False,
        default=list,
    )

    recommendation_version: Mapped[int] = mapped_column(
        BigInteger,
        nullable=False,
        default=now_ms,
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<User(id={self.id}, username={self.username})>"
