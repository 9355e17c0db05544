"""
Rating Entity Model

One user's score for one work. The (user_id, work_id) pair is unique, so a
second rating for the same pair is an update of the existing row.

SAMPLE RATING RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id        │ 4                                                                │
│ user_id   │ 3                                                                │
│ work_id   │ 6                                                                │
│ score     │ 5                                                                │
│ rated_at  │ 2025-01-12T16:45:00Z                                             │
└──────────────────────────────────────────────────────────────────────────────┘
"""

from datetime import datetime

from sqlalchemy import Integer, SmallInteger, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from mediashelf.shared.models.base import Base, UTCDateTime
from mediashelf.shared.utils.clock import utcnow


class Rating(Base):
    """
    Rating model, the source of truth for scores.

    user_id and work_id are plain indexed integers. Deleting a user or a
    work removes its ratings through the service layer cascade.
    """

    __tablename__ = "ratings"
    __table_args__ = (
        UniqueConstraint("user_id", "work_id", name="uq_ratings_user_work"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    user_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)

    work_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)

    # 1-5 inclusive
    score: Mapped[int] = mapped_column(SmallInteger, nullable=False)

    rated_at: Mapped[datetime] = mapped_column(
        UTCDateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<Rating(id={self.id}, user_id={self.user_id}, work_id={self.work_id}, score={self.score})>"
