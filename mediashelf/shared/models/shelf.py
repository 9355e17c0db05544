"""
Shelf Entity Model

A user-owned, named, ordered list of work ids (think playlist).

Work ids on a shelf are weak references: they are not checked against the
works table and are left in place when a work is deleted.

SAMPLE SHELF RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id          │ 1                                                              │
│ user_id     │ 2                                                              │
│ name        │ "Weekend Movies"                                               │
│ description │ "Films to watch on lazy weekends"                              │
│ works       │ [1, 6, 9]                                                      │
└──────────────────────────────────────────────────────────────────────────────┘
"""

from sqlalchemy import Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from mediashelf.shared.models.base import Base, JSONType, TimestampMixin


class Shelf(Base, TimestampMixin):
    """Shelf model. Names are unique per owner."""

    __tablename__ = "shelves"
    __table_args__ = (
        UniqueConstraint("user_id", "name", name="uq_shelves_user_name"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    user_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)

    name: Mapped[str] = mapped_column(String(50), nullable=False)

    description: Mapped[str] = mapped_column(String(500), nullable=False, default="")

    works: Mapped[list[int]] = mapped_column(JSONType, nullable=False, default=list)

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<Shelf(id={self.id}, user_id={self.user_id}, name={self.name})>"
