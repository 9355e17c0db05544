"""
Work Entity Model

A catalog entry: a movie, series, album, book or graphic novel.

Works carry no rating column. The average score and the number of ratings
are derived from the Rating table on every read.

SAMPLE WORK RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id          │ 6                                                              │
│ title       │ "Inception"                                                    │
│ description │ "A thief who steals corporate secrets through dream-sharing..."│
│ type        │ movie                                                          │
│ year        │ 2010                                                           │
│ genres      │ ["Action", "Sci-Fi", "Thriller"]                               │
│ creator     │ "Christopher Nolan"                                            │
│ cover_url   │ "covers/inception.jpg"                                         │
│ found_at    │ "https://www.imdb.com/title/tt1375666/"                        │
└──────────────────────────────────────────────────────────────────────────────┘
"""

from typing import Optional

from sqlalchemy import Enum as SQLEnum, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from mediashelf.shared.models.base import Base, JSONType, TimestampMixin
from mediashelf.shared.models.enums import WorkType


class Work(Base, TimestampMixin):
    """
    Work model representing one catalog item.

    Attributes:
        id: Unique identifier
        title: Display title
        description: Free-text synopsis
        type: WorkType
        year: Release year
        genres: Genres from the fixed vocabulary
        creator: Director, author, artist or showrunner
        cover_url: Relative path or absolute URL of the cover image
        found_at: Link where the work can be found
    """

    __tablename__ = "works"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    title: Mapped[str] = mapped_column(String(255), nullable=False, index=True)

    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True, default=None)

    # Stored by value so "graphic-novel" lands in the column as-is
    type: Mapped[WorkType] = mapped_column(
        SQLEnum(
            WorkType,
            name="work_type",
            values_callable=lambda enum: [member.value for member in enum],
        ),
        nullable=False,
        index=True,
    )

    year: Mapped[Optional[int]] = mapped_column(Integer, nullable=True, index=True)

    genres: Mapped[list[str]] = mapped_column(JSONType, nullable=False, default=list)

    creator: Mapped[Optional[str]] = mapped_column(String(255), nullable=True, default=None)

    cover_url: Mapped[Optional[str]] = mapped_column(Text, nullable=True, default=None)

    found_at: Mapped[Optional[str]] = mapped_column(Text, nullable=True, default=None)

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<Work(id={self.id}, title={self.title}, type={self.type})>"
