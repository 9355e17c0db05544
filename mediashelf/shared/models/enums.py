"""
Enums used across the application.
"""

from enum import Enum


class WorkType(str, Enum):
    """Kind of media a work belongs to."""

    MOVIE = "movie"
    SERIES = "series"
    MUSIC = "music"
    BOOK = "book"
    GRAPHIC_NOVEL = "graphic-novel"


class SearchItemType(str, Enum):
    """Which collections a search covers."""

    WORK = "work"
    USER = "user"


# Fixed genre vocabulary for works
GENRES: tuple[str, ...] = (
    "Action",
    "Adventure",
    "Animation",
    "Biography",
    "Comedy",
    "Crime",
    "Documentary",
    "Drama",
    "Fantasy",
    "History",
    "Horror",
    "Mystery",
    "Romance",
    "Sci-Fi",
    "Thriller",
)
