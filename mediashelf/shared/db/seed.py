"""
Sample Catalog

Loads a small catalog into a backend so a fresh in-memory instance has
something to browse. Enabled with SEED_MOCK_DATA.

Records are written straight through the backend. Each seeded rating has a
matching entry in its owner's rated_works, and follow lists are symmetric.
"""

from datetime import datetime, timezone

from mediashelf.shared.core.logging import get_logger
from mediashelf.shared.db.backends import StorageBackend
from mediashelf.shared.models import Rating, Shelf, User, Work, WorkType


seed_logger = get_logger("seed")


SAMPLE_WORKS: list[dict] = [
    {
        "title": "The Lord of the Rings: The Fellowship of the Ring",
        "description": "A meek Hobbit from the Shire and eight companions set out on a journey to destroy the One Ring.",
        "type": WorkType.MOVIE,
        "year": 2001,
        "genres": ["Adventure", "Drama", "Fantasy"],
        "creator": "Peter Jackson",
        "cover_url": "covers/lotr1.jpg",
        "found_at": "https://www.imdb.com/title/tt0120737/",
    },
    {
        "title": "The Catcher in the Rye",
        "description": "A story about teenage angst and alienation.",
        "type": WorkType.BOOK,
        "year": 1951,
        "genres": ["Drama"],
        "creator": "J.D. Salinger",
        "cover_url": "covers/catcher.jpg",
        "found_at": "https://amazon.com/catcher-in-the-rye",
    },
    {
        "title": "Breaking Bad",
        "description": "A high school chemistry teacher turned methamphetamine manufacturer partners with a former student.",
        "type": WorkType.SERIES,
        "year": 2008,
        "genres": ["Crime", "Drama", "Thriller"],
        "creator": "Vince Gilligan",
        "cover_url": "covers/breaking-bad.jpg",
        "found_at": "https://www.netflix.com/title/70143836",
    },
    {
        "title": "The Dark Side of the Moon",
        "description": "Progressive rock album exploring conflict, greed, time and mental illness.",
        "type": WorkType.MUSIC,
        "year": 1973,
        "genres": ["Documentary"],
        "creator": "Pink Floyd",
        "cover_url": None,
        "found_at": "https://open.spotify.com/album/4LH4d3cOWNNsVw41Gqt2kv",
    },
    {
        "title": "1984",
        "description": "A dystopian novel and cautionary tale about the dangers of totalitarianism.",
        "type": WorkType.BOOK,
        "year": 1949,
        "genres": ["Drama", "Sci-Fi"],
        "creator": "George Orwell",
        "cover_url": "covers/1984.jpg",
        "found_at": "https://amazon.com/1984-George-Orwell",
    },
    {
        "title": "Inception",
        "description": "A thief who steals corporate secrets through dream-sharing technology is given the inverse task of planting an idea.",
        "type": WorkType.MOVIE,
        "year": 2010,
        "genres": ["Action", "Sci-Fi", "Thriller"],
        "creator": "Christopher Nolan",
        "cover_url": "covers/inception.jpg",
        "found_at": "https://www.imdb.com/title/tt1375666/",
    },
    {
        "title": "Stranger Things",
        "description": "A group of kids uncover supernatural mysteries in their small town.",
        "type": WorkType.SERIES,
        "year": 2016,
        "genres": ["Drama", "Fantasy", "Horror"],
        "creator": "The Duffer Brothers",
        "cover_url": None,
        "found_at": "https://www.netflix.com/title/80057281",
    },
    {
        "title": "Abbey Road",
        "description": "The eleventh studio album by the Beatles.",
        "type": WorkType.MUSIC,
        "year": 1969,
        "genres": ["History"],
        "creator": "The Beatles",
        "cover_url": "covers/abbey-road.jpg",
        "found_at": "https://open.spotify.com/album/0ETFjACtuP2ADo6LFhL6HN",
    },
    {
        "title": "Watchmen",
        "description": "Retired vigilantes investigate the murder of one of their own.",
        "type": WorkType.GRAPHIC_NOVEL,
        "year": 1987,
        "genres": ["Mystery", "Drama"],
        "creator": "Alan Moore",
        "cover_url": "covers/watchmen.jpg",
        "found_at": "https://www.dccomics.com/graphic-novels/watchmen",
    },
    {
        "title": "The Matrix",
        "description": "A hacker learns the world he lives in is a simulation.",
        "type": WorkType.MOVIE,
        "year": 1999,
        "genres": ["Action", "Sci-Fi"],
        "creator": "The Wachowskis",
        "cover_url": "covers/matrix.jpg",
        "found_at": "https://www.imdb.com/title/tt0133093/",
    },
    {
        "title": "Maus",
        "description": "A cartoonist interviews his father about surviving the Holocaust.",
        "type": WorkType.GRAPHIC_NOVEL,
        "year": 1991,
        "genres": ["Biography", "History"],
        "creator": "Art Spiegelman",
        "cover_url": None,
        "found_at": "https://www.penguinrandomhouse.com/books/maus",
    },
    {
        "title": "Spirited Away",
        "description": "A girl wanders into a world ruled by gods, witches and spirits.",
        "type": WorkType.MOVIE,
        "year": 2001,
        "genres": ["Animation", "Adventure", "Fantasy"],
        "creator": "Hayao Miyazaki",
        "cover_url": "covers/spirited-away.jpg",
        "found_at": "https://www.imdb.com/title/tt0245429/",
    },
]

SAMPLE_USERS: list[dict] = [
    {
        "username": "spiros",
        "email": "spiros@example.com",
        "password": "password123",
        "profile_picture_url": "profiles/1.jpg",
    },
    {
        "username": "maria",
        "email": "maria@example.com",
        "password": "password123",
        "profile_picture_url": "profiles/2.jpg",
    },
    {
        "username": "john",
        "email": "john@example.com",
        "password": "password123",
        "profile_picture_url": None,
    },
]

# (user index, work index, score, rated at)
SAMPLE_RATINGS: list[tuple[int, int, int, datetime]] = [
    (1, 0, 4, datetime(2025, 1, 10, 10, 0, tzinfo=timezone.utc)),
    (1, 1, 5, datetime(2025, 1, 11, 14, 30, tzinfo=timezone.utc)),
    (2, 0, 3, datetime(2025, 1, 9, 8, 15, tzinfo=timezone.utc)),
    (2, 2, 4, datetime(2025, 1, 12, 16, 45, tzinfo=timezone.utc)),
    (0, 5, 5, datetime(2025, 1, 13, 20, 0, tzinfo=timezone.utc)),
]

# (follower index, followed index)
SAMPLE_FOLLOWS: list[tuple[int, int]] = [(1, 0), (2, 0), (1, 2)]

# (owner index, name, description, work indexes)
SAMPLE_SHELVES: list[tuple[int, str, str, list[int]]] = [
    (0, "Favorites", "All-time favorites", [5, 9]),
    (1, "Weekend Movies", "Films to watch on lazy weekends", [0, 5, 11]),
    (2, "Reading List", "Books to get through this year", [1, 4]),
]


async def seed_sample_catalog(backend: StorageBackend) -> None:
    """
    Populate the backend with the sample catalog.

    Skipped when the backend already holds works.
    """
    if await backend.count(Work):
        seed_logger.info("Backend already has works, skipping sample catalog")
        return

    works = [await backend.create(Work, **fields) for fields in SAMPLE_WORKS]
    users = [await backend.create(User, **fields) for fields in SAMPLE_USERS]

    rated_works: dict[int, dict[str, dict]] = {user.id: {} for user in users}
    for user_index, work_index, score, rated_at in SAMPLE_RATINGS:
        user, work = users[user_index], works[work_index]
        await backend.create(Rating, user_id=user.id, work_id=work.id, score=score, rated_at=rated_at)
        rated_works[user.id][str(work.id)] = {"score": score, "ratedAt": rated_at.isoformat()}

    followers: dict[int, list[int]] = {user.id: [] for user in users}
    following: dict[int, list[int]] = {user.id: [] for user in users}
    for follower_index, followed_index in SAMPLE_FOLLOWS:
        follower, followed = users[follower_index], users[followed_index]
        following[follower.id].append(followed.id)
        followers[followed.id].append(follower.id)

    for user in users:
        await backend.update(
            user,
            rated_works=rated_works[user.id],
            followers=followers[user.id],
            following=following[user.id],
        )

    for owner_index, name, description, work_indexes in SAMPLE_SHELVES:
        await backend.create(
            Shelf,
            user_id=users[owner_index].id,
            name=name,
            description=description,
            works=[works[index].id for index in work_indexes],
        )

    seed_logger.info(
        "Sample catalog loaded",
        backend=backend.name,
        works=len(works),
        users=len(users),
        ratings=len(SAMPLE_RATINGS),
        shelves=len(SAMPLE_SHELVES),
    )
