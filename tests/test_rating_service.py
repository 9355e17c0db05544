import pytest

from mediashelf.shared.core.exceptions import RatingNotFoundError, UserNotFoundError, WorkNotFoundError
from mediashelf.shared.models import Rating, User
from mediashelf.shared.services import UserService


@pytest.mark.asyncio
async def test_upsert_keeps_one_rating_per_user_and_work(backend, rating_service, alice, inception):
    first = await rating_service.create_or_update_rating(alice.user_id, inception.work_id, 3)
    second = await rating_service.create_or_update_rating(alice.user_id, inception.work_id, 5)

    assert second.rating_id == first.rating_id
    assert second.score == 5
    assert await backend.count(Rating, {"user_id": alice.user_id, "work_id": inception.work_id}) == 1


@pytest.mark.asyncio
async def test_rating_mirrors_into_rated_works(backend, rating_service, alice, inception):
    rating = await rating_service.create_or_update_rating(alice.user_id, inception.work_id, 4)

    user = await backend.get(User, alice.user_id)
    entry = user.rated_works[str(inception.work_id)]
    assert entry["score"] == 4
    assert entry["ratedAt"] == rating.rated_at.isoformat()

    ratings = await rating_service.get_user_ratings(alice.user_id)
    assert ratings[str(inception.work_id)].score == 4


@pytest.mark.asyncio
async def test_every_rating_write_bumps_version(backend, rating_service, alice, inception):
    users = UserService(backend)
    versions = [await users.get_recommendation_version(alice.user_id)]

    rating = await rating_service.create_or_update_rating(alice.user_id, inception.work_id, 2)
    versions.append(await users.get_recommendation_version(alice.user_id))

    await rating_service.create_or_update_rating(alice.user_id, inception.work_id, 4)
    versions.append(await users.get_recommendation_version(alice.user_id))

    await rating_service.update_rating(rating.rating_id, 5)
    versions.append(await users.get_recommendation_version(alice.user_id))

    await rating_service.delete_rating(rating.rating_id)
    versions.append(await users.get_recommendation_version(alice.user_id))

    assert versions == sorted(set(versions))


@pytest.mark.asyncio
async def test_average_rating(rating_service, backend, inception):
    users = UserService(backend)
    for index, score in enumerate((4, 5, 3)):
        user = await users.create_user(f"user{index}", f"user{index}@x.com", "secret1")
        await rating_service.create_or_update_rating(user.user_id, inception.work_id, score)

    average = await rating_service.get_work_average_rating(inception.work_id)

    assert average.average_rating == 4.0
    assert average.total_ratings == 3


@pytest.mark.asyncio
async def test_average_of_unrated_work_is_zero(rating_service, inception):
    average = await rating_service.get_work_average_rating(inception.work_id)

    assert average.average_rating == 0
    assert average.total_ratings == 0


@pytest.mark.asyncio
async def test_missing_user_or_work(rating_service, alice, inception):
    with pytest.raises(UserNotFoundError):
        await rating_service.create_or_update_rating(999, inception.work_id, 3)

    with pytest.raises(WorkNotFoundError):
        await rating_service.create_or_update_rating(alice.user_id, 999, 3)

    with pytest.raises(WorkNotFoundError):
        await rating_service.get_work_average_rating(999)


@pytest.mark.asyncio
async def test_delete_rating_removes_rated_works_entry(backend, rating_service, alice, inception, dune):
    rating = await rating_service.create_or_update_rating(alice.user_id, inception.work_id, 3)
    await rating_service.create_or_update_rating(alice.user_id, dune.work_id, 5)

    await rating_service.delete_rating(rating.rating_id)

    user = await backend.get(User, alice.user_id)
    assert list(user.rated_works) == [str(dune.work_id)]
    with pytest.raises(RatingNotFoundError):
        await rating_service.get_rating(rating.rating_id)


@pytest.mark.asyncio
async def test_list_work_ratings(rating_service, alice, bob, inception, dune):
    await rating_service.create_or_update_rating(alice.user_id, inception.work_id, 3)
    await rating_service.create_or_update_rating(bob.user_id, inception.work_id, 5)
    await rating_service.create_or_update_rating(bob.user_id, dune.work_id, 1)

    ratings = await rating_service.list_work_ratings(inception.work_id)

    assert sorted(rating.user_id for rating in ratings) == [alice.user_id, bob.user_id]
    assert len(await rating_service.list_ratings()) == 3
