import pytest

from mediashelf.shared.core.exceptions import (
    AlreadyFollowingError,
    NotFollowingError,
    SelfFollowError,
    UserNotFoundError,
)
from mediashelf.shared.models import User
from mediashelf.shared.services import SocialService


@pytest.fixture
def social(backend) -> SocialService:
    return SocialService(backend)


@pytest.mark.asyncio
async def test_follow_writes_both_sides(backend, social, alice, bob):
    await social.follow_user(alice.user_id, bob.user_id)

    assert (await backend.get(User, alice.user_id)).following == [bob.user_id]
    assert (await backend.get(User, bob.user_id)).followers == [alice.user_id]

    following = await social.get_user_following(alice.user_id)
    followers = await social.get_user_followers(bob.user_id)
    assert [user.username for user in following] == ["bob"]
    assert [user.username for user in followers] == ["alice"]


@pytest.mark.asyncio
async def test_unfollow_removes_both_sides(backend, social, alice, bob):
    await social.follow_user(alice.user_id, bob.user_id)
    await social.unfollow_user(alice.user_id, bob.user_id)

    assert (await backend.get(User, alice.user_id)).following == []
    assert (await backend.get(User, bob.user_id)).followers == []


@pytest.mark.asyncio
async def test_self_follow_changes_nothing(backend, social, alice):
    with pytest.raises(SelfFollowError):
        await social.follow_user(alice.user_id, alice.user_id)

    user = await backend.get(User, alice.user_id)
    assert user.following == []
    assert user.followers == []


@pytest.mark.asyncio
async def test_follow_twice_rejected(social, alice, bob):
    await social.follow_user(alice.user_id, bob.user_id)

    with pytest.raises(AlreadyFollowingError):
        await social.follow_user(alice.user_id, bob.user_id)


@pytest.mark.asyncio
async def test_unfollow_without_edge_rejected(social, alice, bob):
    with pytest.raises(NotFollowingError):
        await social.unfollow_user(alice.user_id, bob.user_id)


@pytest.mark.asyncio
async def test_follow_unknown_user(social, alice):
    with pytest.raises(UserNotFoundError):
        await social.follow_user(alice.user_id, 42)
