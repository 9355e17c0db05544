import pytest

from mediashelf.shared.core.exceptions import (
    AuthenticationError,
    DuplicateResourceError,
    UserNotFoundError,
    ValidationError,
)
from mediashelf.shared.models import Rating, Shelf, User
from mediashelf.shared.services import AuthService, ShelfService, SocialService, UserService


@pytest.fixture
def users(backend) -> UserService:
    return UserService(backend)


@pytest.mark.asyncio
async def test_create_user_normalizes_email(users):
    user = await users.create_user(" carol ", "Carol@X.com", "secret1")

    assert user.username == "carol"
    assert user.email == "carol@x.com"
    assert user.rated_works == 0
    assert user.profile_picture_url.endswith("/default-profile.jpg")


@pytest.mark.asyncio
async def test_duplicate_username_and_email(users, alice):
    with pytest.raises(DuplicateResourceError, match="Username already exists"):
        await users.create_user("alice", "other@x.com", "secret1")

    with pytest.raises(DuplicateResourceError, match="Email already exists"):
        await users.create_user("alice2", "ALICE@x.com", "secret1")


@pytest.mark.asyncio
async def test_field_rules(users):
    with pytest.raises(ValidationError) as exc_info:
        await users.create_user("al", "not-an-email", "123")

    assert len(exc_info.value.details["errors"]) == 3


@pytest.mark.asyncio
async def test_update_user(users, alice, bob):
    updated = await users.update_user(alice.user_id, username="alicia")
    assert updated.username == "alicia"
    assert updated.email == "alice@x.com"

    with pytest.raises(DuplicateResourceError):
        await users.update_user(alice.user_id, email="bob@x.com")


@pytest.mark.asyncio
async def test_delete_user_cascades(backend, users, rating_service, alice, bob, inception):
    social = SocialService(backend)
    await social.follow_user(alice.user_id, bob.user_id)
    await social.follow_user(bob.user_id, alice.user_id)
    await rating_service.create_or_update_rating(alice.user_id, inception.work_id, 4)
    await ShelfService(backend).create_shelf(alice.user_id, "Favorites")

    await users.delete_user(alice.user_id)

    assert await backend.get(User, alice.user_id) is None
    assert await backend.count(Rating, {"user_id": alice.user_id}) == 0
    assert await backend.count(Shelf, {"user_id": alice.user_id}) == 0

    remaining = await backend.get(User, bob.user_id)
    assert remaining.followers == []
    assert remaining.following == []

    with pytest.raises(UserNotFoundError):
        await users.get_user(alice.user_id)


@pytest.mark.asyncio
async def test_login_by_email_or_username(backend, alice):
    auth = AuthService(backend)

    assert (await auth.login("ALICE@x.com", "secret1")).user_id == alice.user_id
    assert (await auth.login("alice", "secret1")).user_id == alice.user_id

    with pytest.raises(AuthenticationError):
        await auth.login("alice", "wrong-password")

    with pytest.raises(AuthenticationError):
        await auth.login("nobody", "secret1")
