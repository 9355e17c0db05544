import pytest

from mediashelf.shared.core.exceptions import (
    DuplicateResourceError,
    ShelfNotFoundError,
    UserNotFoundError,
    ValidationError,
)
from mediashelf.shared.services import ShelfService


@pytest.fixture
def shelves(backend) -> ShelfService:
    return ShelfService(backend)


@pytest.mark.asyncio
async def test_create_shelf_starts_empty(shelves, alice):
    shelf = await shelves.create_shelf(alice.user_id, "  Weekend  ", "Lazy days")

    assert shelf.name == "Weekend"
    assert shelf.description == "Lazy days"
    assert shelf.works == []


@pytest.mark.asyncio
async def test_shelf_names_unique_per_owner(shelves, alice, bob):
    await shelves.create_shelf(alice.user_id, "Favorites")

    with pytest.raises(DuplicateResourceError, match="Shelf name already exists"):
        await shelves.create_shelf(alice.user_id, "Favorites")

    # Another owner may reuse the name
    other = await shelves.create_shelf(bob.user_id, "Favorites")
    assert other.user_id == bob.user_id


@pytest.mark.asyncio
async def test_rename_to_taken_name_rejected(shelves, alice):
    await shelves.create_shelf(alice.user_id, "Favorites")
    later = await shelves.create_shelf(alice.user_id, "Later")

    with pytest.raises(DuplicateResourceError):
        await shelves.update_shelf(later.shelf_id, name="Favorites")


@pytest.mark.asyncio
async def test_add_and_remove_are_idempotent(shelves, alice, inception, dune):
    shelf = await shelves.create_shelf(alice.user_id, "Favorites")

    await shelves.add_work_to_shelf(shelf.shelf_id, inception.work_id)
    await shelves.add_work_to_shelf(shelf.shelf_id, dune.work_id)
    again = await shelves.add_work_to_shelf(shelf.shelf_id, inception.work_id)
    assert again.works == [inception.work_id, dune.work_id]

    await shelves.remove_work_from_shelf(shelf.shelf_id, inception.work_id)
    again = await shelves.remove_work_from_shelf(shelf.shelf_id, inception.work_id)
    assert again.works == [dune.work_id]
    assert await shelves.get_shelf_works(shelf.shelf_id) == [dune.work_id]


@pytest.mark.asyncio
async def test_update_requires_a_field(shelves, alice):
    shelf = await shelves.create_shelf(alice.user_id, "Favorites")

    with pytest.raises(ValidationError):
        await shelves.update_shelf(shelf.shelf_id)


@pytest.mark.asyncio
async def test_missing_owner_and_shelf(shelves):
    with pytest.raises(UserNotFoundError):
        await shelves.create_shelf(99, "Favorites")

    with pytest.raises(ShelfNotFoundError):
        await shelves.add_work_to_shelf(99, 1)


@pytest.mark.asyncio
async def test_delete_shelf(shelves, alice):
    shelf = await shelves.create_shelf(alice.user_id, "Favorites")
    await shelves.delete_shelf(shelf.shelf_id)

    assert await shelves.list_user_shelves(alice.user_id) == []
