"""
Shelf Handler

Shelf endpoints (prefix /api/shelves). Shelves are created under their
owner at POST /api/users/{user_id}/shelves.
"""

from fastapi import APIRouter, Depends, Path, Response, status

from mediashelf.api.dependencies.services import get_shelf_service
from mediashelf.shared.schemas.common import ApiResponse
from mediashelf.shared.schemas.shelf import ShelfResponse, ShelfUpdate
from mediashelf.shared.services.shelf_service import ShelfService


router = APIRouter()


@router.get("", response_model=ApiResponse[list[ShelfResponse]])
async def list_shelves(shelf_service: ShelfService = Depends(get_shelf_service)):
    shelves = await shelf_service.list_shelves()
    return ApiResponse(data=shelves, message="Shelves retrieved successfully")


@router.get("/{shelf_id}", response_model=ApiResponse[ShelfResponse])
async def get_shelf(
    shelf_id: int = Path(gt=0),
    shelf_service: ShelfService = Depends(get_shelf_service),
):
    shelf = await shelf_service.get_shelf(shelf_id)
    return ApiResponse(data=shelf, message="Shelf retrieved successfully")


@router.put("/{shelf_id}", response_model=ApiResponse[ShelfResponse])
async def update_shelf(
    shelf_data: ShelfUpdate,
    shelf_id: int = Path(gt=0),
    shelf_service: ShelfService = Depends(get_shelf_service),
):
    """
    Rename a shelf or change its description.

    Raises:
        400: Neither field given, or the new name is taken
    """
    shelf = await shelf_service.update_shelf(shelf_id, name=shelf_data.name, description=shelf_data.description)
    return ApiResponse(data=shelf, message="Shelf updated successfully")


@router.delete("/{shelf_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_shelf(
    shelf_id: int = Path(gt=0),
    shelf_service: ShelfService = Depends(get_shelf_service),
):
    await shelf_service.delete_shelf(shelf_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{shelf_id}/works", response_model=ApiResponse[list[int]])
async def get_shelf_works(
    shelf_id: int = Path(gt=0),
    shelf_service: ShelfService = Depends(get_shelf_service),
):
    works = await shelf_service.get_shelf_works(shelf_id)
    return ApiResponse(data=works, message="Shelf works retrieved successfully")


@router.post("/{shelf_id}/works/{work_id}", response_model=ApiResponse[ShelfResponse])
async def add_work_to_shelf(
    shelf_id: int = Path(gt=0),
    work_id: int = Path(gt=0),
    shelf_service: ShelfService = Depends(get_shelf_service),
):
    """Add a work to the shelf. Adding it twice keeps a single entry."""
    shelf = await shelf_service.add_work_to_shelf(shelf_id, work_id)
    return ApiResponse(data=shelf, message="Work added to shelf successfully")


@router.delete("/{shelf_id}/works/{work_id}", response_model=ApiResponse[ShelfResponse])
async def remove_work_from_shelf(
    shelf_id: int = Path(gt=0),
    work_id: int = Path(gt=0),
    shelf_service: ShelfService = Depends(get_shelf_service),
):
    """Remove a work from the shelf. Removing an absent work is a no-op."""
    shelf = await shelf_service.remove_work_from_shelf(shelf_id, work_id)
    return ApiResponse(data=shelf, message="Work removed from shelf successfully")
