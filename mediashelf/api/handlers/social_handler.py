"""
Social Handler

Follow graph endpoints (prefix /api/users).
"""

from fastapi import APIRouter, Depends, Path

from mediashelf.api.dependencies.services import get_social_service
from mediashelf.shared.schemas.common import ApiResponse
from mediashelf.shared.schemas.user import UserSummary
from mediashelf.shared.services.social_service import SocialService


router = APIRouter()


@router.get("/{user_id}/following", response_model=ApiResponse[list[UserSummary]])
async def get_following(
    user_id: int = Path(gt=0),
    social_service: SocialService = Depends(get_social_service),
):
    following = await social_service.get_user_following(user_id)
    return ApiResponse(data=following, message="Following retrieved successfully")


@router.get("/{user_id}/followers", response_model=ApiResponse[list[UserSummary]])
async def get_followers(
    user_id: int = Path(gt=0),
    social_service: SocialService = Depends(get_social_service),
):
    followers = await social_service.get_user_followers(user_id)
    return ApiResponse(data=followers, message="Followers retrieved successfully")


@router.post("/{user_id}/following/{target_user_id}", response_model=ApiResponse[UserSummary])
async def follow_user(
    user_id: int = Path(gt=0),
    target_user_id: int = Path(gt=0),
    social_service: SocialService = Depends(get_social_service),
):
    """
    Follow another user.

    Raises:
        400: Self-follow or already following
        404: Either user does not exist
    """
    user = await social_service.follow_user(user_id, target_user_id)
    return ApiResponse(data=user, message="User followed successfully")


@router.delete("/{user_id}/following/{target_user_id}", response_model=ApiResponse[UserSummary])
async def unfollow_user(
    user_id: int = Path(gt=0),
    target_user_id: int = Path(gt=0),
    social_service: SocialService = Depends(get_social_service),
):
    """
    Stop following a user.

    Raises:
        400: Not following this user
        404: Either user does not exist
    """
    user = await social_service.unfollow_user(user_id, target_user_id)
    return ApiResponse(data=user, message="User unfollowed successfully")
