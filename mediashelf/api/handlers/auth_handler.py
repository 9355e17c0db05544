"""
Authentication Handler

Handles signup and login endpoints.

ARCHITECTURE:
=============
    Handler → Service → Repository → Backend

Handlers should ONLY:
- Parse HTTP requests
- Call service methods
- Format HTTP responses

Business logic belongs in the SERVICE layer, not here. Domain exceptions
propagate to the global exception handlers.
"""

from fastapi import APIRouter, Depends, status

from mediashelf.api.dependencies.services import get_auth_service
from mediashelf.shared.schemas.common import ApiResponse
from mediashelf.shared.schemas.user import UserCreate, UserLogin, UserResponse
from mediashelf.shared.services.auth_service import AuthService


router = APIRouter()


@router.post(
    "/signup",
    response_model=ApiResponse[UserResponse],
    status_code=status.HTTP_201_CREATED,
)
async def signup(
    user_data: UserCreate,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Register a new user.

    Raises:
        400: If the username or email is already taken
    """
    user = await auth_service.signup(
        username=user_data.username,
        email=user_data.email,
        password=user_data.password,
        profile_picture_url=user_data.profile_picture_url,
    )
    return ApiResponse(data=user, message="User registered successfully")


@router.post("/login", response_model=ApiResponse[UserResponse])
async def login(
    credentials: UserLogin,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Log in with email or username.

    Raises:
        401: If the identifier is unknown or the password is wrong
    """
    user = await auth_service.login(credentials.identifier, credentials.password)
    return ApiResponse(data=user, message="Login successful")
