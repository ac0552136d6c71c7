"""
Authentication Handler

Handles user registration, login and "who am I" endpoints.

ARCHITECTURE:
=============
    Handler → Service → Repository → Model
          ↘ Utils  ↗

Handlers should ONLY:
- Parse HTTP requests
- Call service methods
- Format HTTP responses

Business logic belongs in the SERVICE layer, not here. Service errors
(DuplicateResourceError, AuthenticationError) propagate to the global
exception handlers, which render them as 409 / 401.
"""

from fastapi import APIRouter, Depends, status

from panshare.shared.models.user import User
from panshare.shared.schemas.user import (
    UserCreate,
    UserLogin,
    AuthResponse,
    UserResponse,
    CurrentUserResponse,
)
from panshare.shared.services.auth_service import AuthService
from panshare.api.dependencies import CurrentUser
from panshare.api.dependencies.services import get_auth_service


router = APIRouter()


def _auth_response(user: User, access_token: str, expires_in: int) -> AuthResponse:
    return AuthResponse(
        user=UserResponse(
            id=str(user.id),
            email=user.email,
            role=user.role,
            created_at=user.created_at,
        ),
        access_token=access_token,
        expires_in=expires_in,
    )


@router.post(
    "/register",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register(
    user_data: UserCreate,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Register a new user.

    Creates a new user account and returns authentication token.

    Raises:
        409: If email already registered
    """
    user, access_token, expires_in = await auth_service.register_user(
        email=user_data.email,
        password=user_data.password,
    )
    return _auth_response(user, access_token, expires_in)


@router.post("/login", response_model=AuthResponse)
async def login(
    credentials: UserLogin,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Authenticate user and return JWT token.

    Raises:
        401: If credentials are invalid
    """
    user, access_token, expires_in = await auth_service.login_user(
        email=credentials.email,
        password=credentials.password,
    )
    return _auth_response(user, access_token, expires_in)


@router.get("/me", response_model=CurrentUserResponse)
async def me(current_user: CurrentUser):
    """The signed-in caller, as described by their token."""
    return CurrentUserResponse(**current_user)
