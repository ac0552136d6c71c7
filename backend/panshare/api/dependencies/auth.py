"""
Authentication Dependencies

FastAPI dependencies for user authentication and authorization.

Dependency Hierarchy:
=====================
    get_optional_token()       ← Decode the Bearer token if one was sent
           │
           ▼
    get_optional_user()        ← User dict or None
           │
           ▼
    get_current_user()         ← User dict, 401 when absent (CurrentUser)
           │
           ▼
    require_permission(p)      ← 403 unless the token grants p

The user dict carries what the token carries:

    {"user_id": "...", "email": "...", "role": "admin",
     "permissions": ["pan_shares.read", "pan_shares.write"]}

Usage:
======
    from panshare.api.dependencies.auth import CurrentUser, require_permission

    @router.get("/me")
    async def get_me(current_user: CurrentUser):
        return current_user

    @router.get("/admin/things", dependencies=[Depends(require_permission(Permission.PAN_SHARES_READ))])
    async def list_things(): ...
"""

from typing import Annotated, Callable, Optional
from uuid import UUID

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from panshare.config.settings import settings
from panshare.shared.core.exceptions import AuthenticationError, AuthorizationError
from panshare.shared.models.enums import Permission
from panshare.shared.utils.security import SecurityUtils


# auto_error=False: a missing header is a 401 from us, not FastAPI's 403
security = HTTPBearer(auto_error=False)


async def get_optional_token(
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(security)] = None,
) -> Optional[dict]:
    """
    Decode the Bearer token if present.

    Returns:
        Decoded token payload, or None when no Authorization header was sent

    Raises:
        AuthenticationError: If a token was sent but is invalid or expired
    """
    if not credentials:
        return None

    try:
        return SecurityUtils.decode_access_token(
            credentials.credentials,
            settings.SECRET_KEY,
            settings.JWT_ALGORITHM,
        )
    except ValueError as e:
        raise AuthenticationError(str(e)) from e


async def get_optional_user(
    token: Annotated[Optional[dict], Depends(get_optional_token)],
) -> Optional[dict]:
    """Current user if signed in, else None."""
    if token is None:
        return None

    user_id = token.get("user_id")
    if not user_id:
        raise AuthenticationError("Invalid token payload")

    return {
        "user_id": user_id,
        "email": token.get("email"),
        "role": token.get("role"),
        "permissions": list(token.get("permissions") or []),
    }


async def get_current_user(
    user: Annotated[Optional[dict], Depends(get_optional_user)],
) -> dict:
    """
    Get current authenticated user from token.

    Raises:
        AuthenticationError: If no token was sent
    """
    if user is None:
        raise AuthenticationError()
    return user


def require_permission(permission: Permission) -> Callable:
    """
    Build a dependency that demands one permission code.

    Example:
        AdminReader = Annotated[dict, Depends(require_permission(Permission.PAN_SHARES_READ))]
    """

    async def checker(
        user: Annotated[dict, Depends(get_current_user)],
    ) -> dict:
        if permission.value not in user["permissions"]:
            raise AuthorizationError(
                "Permission denied",
                details={"required": permission.value},
            )
        return user

    return checker


def user_uuid(user: dict) -> UUID:
    """The user id of a token as a UUID."""
    try:
        return UUID(str(user["user_id"]))
    except ValueError as e:
        raise AuthenticationError("Invalid token payload") from e


# ═══════════════════════════════════════════════════════════════════════════════
# TYPE ALIASES
# ═══════════════════════════════════════════════════════════════════════════════

# Authenticated user (most common dependency)
CurrentUser = Annotated[dict, Depends(get_current_user)]

# Admin surface
ShareReader = Annotated[dict, Depends(require_permission(Permission.PAN_SHARES_READ))]
ShareWriter = Annotated[dict, Depends(require_permission(Permission.PAN_SHARES_WRITE))]