"""
API Dependencies

FastAPI dependencies for injection into route handlers.

Dependencies:
=============
- Database: get_db() from panshare.shared.db, DbSession
- Auth: get_current_user(), CurrentUser,
  require_permission(), ShareReader, ShareWriter
- Pagination: get_pagination(), Pagination
- Services: get_*_service() functions, get_storage()

Type Aliases:
=============
Type aliases provide cleaner route signatures:

    # Instead of this:
    async def handler(
        db: AsyncSession = Depends(get_db),
        user: dict = Depends(get_current_user)
    ):

    # Write this:
    async def handler(db: DbSession, user: CurrentUser):
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from panshare.shared.db import get_db
from panshare.api.dependencies.auth import (
    get_optional_token,
    get_optional_user,
    get_current_user,
    require_permission,
    user_uuid,
    CurrentUser,
    ShareReader,
    ShareWriter,
)
from panshare.api.dependencies.pagination import get_pagination, Pagination
from panshare.api.dependencies.services import (
    get_auth_service,
    get_pan_share_service,
    get_cover_image_service,
    get_storage,
)

# Request-scoped session: committed on success, rolled back on error
DbSession = Annotated[AsyncSession, Depends(get_db)]

__all__ = [
    # Database
    "get_db",
    "DbSession",
    # Authentication
    "get_optional_token",
    "get_optional_user",
    "get_current_user",
    "require_permission",
    "user_uuid",
    "CurrentUser",
    "ShareReader",
    "ShareWriter",
    # Pagination
    "get_pagination",
    "Pagination",
    # Services
    "get_auth_service",
    "get_pan_share_service",
    "get_cover_image_service",
    "get_storage",
]
