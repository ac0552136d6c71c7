"""
Service Dependencies

FastAPI dependencies for service injection.

Services are created per request with that request's db session. The
storage adapter is the one exception: get_storage() returns a process-wide
instance so the MinIO client and bucket check are reused. Tests replace it
through app.dependency_overrides.

Usage:
======
    from panshare.api.dependencies.services import get_pan_share_service

    @router.get("/pan-shares/{share_id}")
    async def get_share(
        share_id: str,
        service: PanShareService = Depends(get_pan_share_service),
    ):
        return await service.get_public_share(share_id)
"""

from functools import lru_cache

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from panshare.shared.db import get_db
from panshare.shared.adapters.storage_adapter import StorageAdapter
from panshare.shared.services.auth_service import AuthService
from panshare.shared.services.cover_image_service import CoverImageService
from panshare.shared.services.pan_share_service import PanShareService


async def get_auth_service(
    db: AsyncSession = Depends(get_db),
) -> AuthService:
    """
    Dependency to get AuthService instance.

    Creates a new service instance per request with the request's db session.
    """
    return AuthService(db)


async def get_pan_share_service(
    db: AsyncSession = Depends(get_db),
) -> PanShareService:
    return PanShareService(db)


@lru_cache
def get_storage() -> StorageAdapter:
    """Shared object storage adapter."""
    return StorageAdapter()


async def get_cover_image_service(
    storage: StorageAdapter = Depends(get_storage),
) -> CoverImageService:
    return CoverImageService(storage)
