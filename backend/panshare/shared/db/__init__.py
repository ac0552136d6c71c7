"""
Database Module

Database connectivity and session management for panShare.

Architecture Overview:
======================
    FastAPI Route
        │  Dependency Injection: get_db()
        ▼
    AsyncSession (one per request, commit on success, rollback on error)
        │  Passed to Service → Repository
        ▼
    PostgreSQL Database

Usage in FastAPI:
=================
    from panshare.shared.db import get_db
    from panshare.shared.repositories import PanShareRepository

    @router.get("/pan-shares/{share_id}")
    async def get_share(share_id: UUID, db: AsyncSession = Depends(get_db)):
        repo = PanShareRepository(db)
        return await repo.find_by_id(share_id)
"""

from panshare.shared.db.session import (
    get_db,
    init_db,
    close_db,
    AsyncSessionLocal,
    engine,
)

__all__ = [
    "get_db",
    "init_db",
    "close_db",
    "AsyncSessionLocal",
    "engine",
]
