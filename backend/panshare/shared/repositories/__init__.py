"""
Repository Pattern Implementations

Repositories encapsulate database queries and provide a clean API for data
access. Each one is constructed with the request's AsyncSession.

Repository Hierarchy:
=====================
    BaseRepository[ModelType]       ← Generic CRUD operations
         │
         ├── UserRepository         ← Account lookups
         └── PanShareRepository     ← Catalog queries & review transitions

Usage Example:
==============
    from panshare.shared.repositories import PanShareRepository, PanShareFilter

    async def pending_queue(db: AsyncSession):
        repo = PanShareRepository(db)
        criteria = PanShareFilter(status=PanShareStatus.PENDING)
        return await repo.list(criteria, page=1, limit=50)
"""

from panshare.shared.repositories.base import BaseRepository
from panshare.shared.repositories.user_repository import UserRepository
from panshare.shared.repositories.pan_share_repository import (
    PanShareRepository,
    PanShareFilter,
)

__all__ = [
    # Base class
    "BaseRepository",
    # Entity-specific repositories
    "UserRepository",
    "PanShareRepository",
    "PanShareFilter",
]
