"""
PanShare Repository

Database operations over the pan_shares relation.

Every lookup is scoped by soft deletion: rows with deleted_at set are
invisible unless a caller asks for them with include_deleted. The
repository performs no business validation; callers trim and check
required fields before add()/update().

Common Operations:
==================
- add() / update() / soft_delete()  → Mutations
- find() / find_by_id()             → Single-row lookups
- list() / count()                  → Filtered, paginated catalog queries
- approve() / reject()              → Review transitions
- list_published() / list_for_user() and their count_*() twins

Filtering:
==========
    criteria = PanShareFilter(status=PanShareStatus.PUBLISHED, search="linear")
    shares = await repo.list(criteria, page=2, limit=20)
    total = await repo.count(criteria)

    SQL Generated (roughly):
        SELECT * FROM pan_shares
        WHERE status = 'published'
          AND (lower(title) LIKE '%linear%' OR lower(description) LIKE '%linear%')
          AND deleted_at IS NULL
        ORDER BY created_at DESC, id DESC
        LIMIT 20 OFFSET 20
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, List, Optional, Sequence
from uuid import UUID

from sqlalchemy import Select, or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.functions import count as sql_count

from panshare.shared.repositories.base import BaseRepository
from panshare.shared.models.pan_share import PanShare
from panshare.shared.models.enums import DiskType, PanShareStatus


@dataclass(frozen=True)
class PanShareFilter:
    """
    Filter criteria for list() and count().

    Each field that is set becomes one AND clause; unset fields impose
    no constraint. An empty ids sequence matches nothing.
    """

    ids: Optional[Sequence[UUID]] = None
    user_id: Optional[UUID] = None
    disk_type: Optional[DiskType] = None
    status: Optional[PanShareStatus] = None
    search: Optional[str] = None
    include_deleted: bool = False

    def apply(self, query: Select) -> Select:
        if self.ids is not None:
            query = query.where(PanShare.id.in_(list(self.ids)))
        if self.user_id is not None:
            query = query.where(PanShare.user_id == self.user_id)
        if self.disk_type is not None:
            query = query.where(PanShare.disk_type == self.disk_type)
        if self.status is not None:
            query = query.where(PanShare.status == self.status)
        if self.search:
            query = query.where(
                or_(
                    PanShare.title.icontains(self.search, autoescape=True),
                    PanShare.description.icontains(self.search, autoescape=True),
                )
            )
        if not self.include_deleted:
            query = query.where(PanShare.deleted_at.is_(None))
        return query


class PanShareRepository(BaseRepository[PanShare]):
    """
    Repository for PanShare database operations.

    Owns the catalog queries (filter + pagination) and the review
    transitions. Status writes are not policed here; any status can be
    written by a caller that chooses to.
    """

    # Everything except id and created_at
    mutable_fields = frozenset(
        {
            "title",
            "description",
            "content",
            "cover_image",
            "disk_type",
            "share_url",
            "share_code",
            "expired_at",
            "status",
            "user_id",
            "deleted_at",
        }
    )

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize PanShareRepository.

        Args:
            session: Async database session
        """
        super().__init__(PanShare, session)

    # ═══════════════════════════════════════════════════════════════════════════
    # MUTATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def add(self, **data: Any) -> PanShare:
        """
        Insert a new share and return it.

        Fails with an IntegrityError when a NOT NULL column (title,
        disk_type, share_url) is missing.
        """
        return await self.create(**data)

    async def update(self, record_id: UUID, **changes: Any) -> Optional[PanShare]:
        """
        Update a share's mutable fields.

        Args:
            record_id: Share UUID
            **changes: Partial field set; id and created_at are ignored

        Returns:
            The updated share, or None if it does not exist or was soft-deleted
        """
        share = await self.find_by_id(record_id)
        return await self._apply_update(share, changes)

    async def soft_delete(self, record_id: UUID) -> Optional[PanShare]:
        """
        Archive a share and stamp deleted_at in a single update.

        Returns:
            The archived share, or None if it was not found
        """
        return await self.update(
            record_id,
            status=PanShareStatus.ARCHIVED,
            deleted_at=datetime.now(timezone.utc),
        )

    async def approve(self, record_id: UUID) -> Optional[PanShare]:
        """Publish a share."""
        return await self.update(record_id, status=PanShareStatus.PUBLISHED)

    async def reject(self, record_id: UUID) -> Optional[PanShare]:
        """Reject a share."""
        return await self.update(record_id, status=PanShareStatus.REJECTED)

    # ═══════════════════════════════════════════════════════════════════════════
    # LOOKUP METHODS
    # ═══════════════════════════════════════════════════════════════════════════

    async def find(
        self,
        *,
        record_id: Optional[UUID] = None,
        status: Optional[PanShareStatus] = None,
        include_deleted: bool = False,
    ) -> Optional[PanShare]:
        """
        Find at most one share matching every given condition.

        Example:
            published = await repo.find(record_id=share_id, status=PanShareStatus.PUBLISHED)
        """
        query = select(PanShare)
        if record_id is not None:
            query = query.where(PanShare.id == record_id)
        if status is not None:
            query = query.where(PanShare.status == status)
        if not include_deleted:
            query = query.where(PanShare.deleted_at.is_(None))

        result = await self.session.execute(query.limit(1))
        return result.scalar_one_or_none()

    async def find_by_id(
        self,
        record_id: UUID,
        include_deleted: bool = False,
    ) -> Optional[PanShare]:
        """Find a share by id; soft-deleted rows only with include_deleted."""
        return await self.find(record_id=record_id, include_deleted=include_deleted)

    # ═══════════════════════════════════════════════════════════════════════════
    # CATALOG QUERIES
    # ═══════════════════════════════════════════════════════════════════════════

    async def list(
        self,
        criteria: Optional[PanShareFilter] = None,
        *,
        page: int = 1,
        limit: int = 20,
    ) -> list[PanShare]:
        """
        List shares, newest first.

        Args:
            criteria: Filters to AND together (None = no filters)
            page: 1-indexed page number
            limit: Page size

        Returns:
            Rows [(page-1)*limit, page*limit) of the ordered, filtered set
        """
        criteria = criteria or PanShareFilter()
        query = (
            criteria.apply(select(PanShare))
            .order_by(PanShare.created_at.desc(), PanShare.id.desc())
            .offset((page - 1) * limit)
            .limit(limit)
        )
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def count(self, criteria: Optional[PanShareFilter] = None) -> int:
        """Count shares matching the same filters list() accepts."""
        criteria = criteria or PanShareFilter()
        query = criteria.apply(select(sql_count()).select_from(PanShare))
        result = await self.session.execute(query)
        return result.scalar() or 0

    # ═══════════════════════════════════════════════════════════════════════════
    # SCOPED CONVENIENCE WRAPPERS
    # ═══════════════════════════════════════════════════════════════════════════

    async def list_published(
        self,
        *,
        disk_type: Optional[DiskType] = None,
        search: Optional[str] = None,
        page: int = 1,
        limit: int = 20,
    ) -> List[PanShare]:
        """Public catalog page."""
        criteria = PanShareFilter(
            disk_type=disk_type,
            search=search,
            status=PanShareStatus.PUBLISHED,
        )
        return await self.list(criteria, page=page, limit=limit)

    async def count_published(
        self,
        *,
        disk_type: Optional[DiskType] = None,
        search: Optional[str] = None,
    ) -> int:
        criteria = PanShareFilter(
            disk_type=disk_type,
            search=search,
            status=PanShareStatus.PUBLISHED,
        )
        return await self.count(criteria)

    async def list_for_user(
        self,
        user_id: UUID,
        *,
        status: Optional[PanShareStatus] = None,
        page: int = 1,
        limit: int = 20,
    ) -> List[PanShare]:
        """A user's own shares, any status unless one is given."""
        criteria = PanShareFilter(user_id=user_id, status=status)
        return await self.list(criteria, page=page, limit=limit)

    async def count_for_user(
        self,
        user_id: UUID,
        *,
        status: Optional[PanShareStatus] = None,
    ) -> int:
        return await self.count(PanShareFilter(user_id=user_id, status=status))
