"""
PanShare Service

Business logic for the share catalog: submissions, the public catalog,
the gated secret and the admin review workflow.

Lifecycle:
==========
    submit_share()           admin_create()
          │                        │
          ▼                        ▼
      PENDING ──approve()──► PUBLISHED ◄── admin_update(status=...)
          │                        │
          └──reject()──► REJECTED  │
                                   ▼
                      delete() → ARCHIVED + deleted_at

Only PUBLISHED, non-deleted shares are visible through the public
catalog and the secret endpoint.

Input Handling:
===============
Request bodies arrive as loose optional strings. Every text field is
trimmed; empty strings become None. title and shareUrl are required,
diskType must be a known disk type, expiredAt must parse as an ISO date
or datetime (naive values are taken as UTC).

Usage:
======
    service = PanShareService(db)
    share = await service.submit_share(user_id, request)
    page = await service.list_public(page=1, limit=20, search="linear")
"""

import asyncio
from datetime import datetime, timezone
from typing import Any, Optional, Tuple, Union
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from panshare.config.settings import settings
from panshare.shared.core.exceptions import (
    AuthenticationError,
    ShareNotFoundError,
    ValidationError,
)
from panshare.shared.core.logging import logger
from panshare.shared.models.enums import DiskType, PanShareStatus
from panshare.shared.models.pan_share import PanShare
from panshare.shared.repositories.pan_share_repository import (
    PanShareFilter,
    PanShareRepository,
)
from panshare.shared.schemas.pan_share import AdminShareForm, SubmitShareRequest


# ═══════════════════════════════════════════════════════════════════════════════
# INPUT NORMALIZATION
# ═══════════════════════════════════════════════════════════════════════════════


def clean_text(value: Optional[str]) -> Optional[str]:
    """Trim a text field; blank becomes None."""
    if value is None:
        return None
    value = value.strip()
    return value or None


def parse_disk_type(value: Optional[str]) -> DiskType:
    value = clean_text(value)
    if value is None:
        raise ValidationError("Disk type is required", details={"field": "diskType"})
    try:
        return DiskType(value.lower())
    except ValueError:
        raise ValidationError(f"Invalid disk type: {value}", details={"field": "diskType"})


def parse_status(value: Optional[str]) -> PanShareStatus:
    value = clean_text(value)
    if value is None:
        raise ValidationError("Status is required", details={"field": "status"})
    try:
        return PanShareStatus(value.lower())
    except ValueError:
        raise ValidationError(f"Invalid status: {value}", details={"field": "status"})


def parse_expired_at(value: Optional[str]) -> Optional[datetime]:
    """
    Parse an ISO 8601 date or datetime.

    "2025-01-31" and "2025-01-31T12:00:00Z" are both accepted; a value
    without an offset is taken as UTC.
    """
    value = clean_text(value)
    if value is None:
        return None
    if value.endswith(("Z", "z")):
        value = value[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        raise ValidationError("Invalid expiration date", details={"field": "expiredAt"})
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def parse_share_id(value: Union[str, UUID]) -> UUID:
    """
    Share ids arrive from the URL as opaque strings.

    Raises:
        ShareNotFoundError: The value is not a share id
    """
    if isinstance(value, UUID):
        return value
    try:
        return UUID(value.strip())
    except ValueError:
        raise ShareNotFoundError()


def share_fields(request: SubmitShareRequest) -> dict[str, Any]:
    """
    Validate a submission body and map it to column values.

    Raises:
        ValidationError: Missing title/shareUrl, bad diskType or bad expiredAt
    """
    title = clean_text(request.title)
    if title is None:
        raise ValidationError("Title is required", details={"field": "title"})

    share_url = clean_text(request.share_url)
    if share_url is None:
        raise ValidationError("Share URL is required", details={"field": "shareUrl"})

    return {
        "title": title,
        "description": clean_text(request.description),
        "cover_image": clean_text(request.cover_image),
        "disk_type": parse_disk_type(request.disk_type),
        "share_url": share_url,
        "share_code": clean_text(request.share_code),
        "expired_at": parse_expired_at(request.expired_at),
    }


class PanShareService:
    """
    Service for share-related business logic.

    Attributes:
        session: Database session
        repo: PanShareRepository instance
        reveal_delay_ms: Pause before a secret is returned
    """

    def __init__(
        self,
        session: AsyncSession,
        reveal_delay_ms: Optional[int] = None,
    ) -> None:
        self.session = session
        self.repo = PanShareRepository(session)
        self.reveal_delay_ms = (
            settings.SECRET_REVEAL_DELAY_MS if reveal_delay_ms is None else reveal_delay_ms
        )

    # ═══════════════════════════════════════════════════════════════════════════
    # SUBMISSION
    # ═══════════════════════════════════════════════════════════════════════════

    async def submit_share(self, user_id: UUID, request: SubmitShareRequest) -> PanShare:
        """
        Store a user's submission for review.

        The share always starts PENDING regardless of anything in the body.
        """
        fields = share_fields(request)
        share = await self.repo.add(
            **fields,
            status=PanShareStatus.PENDING,
            user_id=user_id,
        )
        logger.info(
            "Share submitted",
            share_id=str(share.id),
            user_id=str(user_id),
            disk_type=share.disk_type.value,
        )
        return share

    # ═══════════════════════════════════════════════════════════════════════════
    # PUBLIC CATALOG
    # ═══════════════════════════════════════════════════════════════════════════

    async def list_public(
        self,
        *,
        page: int = 1,
        limit: int = 20,
        search: Optional[str] = None,
        disk_type: Optional[DiskType] = None,
    ) -> Tuple[list[PanShare], int]:
        """
        One page of the published catalog.

        Returns:
            Tuple of (shares, total matching the filters)
        """
        search = clean_text(search)
        shares = await self.repo.list_published(
            disk_type=disk_type,
            search=search,
            page=page,
            limit=limit,
        )
        total = await self.repo.count_published(disk_type=disk_type, search=search)
        return shares, total

    async def get_public_share(self, share_id: Union[str, UUID]) -> PanShare:
        """
        A published share by id.

        Raises:
            ShareNotFoundError: Missing, soft-deleted or not published
        """
        share_id = parse_share_id(share_id)
        share = await self.repo.find(record_id=share_id, status=PanShareStatus.PUBLISHED)
        if share is None:
            raise ShareNotFoundError()
        return share

    async def list_user_shares(
        self,
        user_id: UUID,
        *,
        status: Optional[PanShareStatus] = None,
        page: int = 1,
        limit: int = 20,
    ) -> Tuple[list[PanShare], int]:
        """The caller's own shares in any status."""
        shares = await self.repo.list_for_user(user_id, status=status, page=page, limit=limit)
        total = await self.repo.count_for_user(user_id, status=status)
        return shares, total

    async def reveal_secret(
        self,
        share_id: Union[str, UUID],
        current_user: Optional[dict],
    ) -> Tuple[str, Optional[str]]:
        """
        Disclose the link and extraction code of a published share.

        Missing and unpublished shares produce the same error, so the
        endpoint never reveals whether a pending submission exists.

        Returns:
            Tuple of (share_url, share_code)

        Raises:
            AuthenticationError: No signed-in caller
            ShareNotFoundError: Missing, soft-deleted or not published
        """
        if not current_user:
            raise AuthenticationError()

        share_id = parse_share_id(share_id)
        share = await self.repo.find(record_id=share_id, status=PanShareStatus.PUBLISHED)
        if share is None:
            raise ShareNotFoundError()

        if self.reveal_delay_ms > 0:
            await asyncio.sleep(self.reveal_delay_ms / 1000)

        logger.info(
            "Secret revealed",
            share_id=str(share.id),
            user_id=current_user.get("user_id"),
        )
        return share.share_url, share.share_code

    # ═══════════════════════════════════════════════════════════════════════════
    # ADMIN
    # ═══════════════════════════════════════════════════════════════════════════

    async def admin_list(
        self,
        *,
        page: int = 1,
        limit: int = 20,
        status: Optional[PanShareStatus] = None,
        search: Optional[str] = None,
        disk_type: Optional[DiskType] = None,
    ) -> Tuple[list[PanShare], int]:
        """Every non-deleted share, any status."""
        criteria = PanShareFilter(
            status=status,
            search=clean_text(search),
            disk_type=disk_type,
        )
        shares = await self.repo.list(criteria, page=page, limit=limit)
        total = await self.repo.count(criteria)
        return shares, total

    async def admin_get(self, share_id: Union[str, UUID]) -> PanShare:
        share_id = parse_share_id(share_id)
        share = await self.repo.find_by_id(share_id)
        if share is None:
            raise ShareNotFoundError()
        return share

    async def admin_create(self, admin_id: UUID, form: AdminShareForm) -> PanShare:
        """
        Add a share from the admin form.

        Admin-added shares skip review: they are stored PUBLISHED with the
        admin as owner.
        """
        fields = share_fields(form)
        share = await self.repo.add(
            **fields,
            content=clean_text(form.content),
            status=PanShareStatus.PUBLISHED,
            user_id=admin_id,
        )
        logger.info("Share created by admin", share_id=str(share.id), admin_id=str(admin_id))
        return share

    async def admin_update(self, share_id: Union[str, UUID], form: AdminShareForm) -> PanShare:
        """
        Replace a share's editable fields, status included.

        Raises:
            ShareNotFoundError: Missing or soft-deleted
        """
        share_id = parse_share_id(share_id)
        fields = share_fields(form)
        fields["content"] = clean_text(form.content)
        fields["status"] = parse_status(form.status)

        share = await self.repo.update(share_id, **fields)
        if share is None:
            raise ShareNotFoundError()
        logger.info("Share updated", share_id=str(share_id), status=share.status.value)
        return share

    async def approve(self, share_id: Union[str, UUID]) -> PanShare:
        share_id = parse_share_id(share_id)
        share = await self.repo.approve(share_id)
        if share is None:
            raise ShareNotFoundError()
        logger.info("Share approved", share_id=str(share_id))
        return share

    async def reject(self, share_id: Union[str, UUID]) -> PanShare:
        share_id = parse_share_id(share_id)
        share = await self.repo.reject(share_id)
        if share is None:
            raise ShareNotFoundError()
        logger.info("Share rejected", share_id=str(share_id))
        return share

    async def delete(self, share_id: Union[str, UUID]) -> PanShare:
        """Archive and soft-delete a share."""
        share_id = parse_share_id(share_id)
        share = await self.repo.soft_delete(share_id)
        if share is None:
            raise ShareNotFoundError()
        logger.info("Share archived", share_id=str(share_id))
        return share
