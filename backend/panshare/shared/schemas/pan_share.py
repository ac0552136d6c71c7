"""
PanShare Schemas

Request bodies and the response projections of a share.

Projections:
============
    PanSharePublic   ← catalog card: no link, no code, only hasShareCode
       ├── PanShareDetail  ← + content (markdown body)
       └── PanShareOwned   ← + status, updatedAt (submitter's dashboard)

    PanShareAdmin    ← every column, secrets included (admin only)
    ShareSecretResponse ← {shareUrl, shareCode}, served by the secret endpoint

The public projections have no share_url/share_code fields at all, so no
serialization path can leak them.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from panshare.shared.models.enums import (
    DISK_TYPE_LABELS,
    PAN_SHARE_STATUS_LABELS,
    DiskType,
    PanShareStatus,
)
from panshare.shared.models.pan_share import PanShare
from panshare.shared.schemas.common import BaseSchema


# ═══════════════════════════════════════════════════════════════════════════════
# REQUESTS
# ═══════════════════════════════════════════════════════════════════════════════
#
# Fields are deliberately loose (plain optional strings): the service trims
# and validates them so every caller gets the same error messages.


class SubmitShareRequest(BaseSchema):
    """Body of POST /pan-shares (a signed-in user's submission)."""

    title: Optional[str] = Field(None, description="Display title (required)")
    description: Optional[str] = None
    cover_image: Optional[str] = Field(None, description="Public URL of the cover image")
    disk_type: Optional[str] = Field(None, description="baidu, aliyun, quark, xunlei, 115, other")
    share_url: Optional[str] = Field(None, description="The share link (required)")
    share_code: Optional[str] = Field(None, description="Extraction code")
    expired_at: Optional[str] = Field(
        None,
        description="ISO date or datetime; empty for no expiry",
    )


class AdminShareForm(SubmitShareRequest):
    """Body of the admin add/edit forms: the full field set."""

    content: Optional[str] = Field(None, description="Markdown body")
    status: Optional[str] = Field(None, description="pending, published, rejected")


# ═══════════════════════════════════════════════════════════════════════════════
# RESPONSES
# ═══════════════════════════════════════════════════════════════════════════════


class PanSharePublic(BaseSchema):
    """Catalog projection of a published share."""

    id: str
    title: str
    description: Optional[str] = None
    cover_image: Optional[str] = None
    disk_type: DiskType
    disk_type_label: str
    expired_at: Optional[datetime] = None
    is_expired: bool
    created_at: datetime
    has_share_code: bool

    @classmethod
    def _public_fields(cls, share: PanShare) -> dict:
        return {
            "id": str(share.id),
            "title": share.title,
            "description": share.description,
            "cover_image": share.cover_image,
            "disk_type": share.disk_type,
            "disk_type_label": DISK_TYPE_LABELS.get(share.disk_type, str(share.disk_type)),
            "expired_at": share.expired_at,
            "is_expired": share.is_expired,
            "created_at": share.created_at,
            "has_share_code": share.has_share_code,
        }

    @classmethod
    def from_share(cls, share: PanShare) -> "PanSharePublic":
        return cls(**cls._public_fields(share))


class PanShareDetail(PanSharePublic):
    """Detail page projection: the public card plus the markdown body."""

    content: Optional[str] = None

    @classmethod
    def from_share(cls, share: PanShare) -> "PanShareDetail":
        return cls(**cls._public_fields(share), content=share.content)


class PanShareOwned(PanSharePublic):
    """A submitter's view of their own share, whatever its status."""

    status: PanShareStatus
    status_label: str
    updated_at: datetime

    @classmethod
    def from_share(cls, share: PanShare) -> "PanShareOwned":
        return cls(
            **cls._public_fields(share),
            status=share.status,
            status_label=PAN_SHARE_STATUS_LABELS.get(share.status, str(share.status)),
            updated_at=share.updated_at,
        )


class PanShareAdmin(BaseSchema):
    """Every column of a share, for the admin table and edit form."""

    id: str
    title: str
    description: Optional[str] = None
    content: Optional[str] = None
    cover_image: Optional[str] = None
    disk_type: DiskType
    disk_type_label: str
    share_url: str
    share_code: Optional[str] = None
    expired_at: Optional[datetime] = None
    is_expired: bool
    status: PanShareStatus
    status_label: str
    user_id: Optional[str] = None
    created_at: datetime
    updated_at: datetime
    deleted_at: Optional[datetime] = None

    @classmethod
    def from_share(cls, share: PanShare) -> "PanShareAdmin":
        return cls(
            id=str(share.id),
            title=share.title,
            description=share.description,
            content=share.content,
            cover_image=share.cover_image,
            disk_type=share.disk_type,
            disk_type_label=DISK_TYPE_LABELS.get(share.disk_type, str(share.disk_type)),
            share_url=share.share_url,
            share_code=share.share_code,
            expired_at=share.expired_at,
            is_expired=share.is_expired,
            status=share.status,
            status_label=PAN_SHARE_STATUS_LABELS.get(share.status, str(share.status)),
            user_id=str(share.user_id) if share.user_id else None,
            created_at=share.created_at,
            updated_at=share.updated_at,
            deleted_at=share.deleted_at,
        )


class ShareSecretResponse(BaseSchema):
    """The gated payload: link and extraction code."""

    share_url: str
    share_code: Optional[str] = None


class SubmitShareResponse(BaseSchema):
    """Returned after a user submission is stored."""

    id: str
    message: str = "Pan share submitted successfully. Waiting for review."


class AdminActionResponse(BaseSchema):
    """Result of an admin write: where the UI should go next."""

    status: str = "success"
    message: str
    redirect_url: str = "/admin/pan-shares"
