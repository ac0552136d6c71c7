"""
PanShare Entity Model

A single submitted pointer to content hosted on a third-party disk
(Baidu, Aliyun, Quark, ...). The link and its extraction code are the
sensitive payload; everything else is catalog metadata.

Example Flow:
1. User submits a share → PanShare created (status=PENDING, user_id=submitter)
2. Admin approves → status=PUBLISHED, share appears in the public catalog
3. Signed-in visitor clicks "open" → share_url/share_code fetched via the
   secret endpoint, never embedded in listings
4. Anyone with write access deletes → status=ARCHIVED, deleted_at set

SAMPLE PAN_SHARE RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id               │ 550e8400-e29b-41d4-a716-446655440000                      │
│ title            │ "Linear Algebra lecture videos"                           │
│ disk_type        │ baidu                                                      │
│ share_url        │ "https://pan.baidu.com/s/1abcDEF"                         │
│ share_code       │ "x7k2"                                                     │
│ expired_at       │ NULL (never expires)                                       │
│ status           │ published                                                  │
│ deleted_at       │ NULL                                                       │
└──────────────────────────────────────────────────────────────────────────────┘
"""

from datetime import datetime, timezone
from typing import TYPE_CHECKING, Optional
import uuid

from sqlalchemy import DateTime, ForeignKey, String, Text, Uuid, Enum as SQLEnum
from sqlalchemy.orm import Mapped, mapped_column, relationship

from panshare.shared.models.base import Base, TimestampMixin, SoftDeleteMixin
from panshare.shared.models.enums import DiskType, PanShareStatus


if TYPE_CHECKING:
    from panshare.shared.models.user import User


def _enum_values(enum_cls) -> list[str]:
    # Persist the wire values ("115", "published"), not the member names
    return [member.value for member in enum_cls]


class PanShare(Base, TimestampMixin, SoftDeleteMixin):
    """
    PanShare model - one share link with its catalog metadata.

    Attributes:
        id: Unique identifier (UUID v4), immutable
        title: Display title (required)
        description: Short summary (optional)
        content: Long markdown body (optional, stored as-is)
        cover_image: Public URL of the cover image (optional)
        disk_type: Hosting provider of the link
        share_url: The link itself (sensitive)
        share_code: Extraction code (sensitive, optional)
        expired_at: Advisory expiry; None means the link never expires
        status: Review status
        user_id: Submitting user, None for rows without an owner

    Relationships:
        user: Submitting user
    """

    __tablename__ = "pan_shares"

    # ═══════════════════════════════════════════════════════════════════════════
    # PRIMARY KEY
    # ═══════════════════════════════════════════════════════════════════════════

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # CATALOG METADATA
    # ═══════════════════════════════════════════════════════════════════════════

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    content: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    cover_image: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    disk_type: Mapped[DiskType] = mapped_column(
        SQLEnum(DiskType, name="disktype", values_callable=_enum_values),
        nullable=False,
        index=True,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # SECRET PAYLOAD
    # ═══════════════════════════════════════════════════════════════════════════

    share_url: Mapped[str] = mapped_column(Text, nullable=False)
    share_code: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)

    expired_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # REVIEW STATUS & OWNERSHIP
    # ═══════════════════════════════════════════════════════════════════════════

    status: Mapped[PanShareStatus] = mapped_column(
        SQLEnum(PanShareStatus, name="pansharestatus", values_callable=_enum_values),
        nullable=False,
        default=PanShareStatus.PENDING,
        index=True,
    )

    user_id: Mapped[Optional[uuid.UUID]] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # RELATIONSHIPS
    # ═══════════════════════════════════════════════════════════════════════════

    user: Mapped[Optional["User"]] = relationship(
        "User",
        back_populates="pan_shares",
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # METHODS
    # ═══════════════════════════════════════════════════════════════════════════

    @property
    def is_published(self) -> bool:
        return self.status == PanShareStatus.PUBLISHED

    @property
    def has_share_code(self) -> bool:
        return bool(self.share_code)

    @property
    def is_expired(self) -> bool:
        """
        True when expired_at lies in the past.

        SQLite hands back naive datetimes even for timezone-aware columns;
        those are treated as UTC.
        """
        if self.expired_at is None:
            return False
        expired_at = self.expired_at
        if expired_at.tzinfo is None:
            expired_at = expired_at.replace(tzinfo=timezone.utc)
        return expired_at < datetime.now(timezone.utc)

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<PanShare(id={self.id}, status={self.status}, disk_type={self.disk_type})>"
