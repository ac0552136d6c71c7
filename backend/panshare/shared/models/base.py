"""
Base Model Classes

This module provides the foundational classes for all SQLAlchemy models in panShare.
It includes the declarative base and common mixins for timestamps and soft deletion.

Model Hierarchy:
================
    Base                    ← SQLAlchemy declarative base
       │
       ├── TimestampMixin   ← Automatic created_at/updated_at
       │
       └── SoftDeleteMixin  ← Soft delete with deleted_at

Usage:
======
    from panshare.shared.models.base import Base, TimestampMixin, SoftDeleteMixin

    class PanShare(Base, TimestampMixin, SoftDeleteMixin):
        __tablename__ = "pan_shares"
        id: Mapped[uuid.UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
        # Hidden from listings once share.deleted_at is set
"""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import DateTime, text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def utcnow() -> datetime:
    """Timezone-aware current time, used for Python-side column defaults."""
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    All models in the application inherit from this class either
    directly or together with one of the mixin classes.
    """


class TimestampMixin:
    """
    Mixin that adds automatic timestamp tracking to models.

    - created_at: Set when the record is first inserted
    - updated_at: Updated whenever the record is modified

    Database Behavior:
    ==================
    - created_at: Set by SQLAlchemy on INSERT (microsecond precision, so
      listings ordered by creation time are stable); CURRENT_TIMESTAMP is the
      server default for rows written outside the ORM
    - updated_at: Set on INSERT, refreshed by SQLAlchemy on UPDATE via onupdate
    """

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
        nullable=False,
        index=True,
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
        onupdate=utcnow,
        nullable=False,
    )


class SoftDeleteMixin:
    """
    Mixin that adds soft delete capability to models.

    Instead of permanently deleting records, soft delete marks them
    as deleted by setting a timestamp.

    Example values:
        deleted_at: None                  (record is active)
        deleted_at: 2025-03-20T09:00:00Z  (record was soft-deleted)

    Querying:
    =========
    Queries should filter out soft-deleted records:
        query.where(MyModel.deleted_at.is_(None))
    """

    # NULL means the record is active; a timestamp means it's deleted
    deleted_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        default=None,
        index=True,
    )

    @property
    def is_deleted(self) -> bool:
        """True once deleted_at has been set."""
        return self.deleted_at is not None
