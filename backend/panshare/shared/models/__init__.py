"""
panShare SQLAlchemy Models

This package contains all database models for the panShare application.

Model Hierarchy:
================
    User
       └── pan_shares (PanShare[])

Models Overview:
================
- Base: Base class and mixins (timestamps, soft delete)
- User: Registered account (submitter or admin)
- PanShare: A submitted share link with catalog metadata

Usage:
======
    from panshare.shared.models import PanShare, PanShareStatus

    share = await repo.find_by_id(share_id)
    share.is_published
"""

from panshare.shared.models.base import Base, TimestampMixin, SoftDeleteMixin
from panshare.shared.models.enums import (
    DiskType,
    DISK_TYPE_LABELS,
    PanShareStatus,
    PAN_SHARE_STATUS_LABELS,
    UserRole,
    Permission,
    ROLE_PERMISSIONS,
)
from panshare.shared.models.user import User
from panshare.shared.models.pan_share import PanShare

__all__ = [
    # Base classes and mixins
    "Base",
    "TimestampMixin",
    "SoftDeleteMixin",
    # Enums
    "DiskType",
    "DISK_TYPE_LABELS",
    "PanShareStatus",
    "PAN_SHARE_STATUS_LABELS",
    "UserRole",
    "Permission",
    "ROLE_PERMISSIONS",
    # Core models
    "User",
    "PanShare",
]
