"""
Enums used across the application, with their display labels.
"""

from enum import Enum


class DiskType(str, Enum):
    """Third-party file-hosting provider a share link points to."""

    BAIDU = "baidu"
    ALIYUN = "aliyun"
    QUARK = "quark"
    XUNLEI = "xunlei"
    PAN_115 = "115"
    OTHER = "other"


DISK_TYPE_LABELS: dict[DiskType, str] = {
    DiskType.BAIDU: "百度网盘",
    DiskType.ALIYUN: "阿里云盘",
    DiskType.QUARK: "夸克网盘",
    DiskType.XUNLEI: "迅雷网盘",
    DiskType.PAN_115: "115网盘",
    DiskType.OTHER: "其他",
}


class PanShareStatus(str, Enum):
    """
    Review lifecycle of a share.

    Only PUBLISHED shares are visible on the public surface.
    ARCHIVED is what a soft delete leaves behind.
    """

    PENDING = "pending"
    PUBLISHED = "published"
    REJECTED = "rejected"
    ARCHIVED = "archived"


PAN_SHARE_STATUS_LABELS: dict[PanShareStatus, str] = {
    PanShareStatus.PENDING: "待审核",
    PanShareStatus.PUBLISHED: "已发布",
    PanShareStatus.REJECTED: "已拒绝",
    PanShareStatus.ARCHIVED: "已归档",
}


class UserRole(str, Enum):
    """Account role; decides which permissions a token carries."""

    USER = "user"
    ADMIN = "admin"


class Permission(str, Enum):
    """Capabilities checked by the admin endpoints."""

    PAN_SHARES_READ = "pan_shares.read"
    PAN_SHARES_WRITE = "pan_shares.write"


ROLE_PERMISSIONS: dict[UserRole, frozenset[Permission]] = {
    UserRole.USER: frozenset(),
    UserRole.ADMIN: frozenset(Permission),
}
