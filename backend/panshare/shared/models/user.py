"""
User Entity Model

Represents a registered account. Users submit shares; admins review them.

SAMPLE USER RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id               │ 550e8400-e29b-41d4-a716-446655440000                      │
│ email            │ "user@example.com"                                        │
│ password_hash    │ "$2b$12$..."                                              │
│ role             │ user                                                      │
│ created_at       │ 2025-01-01T00:00:00Z                                      │
└──────────────────────────────────────────────────────────────────────────────┘
"""

from typing import TYPE_CHECKING
import uuid

from sqlalchemy import String, Text, Uuid, Enum as SQLEnum
from sqlalchemy.orm import Mapped, mapped_column, relationship

from panshare.shared.models.base import Base, TimestampMixin
from panshare.shared.models.enums import UserRole


if TYPE_CHECKING:
    from panshare.shared.models.pan_share import PanShare


class User(Base, TimestampMixin):
    """
    User model representing a registered account.

    Attributes:
        id: Unique identifier (UUID v4)
        email: Login email (unique, indexed)
        password_hash: Bcrypt hashed password
        role: USER or ADMIN

    Relationships:
        pan_shares: Shares submitted by this user
    """

    __tablename__ = "users"

    # ═══════════════════════════════════════════════════════════════════════════
    # PRIMARY KEY
    # ═══════════════════════════════════════════════════════════════════════════

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # AUTHENTICATION
    # ═══════════════════════════════════════════════════════════════════════════

    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
    )

    password_hash: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )

    role: Mapped[UserRole] = mapped_column(
        SQLEnum(
            UserRole,
            name="userrole",
            values_callable=lambda enum: [member.value for member in enum],
        ),
        nullable=False,
        default=UserRole.USER,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # RELATIONSHIPS
    # ═══════════════════════════════════════════════════════════════════════════

    pan_shares: Mapped[list["PanShare"]] = relationship(
        "PanShare",
        back_populates="user",
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<User(id={self.id}, email={self.email}, role={self.role})>"
