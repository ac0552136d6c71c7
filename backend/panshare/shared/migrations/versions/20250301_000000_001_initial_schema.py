# pylint: skip-file
# ruff: noqa
"""Initial schema - users and pan_shares

Revision ID: 001
Revises:
Create Date: 2025-03-01 00:00:00

Tables created:
- users: Accounts with a role (user/admin)
- pan_shares: Share links with catalog metadata, review status and soft delete

Enums created:
- userrole: user, admin
- disktype: baidu, aliyun, quark, xunlei, 115, other
- pansharestatus: pending, published, rejected, archived
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


# Enum types
user_role_enum = postgresql.ENUM("user", "admin", name="userrole", create_type=False)

disk_type_enum = postgresql.ENUM(
    "baidu",
    "aliyun",
    "quark",
    "xunlei",
    "115",
    "other",
    name="disktype",
    create_type=False,
)

pan_share_status_enum = postgresql.ENUM(
    "pending",
    "published",
    "rejected",
    "archived",
    name="pansharestatus",
    create_type=False,
)


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    """Upgrade database schema."""
    # Create enum types
    op.execute("CREATE TYPE userrole AS ENUM ('user', 'admin')")
    op.execute(
        "CREATE TYPE disktype AS ENUM "
        "('baidu', 'aliyun', 'quark', 'xunlei', '115', 'other')"
    )
    op.execute(
        "CREATE TYPE pansharestatus AS ENUM "
        "('pending', 'published', 'rejected', 'archived')"
    )

    # Create users table
    op.create_table(
        "users",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("password_hash", sa.Text(), nullable=False),
        sa.Column("role", user_role_enum, nullable=False, server_default="user"),
        *_timestamps(),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)
    op.create_index("ix_users_created_at", "users", ["created_at"])

    # Create pan_shares table
    op.create_table(
        "pan_shares",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("content", sa.Text(), nullable=True),
        sa.Column("cover_image", sa.Text(), nullable=True),
        sa.Column("disk_type", disk_type_enum, nullable=False),
        sa.Column("share_url", sa.Text(), nullable=False),
        sa.Column("share_code", sa.String(64), nullable=True),
        sa.Column("expired_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("status", pan_share_status_enum, nullable=False, server_default="pending"),
        sa.Column(
            "user_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("users.id", ondelete="SET NULL"),
            nullable=True,
        ),
        *_timestamps(),
        sa.Column("deleted_at", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index("ix_pan_shares_disk_type", "pan_shares", ["disk_type"])
    op.create_index("ix_pan_shares_status", "pan_shares", ["status"])
    op.create_index("ix_pan_shares_user_id", "pan_shares", ["user_id"])
    op.create_index("ix_pan_shares_created_at", "pan_shares", ["created_at"])
    op.create_index("ix_pan_shares_deleted_at", "pan_shares", ["deleted_at"])


def downgrade() -> None:
    """Downgrade database schema."""
    # Drop tables in reverse order (respect foreign keys)
    op.drop_table("pan_shares")
    op.drop_table("users")

    # Drop enum types
    op.execute("DROP TYPE IF EXISTS pansharestatus")
    op.execute("DROP TYPE IF EXISTS disktype")
    op.execute("DROP TYPE IF EXISTS userrole")
