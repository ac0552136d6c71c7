"""
User Repository

Database operations specific to the User model.

Common Operations:
==================
- get_by_email()   → Find user by email address (login)
- email_exists()   → Check if email is already registered
"""

from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from panshare.shared.repositories.base import BaseRepository
from panshare.shared.models.user import User


class UserRepository(BaseRepository[User]):
    """Repository for User database operations."""

    mutable_fields = frozenset({"email", "password_hash", "role"})

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(User, session)

    async def get_by_email(self, email: str) -> Optional[User]:
        """
        Get user by email address, ignoring case.

        SQL Generated:
            SELECT * FROM users WHERE lower(email) = 'user@example.com'
        """
        result = await self.session.execute(
            select(User).where(func.lower(User.email) == email.lower())
        )
        return result.scalar_one_or_none()

    async def email_exists(self, email: str) -> bool:
        """Used to validate uniqueness when registering."""
        user = await self.get_by_email(email)
        return user is not None
