"""
Authentication Service

Business logic for registration, login and token issuing.

Tokens embed the permissions of the user's role, which is what the admin
permission check reads.

Usage:
======
    from panshare.shared.services.auth_service import AuthService

    service = AuthService(db)
    user, token, expires = await service.register_user(email, password)
"""

from datetime import timedelta
from typing import Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from panshare.config.settings import settings
from panshare.shared.repositories.user_repository import UserRepository
from panshare.shared.utils.security import SecurityUtils
from panshare.shared.core.exceptions import DuplicateResourceError, AuthenticationError
from panshare.shared.core.logging import logger
from panshare.shared.models.enums import ROLE_PERMISSIONS, UserRole
from panshare.shared.models.user import User


def permissions_for(role: UserRole) -> list[str]:
    """Permission codes granted to a role, sorted for stable tokens."""
    return sorted(permission.value for permission in ROLE_PERMISSIONS.get(role, frozenset()))


def issue_token(user: User) -> Tuple[str, int]:
    """
    Sign an access token for a user.

    Returns:
        Tuple of (access_token, expires_in_seconds)
    """
    access_token = SecurityUtils.create_access_token(
        data={
            "user_id": str(user.id),
            "email": user.email,
            "role": user.role.value,
            "permissions": permissions_for(user.role),
        },
        secret_key=settings.SECRET_KEY,
        expires_delta=timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES),
        algorithm=settings.JWT_ALGORITHM,
    )
    return access_token, settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60


class AuthService:
    """
    Service for authentication-related business logic.

    Attributes:
        session: Database session
        repo: UserRepository instance
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.repo = UserRepository(session)

    async def register_user(
        self,
        email: str,
        password: str,
        role: UserRole = UserRole.USER,
    ) -> Tuple[User, str, int]:
        """
        Register a new user and sign them in.

        Returns:
            Tuple of (user, access_token, expires_in_seconds)

        Raises:
            DuplicateResourceError: If email already registered
        """
        if await self.repo.email_exists(email):
            raise DuplicateResourceError("Email already registered")

        user = await self.repo.create(
            email=email,
            password_hash=SecurityUtils.hash_password(password),
            role=role,
        )
        logger.info("User registered", user_id=str(user.id), role=role.value)

        access_token, expires_in = issue_token(user)
        return user, access_token, expires_in

    async def create_admin(self, email: str, password: str) -> Tuple[User, bool]:
        """
        Create an admin account, or promote an existing one.

        An existing user keeps their id and submissions; their role becomes
        ADMIN and their password is replaced.

        Returns:
            Tuple of (user, created)
        """
        user = await self.repo.get_by_email(email)
        password_hash = SecurityUtils.hash_password(password)

        if user is None:
            user = await self.repo.create(
                email=email,
                password_hash=password_hash,
                role=UserRole.ADMIN,
            )
            logger.info("Admin created", user_id=str(user.id))
            return user, True

        user = await self.repo.update(user.id, role=UserRole.ADMIN, password_hash=password_hash)
        logger.info("User promoted to admin", user_id=str(user.id))
        return user, False

    async def login_user(
        self,
        email: str,
        password: str,
    ) -> Tuple[User, str, int]:
        """
        Authenticate user and generate token.

        Raises:
            AuthenticationError: If credentials are invalid
        """
        user = await self.repo.get_by_email(email)
        if not user or not SecurityUtils.verify_password(password, user.password_hash):
            raise AuthenticationError("Invalid email or password")

        access_token, expires_in = issue_token(user)
        return user, access_token, expires_in
