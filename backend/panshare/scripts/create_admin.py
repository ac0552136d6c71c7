"""
Create Admin

Bootstrap an administrator. /auth/register only ever creates regular
users, so the first admin (and any later one) is made here.

Usage:
======
    panshare-create-admin admin@example.com
    panshare-create-admin admin@example.com --password 's3cret-passw0rd'

Without --password the password is prompted for. Running it for an email
that is already registered promotes that user and resets their password.
"""

import argparse
import asyncio
import getpass
import sys
from typing import Optional, Sequence

from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from panshare.shared.db import AsyncSessionLocal
from panshare.shared.models.user import User
from panshare.shared.schemas.user import UserCreate
from panshare.shared.services.auth_service import AuthService


async def create_admin(
    email: str,
    password: str,
    session_factory: async_sessionmaker[AsyncSession] = AsyncSessionLocal,
) -> tuple[User, bool]:
    """
    Create or promote an admin in its own transaction.

    Returns:
        Tuple of (user, created)
    """
    async with session_factory() as session:
        try:
            user, created = await AuthService(session).create_admin(email, password)
            await session.commit()
        except Exception:
            await session.rollback()
            raise
    return user, created


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="panshare-create-admin",
        description="Create a panShare admin or promote an existing user",
    )
    parser.add_argument("email", help="Email address of the admin")
    parser.add_argument("--password", help="Password (prompted for when omitted)")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    password = args.password
    if password is None:
        password = getpass.getpass("Password: ")

    try:
        credentials = UserCreate(email=args.email, password=password)
    except ValidationError as e:
        parser.error("; ".join(error["msg"] for error in e.errors()))

    user, created = asyncio.run(create_admin(credentials.email, credentials.password))
    print(f"{'Created' if created else 'Promoted'} admin {user.email} ({user.id})")
    return 0


if __name__ == "__main__":
    sys.exit(main())
