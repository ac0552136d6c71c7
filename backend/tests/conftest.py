"""
Shared fixtures.

Every test gets a fresh in-memory SQLite database. API tests run the real
application over httpx's ASGI transport with the database session and the
object storage swapped through dependency overrides.
"""

import uuid
from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from panshare.shared.db import get_db
from panshare.api.dependencies.services import get_storage
from panshare.api.main import create_application
from panshare.config.settings import settings
from panshare.shared.core.exceptions import StorageError
from panshare.shared.models import Base, DiskType, PanShareStatus, UserRole
from panshare.shared.repositories import PanShareRepository, UserRepository
from panshare.shared.services.auth_service import issue_token


# ═══════════════════════════════════════════════════════════════════════════════
# DATABASE
# ═══════════════════════════════════════════════════════════════════════════════


@pytest.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def session(session_factory):
    async with session_factory() as session:
        yield session


# ═══════════════════════════════════════════════════════════════════════════════
# SEED HELPERS
# ═══════════════════════════════════════════════════════════════════════════════


def share_data(**overrides: Any) -> dict[str, Any]:
    data = {
        "title": "Linear Algebra lecture videos",
        "description": "MIT 18.06, all 34 lectures",
        "disk_type": DiskType.BAIDU,
        "share_url": "https://pan.baidu.com/s/1abcDEF",
        "share_code": "x7k2",
        "status": PanShareStatus.PUBLISHED,
    }
    data.update(overrides)
    return data


@pytest.fixture
def make_user(session_factory):
    """Create a committed user; returns (user, auth headers)."""

    async def _make(role: UserRole = UserRole.USER, email: str | None = None):
        async with session_factory() as session:
            user = await UserRepository(session).create(
                email=email or f"{uuid.uuid4().hex[:10]}@example.com",
                password_hash="not-a-real-hash",
                role=role,
            )
            await session.commit()
        token, _ = issue_token(user)
        return user, {"Authorization": f"Bearer {token}"}

    return _make


@pytest.fixture
async def user_headers(make_user):
    _, headers = await make_user()
    return headers


@pytest.fixture
async def admin_headers(make_user):
    _, headers = await make_user(role=UserRole.ADMIN)
    return headers


@pytest.fixture
def seed_share(session_factory):
    """Insert a committed share (published unless told otherwise)."""

    async def _seed(**overrides: Any):
        async with session_factory() as session:
            share = await PanShareRepository(session).add(**share_data(**overrides))
            await session.commit()
        return share

    return _seed


# ═══════════════════════════════════════════════════════════════════════════════
# OBJECT STORAGE
# ═══════════════════════════════════════════════════════════════════════════════


class FakeStorage:
    """Records uploads instead of talking to MinIO."""

    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.uploads: list[tuple[str, bytes, str]] = []

    def upload_bytes(self, key: str, data: bytes, content_type: str) -> str:
        if self.fail:
            raise StorageError()
        self.uploads.append((key, data, content_type))
        return f"https://cdn.example.com/uploads/{key}"


@pytest.fixture
def storage():
    return FakeStorage()


# ═══════════════════════════════════════════════════════════════════════════════
# APPLICATION
# ═══════════════════════════════════════════════════════════════════════════════


@pytest.fixture
def app(session_factory, storage, monkeypatch):
    monkeypatch.setattr(settings, "SECRET_REVEAL_DELAY_MS", 0)
    application = create_application()

    async def override_get_db():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    application.dependency_overrides[get_db] = override_get_db
    application.dependency_overrides[get_storage] = lambda: storage
    return application


@pytest.fixture
async def client(app):
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
