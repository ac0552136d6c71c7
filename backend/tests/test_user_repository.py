import pytest

from panshare.shared.models import UserRole
from panshare.shared.repositories import UserRepository


@pytest.fixture
def repo(session):
    return UserRepository(session)


async def test_get_by_email_ignores_case(repo):
    user = await repo.create(email="Reader@example.com", password_hash="x", role=UserRole.USER)

    assert (await repo.get_by_email("reader@EXAMPLE.com")).id == user.id
    assert await repo.email_exists("READER@example.com")
    assert not await repo.email_exists("someone@example.com")


async def test_update_only_touches_mutable_fields(repo):
    user = await repo.create(email="a@example.com", password_hash="x", role=UserRole.USER)
    created_at = user.created_at

    updated = await repo.update(user.id, role=UserRole.ADMIN, created_at=None)

    assert updated.role == UserRole.ADMIN
    assert updated.created_at == created_at
    assert (await repo.get(user.id)).role == UserRole.ADMIN
