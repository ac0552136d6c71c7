"""Service-level validation and workflow."""

import uuid
from datetime import datetime, timezone

import pytest

from panshare.config.settings import settings
from panshare.shared.core.exceptions import (
    AuthenticationError,
    ShareNotFoundError,
    ValidationError,
)
from panshare.shared.models import DiskType, PanShareStatus
from panshare.shared.schemas.pan_share import AdminShareForm, SubmitShareRequest
from panshare.shared.services import pan_share_service
from panshare.shared.services.pan_share_service import (
    PanShareService,
    clean_text,
    parse_disk_type,
    parse_expired_at,
    parse_share_id,
    share_fields,
)

from tests.conftest import share_data


@pytest.fixture
def service(session):
    return PanShareService(session, reveal_delay_ms=0)


def submission(**overrides):
    body = {
        "title": "  Linear Algebra  ",
        "diskType": "baidu",
        "shareUrl": " https://pan.baidu.com/s/1abcDEF ",
        "shareCode": "",
    }
    body.update(overrides)
    return SubmitShareRequest.model_validate(body)


# ═══════════════════════════════════════════════════════════════════════════════
# INPUT NORMALIZATION
# ═══════════════════════════════════════════════════════════════════════════════


def test_clean_text():
    assert clean_text(None) is None
    assert clean_text("   ") is None
    assert clean_text("  x  ") == "x"


def test_parse_disk_type():
    assert parse_disk_type("115") == DiskType.PAN_115
    assert parse_disk_type(" Aliyun ") == DiskType.ALIYUN
    with pytest.raises(ValidationError):
        parse_disk_type("dropbox")
    with pytest.raises(ValidationError):
        parse_disk_type("")


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("2025-01-31", datetime(2025, 1, 31, tzinfo=timezone.utc)),
        ("2025-01-31T12:30:00Z", datetime(2025, 1, 31, 12, 30, tzinfo=timezone.utc)),
        ("2025-01-31T20:30:00+08:00", datetime(2025, 1, 31, 12, 30, tzinfo=timezone.utc)),
        ("", None),
        (None, None),
    ],
)
def test_parse_expired_at(raw, expected):
    assert parse_expired_at(raw) == expected


def test_parse_share_id():
    share_id = uuid.uuid4()

    assert parse_share_id(share_id) is share_id
    assert parse_share_id(f" {share_id} ") == share_id
    for garbage in ("not-a-uuid", "42", ""):
        with pytest.raises(ShareNotFoundError):
            parse_share_id(garbage)


def test_parse_expired_at_rejects_garbage():
    with pytest.raises(ValidationError) as exc_info:
        parse_expired_at("next tuesday")
    assert exc_info.value.details == {"field": "expiredAt"}


def test_share_fields_trims_and_requires():
    fields = share_fields(submission())

    assert fields["title"] == "Linear Algebra"
    assert fields["share_url"] == "https://pan.baidu.com/s/1abcDEF"
    assert fields["share_code"] is None
    assert fields["disk_type"] == DiskType.BAIDU

    with pytest.raises(ValidationError, match="Title is required"):
        share_fields(submission(title="   "))
    with pytest.raises(ValidationError, match="Share URL is required"):
        share_fields(submission(shareUrl=None))


# ═══════════════════════════════════════════════════════════════════════════════
# WORKFLOW
# ═══════════════════════════════════════════════════════════════════════════════


async def test_submitted_share_is_pending_and_not_public(service):
    share = await service.submit_share(uuid.uuid4(), submission())

    assert share.status == PanShareStatus.PENDING
    with pytest.raises(ShareNotFoundError):
        await service.get_public_share(share.id)

    approved = await service.approve(share.id)
    assert approved.is_published
    assert (await service.get_public_share(share.id)).id == share.id


async def test_reveal_secret_requires_user(service):
    share = await service.repo.add(**share_data())

    with pytest.raises(AuthenticationError):
        await service.reveal_secret(share.id, None)


@pytest.mark.parametrize(
    "status",
    [PanShareStatus.PENDING, PanShareStatus.REJECTED, PanShareStatus.ARCHIVED],
)
async def test_reveal_secret_hides_unpublished(service, status):
    share = await service.repo.add(**share_data(status=status))

    with pytest.raises(ShareNotFoundError) as exc_info:
        await service.reveal_secret(share.id, {"user_id": str(uuid.uuid4())})
    assert exc_info.value.message == "Share not found"


async def test_reveal_secret_of_deleted_share(service):
    share = await service.repo.add(**share_data())
    await service.delete(share.id)

    with pytest.raises(ShareNotFoundError):
        await service.reveal_secret(share.id, {"user_id": str(uuid.uuid4())})


async def test_reveal_secret_returns_link_and_code(service):
    share = await service.repo.add(**share_data(share_code=None))

    share_url, share_code = await service.reveal_secret(share.id, {"user_id": str(uuid.uuid4())})

    assert share_url == "https://pan.baidu.com/s/1abcDEF"
    assert share_code is None


@pytest.fixture
def recorded_sleeps(monkeypatch):
    """Replace asyncio.sleep as seen by the service; records each delay."""
    delays = []

    async def fake_sleep(delay):
        delays.append(delay)

    monkeypatch.setattr(pan_share_service.asyncio, "sleep", fake_sleep)
    return delays


async def test_reveal_secret_waits_before_answering(session, recorded_sleeps):
    service = PanShareService(session, reveal_delay_ms=250)
    share = await service.repo.add(**share_data())

    await service.reveal_secret(share.id, {"user_id": str(uuid.uuid4())})

    assert recorded_sleeps == [0.25]


async def test_reveal_secret_failures_do_not_wait(session, recorded_sleeps):
    service = PanShareService(session, reveal_delay_ms=250)
    pending = await service.repo.add(**share_data(status=PanShareStatus.PENDING))

    with pytest.raises(AuthenticationError):
        await service.reveal_secret(pending.id, None)
    with pytest.raises(ShareNotFoundError):
        await service.reveal_secret(pending.id, {"user_id": str(uuid.uuid4())})
    with pytest.raises(ShareNotFoundError):
        await service.reveal_secret(uuid.uuid4(), {"user_id": str(uuid.uuid4())})

    assert recorded_sleeps == []


async def test_reveal_delay_defaults_to_settings(session, monkeypatch):
    monkeypatch.setattr(settings, "SECRET_REVEAL_DELAY_MS", 100)

    assert PanShareService(session).reveal_delay_ms == 100


async def test_admin_create_publishes(service):
    admin_id = uuid.uuid4()
    form = AdminShareForm.model_validate(
        {"title": "Admin pick", "diskType": "quark", "shareUrl": "https://pan.quark.cn/s/9"}
    )

    share = await service.admin_create(admin_id, form)

    assert share.status == PanShareStatus.PUBLISHED
    assert share.user_id == admin_id


async def test_admin_update_sets_status_and_clears_optional_fields(service):
    share = await service.repo.add(**share_data(status=PanShareStatus.PENDING))
    form = AdminShareForm.model_validate(
        {
            "title": "Edited",
            "diskType": "aliyun",
            "shareUrl": "https://www.aliyundrive.com/s/abc",
            "shareCode": "",
            "status": "rejected",
        }
    )

    updated = await service.admin_update(share.id, form)

    assert updated.title == "Edited"
    assert updated.disk_type == DiskType.ALIYUN
    assert updated.status == PanShareStatus.REJECTED
    assert updated.share_code is None
    assert updated.description is None


async def test_admin_update_rejects_bad_status(service):
    share = await service.repo.add(**share_data())
    form = AdminShareForm.model_validate(
        {"title": "x", "diskType": "baidu", "shareUrl": "https://x", "status": "live"}
    )

    with pytest.raises(ValidationError):
        await service.admin_update(share.id, form)


async def test_missing_share_operations_raise_not_found(service):
    missing = uuid.uuid4()
    for operation in (service.approve, service.reject, service.delete, service.admin_get):
        with pytest.raises(ShareNotFoundError):
            await operation(missing)
