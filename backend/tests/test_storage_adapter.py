"""Object storage adapter against an unreachable server."""

import pytest
import urllib3

from panshare.api.dependencies.services import get_storage
from panshare.shared.adapters.storage_adapter import StorageAdapter
from panshare.shared.core.exceptions import StorageError
from panshare.shared.services.cover_image_service import CoverImageService


PNG = b"\x89PNG\r\n\x1a\n" + b"\x00" * 64


@pytest.fixture
def unreachable_storage():
    # Nothing listens on port 1; one attempt, no retries
    return StorageAdapter(
        endpoint="127.0.0.1:1",
        access_key="panshare",
        secret_key="panshare-secret",
        bucket="covers",
        upload_path="uploads",
        public_url="",
        secure=False,
        http_client=urllib3.PoolManager(
            timeout=urllib3.Timeout(connect=1, read=1),
            retries=urllib3.Retry(total=0),
        ),
    )


def test_public_url_uses_endpoint_and_bucket(unreachable_storage):
    assert unreachable_storage.get_public_url("covers/a.png") == (
        "http://127.0.0.1:1/covers/uploads/covers/a.png"
    )


def test_ensure_bucket_unreachable_raises_storage_error(unreachable_storage):
    with pytest.raises(StorageError):
        unreachable_storage.ensure_bucket()
    assert unreachable_storage._bucket_ready is False


async def test_cover_upload_unreachable_raises_storage_error(unreachable_storage):
    service = CoverImageService(unreachable_storage)

    with pytest.raises(StorageError):
        await service.upload(PNG, "image/png")


async def test_unreachable_storage_is_502(app, client, admin_headers, unreachable_storage):
    app.dependency_overrides[get_storage] = lambda: unreachable_storage

    response = await client.post(
        "/admin/uploads/cover-image",
        files={"file": ("cover.png", PNG, "image/png")},
        headers=admin_headers,
    )

    assert response.status_code == 502
    assert response.json()["code"] == "STORAGE_ERROR"
