"""Public catalog, submissions and the secret endpoint over HTTP."""

import uuid
from datetime import datetime, timedelta, timezone

import pytest

from panshare.shared.models import DiskType, PanShareStatus


SECRET_KEYS = {"shareUrl", "shareCode"}


def submit_body(**overrides):
    body = {
        "title": "Linear Algebra lecture videos",
        "description": "MIT 18.06",
        "diskType": "baidu",
        "shareUrl": "https://pan.baidu.com/s/1abcDEF",
    }
    body.update(overrides)
    return body


# ═══════════════════════════════════════════════════════════════════════════════
# CATALOG
# ═══════════════════════════════════════════════════════════════════════════════


async def test_list_shows_only_published(client, seed_share):
    published = await seed_share()
    await seed_share(status=PanShareStatus.PENDING)
    await seed_share(status=PanShareStatus.REJECTED)

    response = await client.get("/pan-shares")

    assert response.status_code == 200
    body = response.json()
    assert body["total"] == 1
    assert body["page"] == 1
    assert body["totalPages"] == 1
    assert [s["id"] for s in body["shares"]] == [str(published.id)]


async def test_list_projection_has_no_secrets(client, seed_share):
    await seed_share(share_code="x7k2")

    share = (await client.get("/pan-shares")).json()["shares"][0]

    assert not SECRET_KEYS & share.keys()
    assert share["hasShareCode"] is True
    assert share["diskType"] == "baidu"
    assert share["diskTypeLabel"] == "百度网盘"
    assert share["isExpired"] is False


async def test_list_pagination_and_filters(client, seed_share):
    base = datetime(2025, 1, 1, tzinfo=timezone.utc)
    for i in range(5):
        await seed_share(title=f"Baidu {i}", created_at=base + timedelta(hours=i))
    await seed_share(title="Quark pick", disk_type=DiskType.QUARK)

    page = (await client.get("/pan-shares", params={"page": 2, "limit": 2, "diskType": "baidu"})).json()
    assert page["total"] == 5
    assert page["totalPages"] == 3
    assert [s["title"] for s in page["shares"]] == ["Baidu 2", "Baidu 1"]

    searched = (await client.get("/pan-shares", params={"search": "QUARK"})).json()
    assert [s["title"] for s in searched["shares"]] == ["Quark pick"]


async def test_list_rejects_bad_query(client):
    response = await client.get("/pan-shares", params={"diskType": "dropbox"})
    assert response.status_code == 400
    assert response.json()["code"] == "VALIDATION_ERROR"

    response = await client.get("/pan-shares", params={"limit": 1000})
    assert response.status_code == 400


async def test_detail_of_published_share(client, seed_share):
    share = await seed_share(content="## Contents\n\n1. Vectors")

    response = await client.get(f"/pan-shares/{share.id}")

    assert response.status_code == 200
    body = response.json()
    assert body["content"] == "## Contents\n\n1. Vectors"
    assert not SECRET_KEYS & body.keys()


async def test_detail_of_unpublished_share_is_404(client, seed_share):
    share = await seed_share(status=PanShareStatus.PENDING)

    response = await client.get(f"/pan-shares/{share.id}")

    assert response.status_code == 404
    assert response.json() == {"error": "Share not found", "code": "NOT_FOUND"}


async def test_expired_share_is_flagged(client, seed_share):
    await seed_share(expired_at=datetime.now(timezone.utc) - timedelta(days=1))

    share = (await client.get("/pan-shares")).json()["shares"][0]

    assert share["isExpired"] is True


# ═══════════════════════════════════════════════════════════════════════════════
# SUBMISSIONS
# ═══════════════════════════════════════════════════════════════════════════════


async def test_submit_requires_login(client):
    response = await client.post("/pan-shares", json=submit_body())

    assert response.status_code == 401
    assert response.json()["code"] == "AUTHENTICATION_ERROR"


async def test_submit_with_invalid_token(client):
    response = await client.post(
        "/pan-shares",
        json=submit_body(),
        headers={"Authorization": "Bearer not-a-jwt"},
    )
    assert response.status_code == 401


async def test_submit_creates_pending_share(client, user_headers):
    response = await client.post(
        "/pan-shares",
        json=submit_body(status="published"),
        headers=user_headers,
    )

    assert response.status_code == 201
    share_id = response.json()["id"]

    mine = (await client.get("/pan-shares/mine", headers=user_headers)).json()
    assert mine["total"] == 1
    assert mine["shares"][0]["id"] == share_id
    assert mine["shares"][0]["status"] == "pending"
    assert not SECRET_KEYS & mine["shares"][0].keys()

    assert (await client.get("/pan-shares")).json()["total"] == 0


@pytest.mark.parametrize(
    "overrides, message",
    [
        ({"title": "  "}, "Title is required"),
        ({"shareUrl": ""}, "Share URL is required"),
        ({"diskType": "dropbox"}, "Invalid disk type: dropbox"),
        ({"expiredAt": "soon"}, "Invalid expiration date"),
    ],
)
async def test_submit_validation(client, user_headers, overrides, message):
    response = await client.post(
        "/pan-shares",
        json=submit_body(**overrides),
        headers=user_headers,
    )

    assert response.status_code == 400
    assert response.json()["error"] == message


async def test_mine_filters_by_status(client, make_user, seed_share):
    owner, headers = await make_user()
    await seed_share(user_id=owner.id)
    await seed_share(user_id=owner.id, status=PanShareStatus.REJECTED)
    await seed_share()

    body = (await client.get("/pan-shares/mine", params={"status": "rejected"}, headers=headers)).json()

    assert body["total"] == 1
    assert body["shares"][0]["statusLabel"] == "已拒绝"


# ═══════════════════════════════════════════════════════════════════════════════
# SECRET ENDPOINT
# ═══════════════════════════════════════════════════════════════════════════════


async def test_secret_requires_login(client, seed_share):
    share = await seed_share()

    response = await client.post(f"/pan-shares/{share.id}/secret")

    assert response.status_code == 401


async def test_secret_of_published_share(client, seed_share, user_headers):
    share = await seed_share(share_code="x7k2")

    response = await client.post(f"/pan-shares/{share.id}/secret", headers=user_headers)

    assert response.status_code == 200
    assert response.json() == {"shareUrl": "https://pan.baidu.com/s/1abcDEF", "shareCode": "x7k2"}


async def test_secret_missing_and_unpublished_look_the_same(client, seed_share, user_headers):
    pending = await seed_share(status=PanShareStatus.PENDING)

    missing = await client.post(f"/pan-shares/{uuid.uuid4()}/secret", headers=user_headers)
    unpublished = await client.post(f"/pan-shares/{pending.id}/secret", headers=user_headers)

    assert missing.status_code == unpublished.status_code == 404
    assert missing.json() == unpublished.json() == {"error": "Share not found", "code": "NOT_FOUND"}


async def test_malformed_share_id_is_not_found(client, user_headers):
    detail = await client.get("/pan-shares/not-a-uuid")
    secret = await client.post("/pan-shares/not-a-uuid/secret", headers=user_headers)

    assert detail.status_code == secret.status_code == 404
    assert detail.json() == secret.json() == {"error": "Share not found", "code": "NOT_FOUND"}


async def test_malformed_share_id_still_requires_login(client):
    response = await client.post("/pan-shares/not-a-uuid/secret")

    assert response.status_code == 401


# ═══════════════════════════════════════════════════════════════════════════════
# END TO END
# ═══════════════════════════════════════════════════════════════════════════════


async def test_submit_approve_reveal(client, user_headers, admin_headers):
    created = await client.post(
        "/pan-shares",
        json=submit_body(title="Test", diskType="115", shareUrl="https://pan.example.com/x"),
        headers=user_headers,
    )
    share_id = created.json()["id"]

    approved = await client.post(f"/admin/pan-shares/{share_id}/approve", headers=admin_headers)
    assert approved.status_code == 200

    listing = (await client.get("/pan-shares")).json()
    assert [s["id"] for s in listing["shares"]] == [share_id]
    assert listing["shares"][0]["diskTypeLabel"] == "115网盘"

    assert (await client.post(f"/pan-shares/{share_id}/secret")).status_code == 401

    secret = await client.post(f"/pan-shares/{share_id}/secret", headers=user_headers)
    assert secret.status_code == 200
    assert secret.json() == {"shareUrl": "https://pan.example.com/x", "shareCode": None}
