"""Admin review and management endpoints."""

import uuid

import pytest

from panshare.api.forms import ADD_FORM, EDIT_FORM
from panshare.shared.models import PanShareStatus, UserRole


SUCCESS_KEYS = {"status", "message", "redirectUrl"}


def form_body(**overrides):
    body = {
        "title": "Admin pick",
        "description": "Hand-picked",
        "content": "# Notes",
        "diskType": "aliyun",
        "shareUrl": "https://www.aliyundrive.com/s/abc",
        "shareCode": "9z9z",
    }
    body.update(overrides)
    return body


# ═══════════════════════════════════════════════════════════════════════════════
# ACCESS CONTROL
# ═══════════════════════════════════════════════════════════════════════════════


@pytest.mark.parametrize(
    "method, path",
    [
        ("GET", "/admin/pan-shares"),
        ("GET", "/admin/pan-shares/forms/add"),
        ("POST", "/admin/pan-shares"),
        ("POST", f"/admin/pan-shares/{uuid.uuid4()}/approve"),
        ("DELETE", f"/admin/pan-shares/{uuid.uuid4()}"),
    ],
)
async def test_admin_requires_token_and_permission(client, user_headers, method, path):
    anonymous = await client.request(method, path, json=form_body())
    assert anonymous.status_code == 401

    regular_user = await client.request(method, path, json=form_body(), headers=user_headers)
    assert regular_user.status_code == 403
    assert regular_user.json()["code"] == "AUTHORIZATION_ERROR"


# ═══════════════════════════════════════════════════════════════════════════════
# DESCRIPTORS
# ═══════════════════════════════════════════════════════════════════════════════


def test_form_required_fields():
    add_required = {f.name for f in ADD_FORM.fields if f.required}
    edit_required = {f.name for f in EDIT_FORM.fields if f.required}

    assert add_required == {"title", "diskType", "shareUrl"}
    assert edit_required == {"title", "diskType", "shareUrl", "status"}


def test_missing_fields_treats_blank_as_missing():
    assert ADD_FORM.missing_fields({"title": " ", "diskType": "baidu"}) == ["title", "shareUrl"]


async def test_form_descriptor_endpoint(client, admin_headers):
    response = await client.get("/admin/pan-shares/forms/edit", headers=admin_headers)

    assert response.status_code == 200
    body = response.json()
    assert body["name"] == "edit"
    disk_field = next(f for f in body["fields"] if f["name"] == "diskType")
    assert {o["value"] for o in disk_field["options"]} == {
        "baidu", "aliyun", "quark", "xunlei", "115", "other",
    }

    missing = await client.get("/admin/pan-shares/forms/bulk", headers=admin_headers)
    assert missing.status_code == 404


async def test_list_includes_secrets_and_columns(client, admin_headers, seed_share):
    await seed_share(status=PanShareStatus.PENDING)
    await seed_share()

    response = await client.get("/admin/pan-shares", headers=admin_headers)

    assert response.status_code == 200
    body = response.json()
    assert body["total"] == 2
    assert body["shares"][0]["shareUrl"] == "https://pan.baidu.com/s/1abcDEF"
    assert "shareUrl" in {c["key"] for c in body["columns"]}

    pending = (
        await client.get("/admin/pan-shares", params={"status": "pending"}, headers=admin_headers)
    ).json()
    assert pending["total"] == 1


# ═══════════════════════════════════════════════════════════════════════════════
# WRITES
# ═══════════════════════════════════════════════════════════════════════════════


async def test_add_creates_published_share(client, make_user):
    admin, headers = await make_user(role=UserRole.ADMIN)

    response = await client.post("/admin/pan-shares", json=form_body(), headers=headers)

    assert response.status_code == 201
    body = response.json()
    assert body.keys() == SUCCESS_KEYS
    assert body["status"] == "success"
    assert body["redirectUrl"] == "/admin/pan-shares"

    listing = (await client.get("/pan-shares")).json()
    assert listing["total"] == 1
    share_id = listing["shares"][0]["id"]

    row = (await client.get(f"/admin/pan-shares/{share_id}", headers=headers)).json()
    assert row["status"] == "published"
    assert row["userId"] == str(admin.id)
    assert row["content"] == "# Notes"


async def test_add_rejects_missing_required_fields(client, admin_headers):
    response = await client.post(
        "/admin/pan-shares",
        json=form_body(title="", shareUrl=None),
        headers=admin_headers,
    )

    assert response.status_code == 400
    assert response.json()["details"] == {"fields": ["title", "shareUrl"]}


async def test_edit_changes_status(client, admin_headers, seed_share):
    share = await seed_share(status=PanShareStatus.PENDING)

    response = await client.put(
        f"/admin/pan-shares/{share.id}",
        json=form_body(title="Edited", status="published"),
        headers=admin_headers,
    )

    assert response.status_code == 200
    row = (await client.get(f"/admin/pan-shares/{share.id}", headers=admin_headers)).json()
    assert row["title"] == "Edited"
    assert row["status"] == "published"
    assert row["diskType"] == "aliyun"


async def test_edit_requires_status(client, admin_headers, seed_share):
    share = await seed_share()

    response = await client.put(
        f"/admin/pan-shares/{share.id}",
        json=form_body(),
        headers=admin_headers,
    )

    assert response.status_code == 400
    assert response.json()["details"] == {"fields": ["status"]}


async def test_edit_unknown_share_is_404(client, admin_headers):
    response = await client.put(
        f"/admin/pan-shares/{uuid.uuid4()}",
        json=form_body(status="published"),
        headers=admin_headers,
    )
    assert response.status_code == 404


async def test_malformed_share_id_is_404(client, admin_headers):
    fetched = await client.get("/admin/pan-shares/42", headers=admin_headers)
    approved = await client.post("/admin/pan-shares/42/approve", headers=admin_headers)

    assert fetched.status_code == approved.status_code == 404
    assert approved.json()["code"] == "NOT_FOUND"


async def test_reject_then_delete(client, admin_headers, seed_share):
    share = await seed_share(status=PanShareStatus.PENDING)

    rejected = await client.post(f"/admin/pan-shares/{share.id}/reject", headers=admin_headers)
    assert rejected.status_code == 200
    assert rejected.json()["message"] == "Pan share rejected"

    deleted = await client.delete(f"/admin/pan-shares/{share.id}", headers=admin_headers)
    assert deleted.status_code == 200

    assert (await client.get(f"/admin/pan-shares/{share.id}", headers=admin_headers)).status_code == 404
    again = await client.delete(f"/admin/pan-shares/{share.id}", headers=admin_headers)
    assert again.status_code == 404
