"""
Admin Handler

Review and management of pan shares.

ENDPOINTS:
==========
    GET    /admin/pan-shares                  pan_shares.read   table page
    GET    /admin/pan-shares/forms/{name}     pan_shares.read   add/edit form descriptor
    POST   /admin/pan-shares                  pan_shares.write  add (published)
    GET    /admin/pan-shares/{id}             pan_shares.read   full row
    PUT    /admin/pan-shares/{id}             pan_shares.write  edit, status included
    POST   /admin/pan-shares/{id}/approve     pan_shares.write
    POST   /admin/pan-shares/{id}/reject      pan_shares.write
    DELETE /admin/pan-shares/{id}             pan_shares.write  archive + soft delete

No token → 401, token without the permission → 403. Every successful
write answers {"status": "success", "message": ..., "redirectUrl": "/admin/pan-shares"}.
"""

from typing import Any, Optional

from fastapi import APIRouter, Depends, Query, status

from panshare.shared.core.exceptions import NotFoundError
from panshare.shared.models.enums import DiskType, PanShareStatus
from panshare.shared.schemas.common import SharePage
from panshare.shared.schemas.pan_share import (
    AdminActionResponse,
    AdminShareForm,
    PanShareAdmin,
)
from panshare.shared.services.pan_share_service import PanShareService
from panshare.api.dependencies import Pagination, ShareReader, ShareWriter, user_uuid
from panshare.api.dependencies.services import get_pan_share_service
from panshare.api.forms import ADD_FORM, EDIT_FORM, FORMS, table_descriptor


router = APIRouter()


@router.get("")
async def list_shares(
    _: ShareReader,
    pagination: Pagination,
    share_status: Optional[PanShareStatus] = Query(None, alias="status"),
    search: Optional[str] = Query(None),
    disk_type: Optional[DiskType] = Query(None, alias="diskType"),
    service: PanShareService = Depends(get_pan_share_service),
) -> dict[str, Any]:
    """
    Every non-deleted share with its secrets, plus the table columns.

    Response:
        {"shares": [...], "total": 3, "page": 1, "limit": 20,
         "totalPages": 1, "columns": [...]}
    """
    shares, total = await service.admin_list(
        page=pagination.page,
        limit=pagination.limit,
        status=share_status,
        search=search,
        disk_type=disk_type,
    )
    page = SharePage[PanShareAdmin].build(
        [PanShareAdmin.from_share(share) for share in shares],
        total=total,
        page=pagination.page,
        limit=pagination.limit,
    )
    return {
        **page.model_dump(by_alias=True, mode="json"),
        "columns": table_descriptor(),
    }


@router.get("/forms/{form_name}")
async def get_form(form_name: str, _: ShareReader) -> dict[str, Any]:
    """Descriptor of the add or edit form."""
    form = FORMS.get(form_name)
    if form is None:
        raise NotFoundError(resource="Form", resource_id=form_name)
    return form.to_dict()


@router.post(
    "",
    response_model=AdminActionResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_share(
    form: AdminShareForm,
    admin: ShareWriter,
    service: PanShareService = Depends(get_pan_share_service),
):
    """Add a share; it is published immediately with the admin as owner."""
    ADD_FORM.validate(form.model_dump(by_alias=True))
    await service.admin_create(user_uuid(admin), form)
    return AdminActionResponse(message="Pan share created")


@router.get("/{share_id}", response_model=PanShareAdmin)
async def get_share(
    share_id: str,
    _: ShareReader,
    service: PanShareService = Depends(get_pan_share_service),
):
    share = await service.admin_get(share_id)
    return PanShareAdmin.from_share(share)


@router.put("/{share_id}", response_model=AdminActionResponse)
async def update_share(
    share_id: str,
    form: AdminShareForm,
    _: ShareWriter,
    service: PanShareService = Depends(get_pan_share_service),
):
    """Replace the editable fields of a share, status included."""
    EDIT_FORM.validate(form.model_dump(by_alias=True))
    await service.admin_update(share_id, form)
    return AdminActionResponse(message="Pan share updated")


@router.post("/{share_id}/approve", response_model=AdminActionResponse)
async def approve_share(
    share_id: str,
    _: ShareWriter,
    service: PanShareService = Depends(get_pan_share_service),
):
    await service.approve(share_id)
    return AdminActionResponse(message="Pan share approved")


@router.post("/{share_id}/reject", response_model=AdminActionResponse)
async def reject_share(
    share_id: str,
    _: ShareWriter,
    service: PanShareService = Depends(get_pan_share_service),
):
    await service.reject(share_id)
    return AdminActionResponse(message="Pan share rejected")


@router.delete("/{share_id}", response_model=AdminActionResponse)
async def delete_share(
    share_id: str,
    _: ShareWriter,
    service: PanShareService = Depends(get_pan_share_service),
):
    """Archive and soft-delete a share."""
    await service.delete(share_id)
    return AdminActionResponse(message="Pan share deleted")
