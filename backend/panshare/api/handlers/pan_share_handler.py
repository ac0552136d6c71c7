"""
PanShare Handler

Public catalog, user submissions and the gated secret endpoint.

ENDPOINTS:
==========
    GET  /pan-shares                 public    published catalog page
    POST /pan-shares                 signed in submit for review (pending)
    GET  /pan-shares/mine            signed in caller's own shares, any status
    GET  /pan-shares/{id}            public    published share detail
    POST /pan-shares/{id}/secret     signed in {shareUrl, shareCode}

Listings and details never carry shareUrl/shareCode; the secret endpoint
is the only way to read them.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from panshare.shared.models.enums import DiskType, PanShareStatus
from panshare.shared.schemas.common import ErrorResponse, SharePage
from panshare.shared.schemas.pan_share import (
    PanShareDetail,
    PanShareOwned,
    PanSharePublic,
    ShareSecretResponse,
    SubmitShareRequest,
    SubmitShareResponse,
)
from panshare.shared.services.pan_share_service import PanShareService
from panshare.api.dependencies import CurrentUser, Pagination, user_uuid
from panshare.api.dependencies.services import get_pan_share_service


router = APIRouter()


@router.get("", response_model=SharePage[PanSharePublic])
async def list_shares(
    pagination: Pagination,
    search: Optional[str] = Query(None, description="Substring of title or description"),
    disk_type: Optional[DiskType] = Query(None, alias="diskType"),
    service: PanShareService = Depends(get_pan_share_service),
):
    """
    Published shares, newest first.

    Example:
        GET /pan-shares?page=1&limit=20&search=linear&diskType=baidu
    """
    shares, total = await service.list_public(
        page=pagination.page,
        limit=pagination.limit,
        search=search,
        disk_type=disk_type,
    )
    return SharePage[PanSharePublic].build(
        [PanSharePublic.from_share(share) for share in shares],
        total=total,
        page=pagination.page,
        limit=pagination.limit,
    )


@router.post(
    "",
    response_model=SubmitShareResponse,
    status_code=status.HTTP_201_CREATED,
)
async def submit_share(
    request: SubmitShareRequest,
    current_user: CurrentUser,
    service: PanShareService = Depends(get_pan_share_service),
):
    """
    Submit a share for review.

    The share is stored PENDING and only appears publicly once approved.
    """
    share = await service.submit_share(user_uuid(current_user), request)
    return SubmitShareResponse(id=str(share.id))


@router.get("/mine", response_model=SharePage[PanShareOwned])
async def list_my_shares(
    current_user: CurrentUser,
    pagination: Pagination,
    share_status: Optional[PanShareStatus] = Query(None, alias="status"),
    service: PanShareService = Depends(get_pan_share_service),
):
    """The caller's own submissions with their review status."""
    shares, total = await service.list_user_shares(
        user_uuid(current_user),
        status=share_status,
        page=pagination.page,
        limit=pagination.limit,
    )
    return SharePage[PanShareOwned].build(
        [PanShareOwned.from_share(share) for share in shares],
        total=total,
        page=pagination.page,
        limit=pagination.limit,
    )


@router.get(
    "/{share_id}",
    response_model=PanShareDetail,
    responses={404: {"model": ErrorResponse}},
)
async def get_share(
    share_id: str,
    service: PanShareService = Depends(get_pan_share_service),
):
    """
    Detail of a published share.

    Raises:
        404: Missing, deleted or not published
    """
    share = await service.get_public_share(share_id)
    return PanShareDetail.from_share(share)


@router.post(
    "/{share_id}/secret",
    response_model=ShareSecretResponse,
    responses={401: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def reveal_secret(
    share_id: str,
    current_user: CurrentUser,
    service: PanShareService = Depends(get_pan_share_service),
):
    """
    Link and extraction code of a published share.

    Raises:
        401: Not signed in
        404: Missing, deleted or not published (same response for all three)
    """
    share_url, share_code = await service.reveal_secret(share_id, current_user)
    return ShareSecretResponse(share_url=share_url, share_code=share_code)
