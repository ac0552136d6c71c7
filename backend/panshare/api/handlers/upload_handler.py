"""
Upload Handler

Cover image uploads for the admin forms.

    POST /admin/uploads/cover-image   (multipart, field "file")
    → 201 {"url": "https://cdn.example.com/uploads/covers/3f2a....png"}
"""

from fastapi import APIRouter, Depends, File, UploadFile, status

from panshare.shared.schemas.common import BaseSchema
from panshare.shared.services.cover_image_service import CoverImageService
from panshare.api.dependencies import ShareWriter
from panshare.api.dependencies.services import get_cover_image_service


router = APIRouter()


class UploadResponse(BaseSchema):
    url: str


@router.post(
    "/cover-image",
    response_model=UploadResponse,
    status_code=status.HTTP_201_CREATED,
)
async def upload_cover_image(
    _: ShareWriter,
    file: UploadFile = File(...),
    service: CoverImageService = Depends(get_cover_image_service),
):
    """
    Store a cover image and return its public URL.

    Raises:
        400: Not an image, empty or too large
        502: Object storage failed
    """
    if file.size is not None:
        service.check_size(file.size)
    # never buffer more than one byte past the limit
    data = await file.read(service.max_bytes + 1)
    url = await service.upload(data, file.content_type)
    return UploadResponse(url=url)
