"""
Cover Image Service

Validates uploaded cover images and hands them to object storage.

Accepted formats: PNG, JPEG, GIF, WebP. Files are stored under a random
key so uploads never overwrite each other:

    uploads/covers/3f2a9c...e1.png
"""

import asyncio
import uuid
from typing import Optional

from panshare.config.settings import settings
from panshare.shared.adapters.storage_adapter import StorageAdapter
from panshare.shared.core.exceptions import ValidationError
from panshare.shared.core.logging import logger


IMAGE_EXTENSIONS = {
    "image/png": ".png",
    "image/jpeg": ".jpg",
    "image/gif": ".gif",
    "image/webp": ".webp",
}


class CoverImageService:
    """
    Service for cover image uploads.

    Attributes:
        storage: StorageAdapter the bytes are written to
        max_bytes: Largest accepted file
    """

    def __init__(self, storage: StorageAdapter, max_bytes: Optional[int] = None) -> None:
        self.storage = storage
        self.max_bytes = settings.STORAGE_MAX_IMAGE_BYTES if max_bytes is None else max_bytes

    def check_size(self, size: int) -> None:
        """Reject anything larger than max_bytes."""
        if size > self.max_bytes:
            raise ValidationError("Image is too large", details={"maxBytes": self.max_bytes})

    async def upload(self, data: bytes, content_type: Optional[str]) -> str:
        """
        Store an image and return its public URL.

        Raises:
            ValidationError: Empty file, unsupported type or too large
            StorageError: The storage provider failed
        """
        content_type = (content_type or "").split(";")[0].strip().lower()
        extension = IMAGE_EXTENSIONS.get(content_type)
        if extension is None:
            raise ValidationError(
                "Only PNG, JPEG, GIF and WebP images are allowed",
                details={"contentType": content_type or None},
            )
        if not data:
            raise ValidationError("Uploaded file is empty")
        self.check_size(len(data))

        key = f"covers/{uuid.uuid4().hex}{extension}"
        # minio is a blocking client
        url = await asyncio.to_thread(self.storage.upload_bytes, key, data, content_type)
        logger.info("Cover image uploaded", key=key, size=len(data))
        return url
