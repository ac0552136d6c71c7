"""
Storage adapter - MinIO / S3-compatible object storage for cover images.

Provides:
- Bucket bootstrap
- Object upload under the configured upload path
- Public URL construction (custom domain or endpoint/bucket/key)
"""

import io
from typing import Optional

import urllib3
from minio import Minio
from minio.error import S3Error

from panshare.config.settings import settings
from panshare.shared.core.exceptions import StorageError
from panshare.shared.core.logging import get_logger

logger = get_logger("storage")


class StorageAdapter:
    """
    Adapter for MinIO/S3-compatible object storage.

    Objects are stored as "<upload_path>/<key>". The client is created
    lazily so constructing the adapter never touches the network.

    S3 errors and connection failures (urllib3 errors, raised once the
    client gives up retrying) both surface as StorageError.
    """

    def __init__(
        self,
        endpoint: Optional[str] = None,
        access_key: Optional[str] = None,
        secret_key: Optional[str] = None,
        bucket: Optional[str] = None,
        upload_path: Optional[str] = None,
        public_url: Optional[str] = None,
        secure: Optional[bool] = None,
        http_client: Optional[urllib3.PoolManager] = None,
    ):
        self.endpoint = endpoint or settings.STORAGE_ENDPOINT
        self.access_key = access_key if access_key is not None else settings.STORAGE_ACCESS_KEY
        self.secret_key = secret_key if secret_key is not None else settings.STORAGE_SECRET_KEY
        self.bucket = bucket or settings.STORAGE_BUCKET
        self.upload_path = (upload_path or settings.STORAGE_UPLOAD_PATH).strip("/")
        self.public_url = (public_url if public_url is not None else settings.STORAGE_PUBLIC_URL).rstrip("/")
        self.secure = settings.STORAGE_SECURE if secure is None else secure
        self.http_client = http_client
        self._client: Optional[Minio] = None
        self._bucket_ready = False

    @property
    def client(self) -> Minio:
        """Lazy-loaded MinIO client."""
        if self._client is None:
            self._client = Minio(
                self.endpoint,
                access_key=self.access_key,
                secret_key=self.secret_key,
                secure=self.secure,
                http_client=self.http_client,
            )
        return self._client

    def object_key(self, key: str) -> str:
        key = key.lstrip("/")
        return f"{self.upload_path}/{key}" if self.upload_path else key

    def get_public_url(self, key: str) -> str:
        """
        Public URL of a stored object.

        Uses STORAGE_PUBLIC_URL when configured (CDN/custom domain),
        otherwise the endpoint-style URL http(s)://endpoint/bucket/key.
        """
        full_key = self.object_key(key)
        if self.public_url:
            return f"{self.public_url}/{full_key}"
        scheme = "https" if self.secure else "http"
        return f"{scheme}://{self.endpoint}/{self.bucket}/{full_key}"

    def ensure_bucket(self) -> None:
        """Create the bucket on first use if it does not exist yet."""
        if self._bucket_ready:
            return
        try:
            if not self.client.bucket_exists(self.bucket):
                self.client.make_bucket(self.bucket)
                logger.info("Bucket created", bucket=self.bucket)
            self._bucket_ready = True
        except (S3Error, urllib3.exceptions.HTTPError) as e:
            logger.error("Failed to initialize bucket", bucket=self.bucket, error=str(e))
            raise StorageError("Storage bucket unavailable") from e

    def upload_bytes(self, key: str, data: bytes, content_type: str) -> str:
        """
        Upload a blob and return its public URL.

        Raises:
            StorageError: If the storage provider rejects the upload or
                cannot be reached
        """
        self.ensure_bucket()
        full_key = self.object_key(key)
        try:
            self.client.put_object(
                self.bucket,
                full_key,
                io.BytesIO(data),
                length=len(data),
                content_type=content_type,
            )
        except (S3Error, urllib3.exceptions.HTTPError) as e:
            logger.error("Upload failed", key=full_key, error=str(e))
            raise StorageError() from e

        logger.info("Object stored", key=full_key, size=len(data))
        return self.get_public_url(key)
