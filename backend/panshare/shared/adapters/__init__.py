"""
Adapters Package

External service integrations.

Contents:
=========
- storage_adapter: MinIO/S3-compatible object storage for cover images

Note: Database access is handled by shared/db/session.py using async SQLAlchemy.

Usage:
======
    from panshare.shared.adapters.storage_adapter import StorageAdapter

    url = StorageAdapter().upload_bytes("covers/abc.png", data, "image/png")
"""

from panshare.shared.adapters.storage_adapter import StorageAdapter

__all__ = [
    "StorageAdapter",
]
