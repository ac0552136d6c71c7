"""
Business Logic Services

Services encapsulate business logic and coordinate between repositories,
external services, and domain rules.

Service Pattern:
================
    Handler → Service → Repository → Database
                ↘ Object storage

Services should:
- Contain business logic and validation
- Raise PanShareException subclasses for expected failures
- NOT handle HTTP concerns (that's for handlers)

Available Services:
===================
- AuthService: User registration and authentication
- PanShareService: Submissions, public catalog, secrets and admin review
- CoverImageService: Cover image validation and upload

Usage:
======
    from panshare.shared.services import PanShareService

    service = PanShareService(db)
    shares, total = await service.list_public(page=1, limit=20)
"""

from panshare.shared.services.auth_service import AuthService
from panshare.shared.services.pan_share_service import PanShareService
from panshare.shared.services.cover_image_service import CoverImageService

__all__ = [
    "AuthService",
    "PanShareService",
    "CoverImageService",
]
