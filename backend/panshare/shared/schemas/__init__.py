"""
Pydantic Schemas

Request and response models for the API.

Schema Categories:
==================
- common: Base schema, pagination, error responses
- user: User and authentication schemas
- pan_share: Share requests and the public/owner/admin projections

Usage:
======
    from panshare.shared.schemas.pan_share import PanSharePublic, SubmitShareRequest
    from panshare.shared.schemas.common import SharePage, ErrorResponse
"""

from panshare.shared.schemas.common import (
    BaseSchema,
    PaginationParams,
    SharePage,
    ErrorResponse,
    HealthResponse,
    total_pages,
)
from panshare.shared.schemas.user import (
    UserBase,
    UserCreate,
    UserLogin,
    UserResponse,
    CurrentUserResponse,
    AuthResponse,
)
from panshare.shared.schemas.pan_share import (
    SubmitShareRequest,
    AdminShareForm,
    PanSharePublic,
    PanShareDetail,
    PanShareOwned,
    PanShareAdmin,
    ShareSecretResponse,
    SubmitShareResponse,
    AdminActionResponse,
)

__all__ = [
    # Common
    "BaseSchema",
    "PaginationParams",
    "SharePage",
    "ErrorResponse",
    "HealthResponse",
    "total_pages",
    # User
    "UserBase",
    "UserCreate",
    "UserLogin",
    "UserResponse",
    "CurrentUserResponse",
    "AuthResponse",
    # PanShare
    "SubmitShareRequest",
    "AdminShareForm",
    "PanSharePublic",
    "PanShareDetail",
    "PanShareOwned",
    "PanShareAdmin",
    "ShareSecretResponse",
    "SubmitShareResponse",
    "AdminActionResponse",
]
