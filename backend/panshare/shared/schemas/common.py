"""
Common Schemas

Shared schemas used across the application for consistent API responses.

Schema Types:
=============
- BaseSchema: Base with common config (from_attributes, camelCase aliases)
- Pagination: Query parameters and the paginated page wrapper
- Generic Responses: ErrorResponse (OpenAPI docs), HealthResponse

Wire Format:
============
Python attributes are snake_case; JSON keys are camelCase. Request bodies
accept either spelling.

    class ShareSecretResponse(BaseSchema):
        share_url: str          # → "shareUrl"
        share_code: str | None  # → "shareCode"
"""

import math
from datetime import datetime, timezone
from typing import Any, Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


# Generic type for paginated responses
DataT = TypeVar("DataT")


class BaseSchema(BaseModel):
    """
    Base schema with common configuration.

    - from_attributes: Allow creating from ORM models
    - populate_by_name: Accept snake_case names as well as camelCase aliases
    - alias_generator: Serialize with camelCase keys
    """

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )


# ═══════════════════════════════════════════════════════════════════════════════
# PAGINATION
# ═══════════════════════════════════════════════════════════════════════════════


class PaginationParams(BaseModel):
    """
    Pagination query parameters, built by the get_pagination dependency.

    Example:
        @router.get("")
        async def list_shares(pagination: PaginationParams = Depends(get_pagination)):
            shares = await service.list_public(page=pagination.page, limit=pagination.limit)
    """

    page: int = Field(default=1, ge=1, description="Page number (1-indexed)")
    limit: int = Field(default=20, ge=1, description="Items per page")


def total_pages(total: int, limit: int) -> int:
    """ceil(total / limit); zero when there is nothing to page through."""
    if limit <= 0:
        return 0
    return math.ceil(total / limit)


class SharePage(BaseSchema, Generic[DataT]):
    """
    One page of shares plus the numbers a client needs to paginate.

    Example:
        {"shares": [...], "total": 41, "page": 2, "limit": 20, "totalPages": 3}
    """

    shares: List[DataT]
    total: int
    page: int
    limit: int
    total_pages: int

    @classmethod
    def build(cls, shares: List[DataT], total: int, page: int, limit: int) -> "SharePage[DataT]":
        return cls(
            shares=shares,
            total=total,
            page=page,
            limit=limit,
            total_pages=total_pages(total, limit),
        )


# ═══════════════════════════════════════════════════════════════════════════════
# STANDARD RESPONSES
# ═══════════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """
    Standard error response schema.

    All API errors return this format for consistency.

    Example:
        {"error": "Share not found", "code": "NOT_FOUND"}
    """

    error: str = Field(description="Human-readable error message")
    code: str = Field(description="Machine-readable error code")
    details: Optional[dict[str, Any]] = None


# ═══════════════════════════════════════════════════════════════════════════════
# HEALTH CHECK
# ═══════════════════════════════════════════════════════════════════════════════


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str = "healthy"
    service: str = "panshare"
    version: str = "1.0.0"
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
