"""
Pagination dependency.

?page=2&limit=20 → PaginationParams(page=2, limit=20). limit is capped at
MAX_PAGE_SIZE; out-of-range values are a 400 like any other bad query.
"""
from typing import Annotated

from fastapi import Depends, Query

from panshare.config.settings import settings
from panshare.shared.schemas.common import PaginationParams


async def get_pagination(
    page: int = Query(1, ge=1, description="Page number (1-indexed)"),
    limit: int = Query(
        settings.DEFAULT_PAGE_SIZE,
        ge=1,
        le=settings.MAX_PAGE_SIZE,
        description="Items per page",
    ),
) -> PaginationParams:
    """Pagination parameters dependency."""
    return PaginationParams(page=page, limit=limit)


Pagination = Annotated[PaginationParams, Depends(get_pagination)]
