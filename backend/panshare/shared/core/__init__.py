"""
Core Module

Provides core functionality shared across the application:
- Structured logging
- Custom exceptions

Usage:
======
    from panshare.shared.core.logging import logger, get_logger
    from panshare.shared.core.exceptions import PanShareException, ShareNotFoundError

    logger.info("Share approved", share_id=share_id)
"""

from panshare.shared.core.logging import (
    logger,
    get_logger,
    log_context,
    clear_log_context,
)
from panshare.shared.core.exceptions import (
    PanShareException,
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
    ShareNotFoundError,
    ValidationError,
    ConflictError,
    DuplicateResourceError,
    StorageError,
)

__all__ = [
    # Logging
    "logger",
    "get_logger",
    "log_context",
    "clear_log_context",
    # Exceptions
    "PanShareException",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "ShareNotFoundError",
    "ValidationError",
    "ConflictError",
    "DuplicateResourceError",
    "StorageError",
]
