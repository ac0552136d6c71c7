"""
Custom Exceptions

Application-specific exceptions with HTTP status codes and error codes.

Exception Hierarchy:
====================
    PanShareException (base)
       │
       ├── AuthenticationError (401)    ← Missing/invalid token, bad credentials
       ├── AuthorizationError (403)     ← Authenticated but lacks a permission
       ├── NotFoundError (404)          ← Resource not found
       │      └── ShareNotFoundError
       ├── ValidationError (400)        ← Missing or malformed input
       ├── ConflictError (409)          ← Resource already exists
       │      └── DuplicateResourceError
       └── StorageError (502)           ← Object storage upload failed

Usage:
======
    from panshare.shared.core.exceptions import ShareNotFoundError, ValidationError

    raise ShareNotFoundError()
    # Results in: {"error": "Share not found", "code": "NOT_FOUND"}

    raise ValidationError("Title is required", details={"field": "title"})

Exception Handling:
===================
    Exceptions are caught by the error handler middleware and rendered as:
    {
        "error": "Share not found",
        "code": "NOT_FOUND"
    }
"""

from typing import Any, Optional


class PanShareException(Exception):
    """
    Base exception for all panShare application errors.

    Attributes:
        message: Human-readable error message
        status_code: HTTP status code (default 500)
        error_code: Machine-readable error code
        details: Additional error context
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        error_code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.error_code = error_code or "INTERNAL_ERROR"
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """
        Convert exception to the uniform error body.

        Returns:
            Dictionary with the message under "error" and the code under "code"
        """
        body: dict[str, Any] = {
            "error": self.message,
            "code": self.error_code,
        }
        if self.details:
            body["details"] = self.details
        return body


# ═══════════════════════════════════════════════════════════════════════════════
# AUTHENTICATION & AUTHORIZATION ERRORS (401, 403)
# ═══════════════════════════════════════════════════════════════════════════════


class AuthenticationError(PanShareException):
    """
    Authentication failed error (401 Unauthorized).

    Raised when:
    - No bearer token was sent
    - Token expired or malformed
    - Login credentials do not match
    """

    def __init__(
        self,
        message: str = "Please login first",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=401,
            error_code="AUTHENTICATION_ERROR",
            details=details,
        )


class AuthorizationError(PanShareException):
    """
    Authorization failed error (403 Forbidden).

    Raised when user is authenticated but lacks permission.
    """

    def __init__(
        self,
        message: str = "Access denied",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=403,
            error_code="AUTHORIZATION_ERROR",
            details=details,
        )


# ═══════════════════════════════════════════════════════════════════════════════
# NOT FOUND ERRORS (404)
# ═══════════════════════════════════════════════════════════════════════════════


class NotFoundError(PanShareException):
    """
    Resource not found error (404 Not Found).

    Example:
        raise NotFoundError("User", user_id)
        # Message: "User with id 'abc-123' not found"
    """

    def __init__(
        self,
        resource: str,
        resource_id: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        message = f"{resource} not found"
        if resource_id:
            message = f"{resource} with id '{resource_id}' not found"
        super().__init__(
            message=message,
            status_code=404,
            error_code="NOT_FOUND",
            details=details,
        )


class ShareNotFoundError(NotFoundError):
    """
    Share not found error.

    The id is deliberately left out of the message: a missing share, a
    soft-deleted share and an unpublished share all produce the same body.
    """

    def __init__(self) -> None:
        super().__init__(resource="Share")


# ═══════════════════════════════════════════════════════════════════════════════
# VALIDATION & CONFLICT ERRORS (400, 409)
# ═══════════════════════════════════════════════════════════════════════════════


class ValidationError(PanShareException):
    """
    Validation error (400 Bad Request).

    Raised when input data fails validation.
    """

    def __init__(
        self,
        message: str = "Validation failed",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=400,
            error_code="VALIDATION_ERROR",
            details=details,
        )


class ConflictError(PanShareException):
    """
    Resource conflict error (409 Conflict).

    Example:
        raise ConflictError("Email already registered")
    """

    def __init__(
        self,
        message: str = "Resource conflict",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=409,
            error_code="CONFLICT",
            details=details,
        )


class DuplicateResourceError(ConflictError):
    """Conflict raised when creating a resource that already exists."""

    def __init__(
        self,
        message: str = "Resource already exists",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message=message, details=details)


# ═══════════════════════════════════════════════════════════════════════════════
# EXTERNAL SERVICE ERRORS (502)
# ═══════════════════════════════════════════════════════════════════════════════


class StorageError(PanShareException):
    """
    Object storage error (502 Bad Gateway).

    Raised when the storage provider rejects or fails an upload.
    """

    def __init__(
        self,
        message: str = "Failed to store file",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=502,
            error_code="STORAGE_ERROR",
            details=details,
        )
