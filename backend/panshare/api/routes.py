"""
Route Registration

Centralizes all route registration for the FastAPI application.

Route Hierarchy:
================
    /health, /ready, /live  → Health check endpoints
    /auth                   → Authentication (register, login, me)
    /pan-shares             → Public catalog, submissions, secrets
    /admin/pan-shares       → Review and management (permission-gated)
    /admin/uploads          → Cover image uploads (permission-gated)

Usage:
======
    from panshare.api.routes import register_routes

    app = FastAPI()
    register_routes(app)
"""

from fastapi import FastAPI

from panshare.api.handlers import (
    admin_handler,
    auth_handler,
    health_handler,
    pan_share_handler,
    upload_handler,
)


def register_routes(app: FastAPI) -> None:
    """
    Register all API routes.

    Args:
        app: FastAPI application instance
    """
    # Health check endpoints (no prefix, root level)
    app.include_router(
        health_handler.router,
        tags=["Health"],
    )

    # Authentication endpoints
    app.include_router(
        auth_handler.router,
        prefix="/auth",
        tags=["Authentication"],
    )

    # Public catalog
    app.include_router(
        pan_share_handler.router,
        prefix="/pan-shares",
        tags=["Pan Shares"],
    )

    # Admin
    app.include_router(
        admin_handler.router,
        prefix="/admin/pan-shares",
        tags=["Admin"],
    )
    app.include_router(
        upload_handler.router,
        prefix="/admin/uploads",
        tags=["Admin"],
    )
