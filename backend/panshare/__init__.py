"""
panShare Backend

Catalog of cloud-storage share links with reviewed publishing.

Package Structure:
==================
    panshare/
    ├── api/        ← FastAPI application
    ├── shared/     ← Shared code (models, repositories, services, etc.)
    └── config/     ← Configuration

Running the Application:
========================
    # API Server
    uvicorn panshare.api.main:app --reload

    # Migrations
    alembic upgrade head
"""
