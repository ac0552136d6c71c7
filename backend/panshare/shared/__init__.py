"""
Shared Module

Everything below the HTTP layer:
- Models: SQLAlchemy ORM models
- Repositories: Data access layer
- Services: Business logic layer
- Schemas: Pydantic request/response models
- Core: Logging, exceptions
- Adapters: Object storage

Package Structure:
==================
    shared/
    ├── core/           ← Logging, exceptions
    ├── db/             ← Database session management
    ├── models/         ← SQLAlchemy models
    ├── repositories/   ← Data access layer
    ├── services/       ← Business logic
    ├── schemas/        ← Pydantic schemas
    ├── adapters/       ← Object storage (MinIO)
    ├── migrations/     ← Alembic environment and revisions
    └── utils/          ← Password hashing, JWT

Usage:
======
    from panshare.shared.models import User, PanShare
    from panshare.shared.repositories import PanShareRepository
    from panshare.shared.services import PanShareService
    from panshare.shared.schemas import SubmitShareRequest, PanSharePublic
    from panshare.shared.core import logger, PanShareException
"""
