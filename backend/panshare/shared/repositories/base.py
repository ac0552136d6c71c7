"""
Base Repository

Generic base repository with the CRUD operations every entity shares.
Entity-specific repositories inherit from this class and add their own
query methods.

What This Provides:
===================
- get()         → Fetch one record by primary key
- create()      → INSERT and return the refreshed instance
- update()      → Partial UPDATE restricted to the repository's mutable fields

The session is injected by the caller (one per request); repositories never
commit. The request-scoped get_db() dependency owns the transaction.
"""

from typing import Any, ClassVar, Generic, Optional, Type, TypeVar
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from panshare.shared.models.base import Base


# TypeVar bound to Base ensures we only work with SQLAlchemy models
ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """
    Generic base repository providing common CRUD operations.

    Type Parameter:
        ModelType: The SQLAlchemy model class this repository manages

    Attributes:
        model: The SQLAlchemy model class
        session: The async database session
        mutable_fields: Column names update() is allowed to write.
            None means any attribute the model has.

    Example:
        class UserRepository(BaseRepository[User]):
            def __init__(self, session: AsyncSession):
                super().__init__(User, session)
    """

    mutable_fields: ClassVar[Optional[frozenset[str]]] = None

    def __init__(self, model: Type[ModelType], session: AsyncSession) -> None:
        """
        Initialize the repository.

        Args:
            model: SQLAlchemy model class (e.g., User, PanShare)
            session: Async database session from get_db()
        """
        self.model = model
        self.session = session

    # ═══════════════════════════════════════════════════════════════════════════
    # READ OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def get(self, record_id: UUID) -> Optional[ModelType]:
        """
        Get a single record by its UUID, or None if it does not exist.

        SQL Generated:
            SELECT * FROM users WHERE id = '550e8400-...'
        """
        result = await self.session.execute(select(self.model).where(self.model.id == record_id))
        return result.scalar_one_or_none()

    # ═══════════════════════════════════════════════════════════════════════════
    # CREATE OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def create(self, **kwargs: Any) -> ModelType:
        """
        Create a new record.

        Adds the instance to the session and flushes so that generated
        values (id, timestamps) are populated, then refreshes it.

        Args:
            **kwargs: Field values for the new record

        Returns:
            The created model instance with all DB-generated values

        SQL Generated:
            INSERT INTO pan_shares (id, title, share_url, ...)
            VALUES ('...', 'Lecture videos', 'https://pan.baidu.com/s/1...', ...)
        """
        instance = self.model(**kwargs)
        self.session.add(instance)
        await self.session.flush()
        await self.session.refresh(instance)
        return instance

    # ═══════════════════════════════════════════════════════════════════════════
    # UPDATE OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def _apply_update(
        self,
        instance: Optional[ModelType],
        changes: dict[str, Any],
    ) -> Optional[ModelType]:
        """
        Write changes onto a loaded instance and flush.

        Keys outside mutable_fields are dropped. None is written through,
        so optional columns can be cleared.
        """
        if instance is None:
            return None

        for field, value in changes.items():
            if self.mutable_fields is not None and field not in self.mutable_fields:
                continue
            if hasattr(instance, field):
                setattr(instance, field, value)

        await self.session.flush()
        await self.session.refresh(instance)
        return instance

    async def update(self, record_id: UUID, **changes: Any) -> Optional[ModelType]:
        """
        Update a record by ID.

        Args:
            record_id: UUID of the record to update
            **changes: Fields to update

        Returns:
            Updated model instance, or None if not found

        SQL Generated:
            UPDATE users SET role = 'admin', updated_at = NOW() WHERE id = '...'
        """
        instance = await self.get(record_id)
        return await self._apply_update(instance, changes)
