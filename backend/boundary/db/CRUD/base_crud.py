"""
Shared single-row operations for the storefront tables.

Every method works inside the caller's session and flushes at most; the
service that opened the session decides when to commit.

Dependencies: sqlalchemy
System role: Row access helpers inherited by album and rating CRUD
"""

from typing import Any, Generic, TypeVar
from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from backend.boundary.db.base import Base

ModelT = TypeVar("ModelT", bound=Base)


class BaseCRUD(Generic[ModelT]):
    """
    Row helpers keyed by UUID primary key.

    Attributes:
        model: Mapped class the helpers read and write
    """

    def __init__(self, model: type[ModelT]) -> None:
        self.model = model

    async def create(self, session: AsyncSession, **values: Any) -> ModelT:
        """
        Add a row and flush it so server defaults (id, timestamps) are loaded.

        Args:
            session: Async database session
            **values: Column values

        Returns:
            The new instance, refreshed from the database
        """
        instance = self.model(**values)
        session.add(instance)
        await session.flush()
        await session.refresh(instance)
        return instance

    async def get_by_id(self, session: AsyncSession, id: UUID) -> ModelT | None:
        """
        Load one row, overwriting any copy already in the identity map.

        Aggregate columns are changed with bulk UPDATE statements that
        bypass the ORM, so a cached instance may hold stale values.
        """
        stmt = (
            select(self.model)
            .where(self.model.id == id)
            .execution_options(populate_existing=True)
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def exists(self, session: AsyncSession, id: UUID) -> bool:
        result = await session.execute(select(self.model.id).where(self.model.id == id))
        return result.first() is not None

    async def set_columns(
        self,
        session: AsyncSession,
        id: UUID,
        **values: Any,
    ) -> ModelT | None:
        """
        Overwrite columns on one row and return the fresh row.

        Args:
            session: Async database session
            id: Primary key
            **values: Column values to write

        Returns:
            Updated instance, or None when no row has that id
        """
        stmt = (
            update(self.model)
            .where(self.model.id == id)
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        result = await session.execute(stmt)
        if result.rowcount == 0:
            return None
        return await self.get_by_id(session, id)
