"""
Generic child-with-parent-aggregate CRUD.

Inserting a child row (a rating) also folds its value into an average and
count stored on the parent row (an album). The parent update is a single
UPDATE whose SET clause reads the parent's current aggregate columns, so
the database serializes concurrent inserts on the parent's row lock and no
update is lost. Parameterized by parent model and column names; nothing
here is album-specific.

Dependencies: sqlalchemy, backend.boundary.db.CRUD.base_crud
System role: Transactional aggregate maintenance for nested collections
"""

from typing import Any, Generic, Sequence, TypeVar
from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from backend.boundary.db.base import Base
from backend.boundary.db.CRUD.base_crud import BaseCRUD, ModelT

ParentT = TypeVar("ParentT", bound=Base)


class AggregateCRUD(BaseCRUD[ModelT], Generic[ParentT, ModelT]):
    """
    CRUD for a child collection whose parent stores (average, count).

    Attributes:
        model: Child model (e.g. RatingModel)
        parent_model: Parent model (e.g. AlbumModel)
        parent_key: Child column referencing the parent id
        value_field: Child column averaged into the parent
        avg_field: Parent column holding the average
        count_field: Parent column holding the count
    """

    def __init__(
        self,
        model: type[ModelT],
        parent_model: type[ParentT],
        parent_key: str,
        value_field: str,
        avg_field: str,
        count_field: str,
    ) -> None:
        super().__init__(model)
        self.parent_model = parent_model
        self.parent_key = parent_key
        self.value_field = value_field
        self.avg_field = avg_field
        self.count_field = count_field

    async def _apply_to_parent(
        self,
        session: AsyncSession,
        parent_id: UUID,
        value: float,
    ) -> bool:
        """
        Fold one value into the parent's aggregate columns.

        SQL evaluates every SET expression against the pre-update row, so
        both columns are derived from the same (avg, count) pair.

        Returns:
            bool: False when the parent row does not exist
        """
        avg_col = getattr(self.parent_model, self.avg_field)
        count_col = getattr(self.parent_model, self.count_field)
        stmt = (
            update(self.parent_model)
            .where(self.parent_model.id == parent_id)
            .values(
                {
                    self.avg_field: (avg_col * count_col + value) / (count_col + 1),
                    self.count_field: count_col + 1,
                }
            )
            .execution_options(synchronize_session=False)
        )
        result = await session.execute(stmt)
        return result.rowcount > 0

    async def add_with_aggregate(
        self,
        session: AsyncSession,
        parent_id: UUID,
        value: float,
        **fields: Any,
    ) -> ModelT | None:
        """
        Insert a child row and update the parent aggregates.

        The parent is updated first: that takes its row lock before the
        insert, and a missing parent is detected before anything is written.
        Must run inside the caller's transaction.

        Args:
            session: Async database session (transaction owned by caller)
            parent_id: Parent primary key
            value: Value to fold into the parent's average
            **fields: Remaining child column values

        Returns:
            Created child instance, or None if the parent does not exist
        """
        if not await self._apply_to_parent(session, parent_id, value):
            return None
        return await self.create(
            session,
            **{self.parent_key: parent_id, self.value_field: value},
            **fields,
        )

    async def list_for_parent(
        self,
        session: AsyncSession,
        parent_id: UUID,
        newest_first: bool = True,
    ) -> Sequence[ModelT]:
        """
        Retrieve all children of one parent ordered by creation time.

        Args:
            session: Async database session
            parent_id: Parent primary key
            newest_first: Order by created_at descending when True

        Returns:
            Sequence of child instances
        """
        created_at = self.model.created_at
        stmt = (
            select(self.model)
            .where(getattr(self.model, self.parent_key) == parent_id)
            .order_by(created_at.desc() if newest_first else created_at.asc())
        )
        result = await session.execute(stmt)
        return result.scalars().all()
