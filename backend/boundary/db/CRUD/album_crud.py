"""
Album CRUD operations.

Extends BaseCRUD with the filtered listing query and the cover image
reference update.

Dependencies: sqlalchemy, backend.boundary.db.models, backend.core.album_filters
System role: Album persistence operations
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from backend.boundary.db.CRUD.base_crud import BaseCRUD
from backend.boundary.db.models.album_model import AlbumModel
from backend.core.album_filters import AlbumFilters, build_album_query


class AlbumCRUD(BaseCRUD[AlbumModel]):
    """CRUD operations for AlbumModel."""

    def __init__(self) -> None:
        """Initialize AlbumCRUD with AlbumModel."""
        super().__init__(AlbumModel)

    async def list_filtered(
        self,
        session: AsyncSession,
        filters: AlbumFilters | None = None,
    ) -> Sequence[AlbumModel]:
        """
        Retrieve albums matching the listing filters, in sort order.

        Args:
            session: Async database session
            filters: Genre / year / sort filters

        Returns:
            Sequence of AlbumModel rows
        """
        stmt = build_album_query(filters).execution_options(populate_existing=True)
        result = await session.execute(stmt)
        return result.scalars().all()

    async def set_photo(
        self,
        session: AsyncSession,
        id: UUID,
        photo_url: str,
    ) -> AlbumModel | None:
        """
        Point the album's image reference at a new URL.

        Args:
            session: Async database session
            id: Album UUID
            photo_url: Public image URL

        Returns:
            Updated AlbumModel if found, None otherwise
        """
        return await self.set_columns(session, id, photo=photo_url)


album_crud = AlbumCRUD()
