"""
Album service orchestrator.

Coordinates the filtered album listing and single-album reads.

Dependencies: backend.boundary.db.CRUD, backend.core.album_filters
System role: Album read use cases
"""

import logging
from typing import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from backend.boundary.db.CRUD.album_crud import album_crud
from backend.boundary.db.connection import DatabaseContext
from backend.boundary.db.models.album_model import AlbumModel
from backend.core.album_filters import AlbumFilters
from backend.core.exceptions import AlbumNotFoundError
from backend.core.identifiers import coerce_album_id

logger = logging.getLogger(__name__)


class AlbumService:
    """Album service orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize album service with async database session.

        Args:
            db: Async SQLAlchemy session
        """
        self.db = db

    async def list_albums(self, filters: AlbumFilters | None = None) -> Sequence[AlbumModel]:
        """
        List albums matching genre/year filters in sort order.

        Args:
            filters: Normalized listing filters (defaults: no filter, Rating sort)

        Returns:
            Sequence[AlbumModel]: Matching albums
        """
        filters = filters or AlbumFilters()
        try:
            albums = await album_crud.list_filtered(self.db, filters)
            logger.debug(
                "Albums listed",
                extra={**filters.to_dict(), "count": len(albums)},
            )
            return albums
        except Exception as e:
            logger.error(
                "Failed to list albums",
                extra={"error": str(e), **filters.to_dict()},
            )
            raise

    async def get_album(self, album_id) -> AlbumModel:
        """
        Get album by ID.

        Args:
            album_id: Album UUID or its string form

        Returns:
            AlbumModel: Album record

        Raises:
            ValidationError: If album_id is missing
            AlbumNotFoundError: If no album has this id
        """
        album_uuid = coerce_album_id(album_id)
        album = await album_crud.get_by_id(self.db, album_uuid)
        if album is None:
            raise AlbumNotFoundError(str(album_uuid))
        return album

    async def find_album(self, album_id) -> AlbumModel | None:
        """Get album by ID, or None when it does not exist."""
        try:
            return await self.get_album(album_id)
        except AlbumNotFoundError:
            return None


async def get_albums(
    ctx: DatabaseContext,
    filters: AlbumFilters | None = None,
) -> Sequence[AlbumModel]:
    """Run the filtered listing query in its own session."""
    async with ctx.session() as session:
        return await AlbumService(session).list_albums(filters)


async def get_album_by_id(ctx: DatabaseContext, album_id) -> AlbumModel:
    """Fetch one album in its own session; AlbumNotFoundError when missing."""
    async with ctx.session() as session:
        return await AlbumService(session).get_album(album_id)
