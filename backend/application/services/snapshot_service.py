"""
Snapshot service.

Builds real-time snapshot streams for a single album, an album's reviews
and the filtered album listing. Every reload runs in a fresh session so a
subscriber always sees committed state.

Dependencies: backend.boundary.db, backend.core.realtime
System role: Real-time read use cases
"""

import logging

from backend.boundary.db.CRUD.album_crud import album_crud
from backend.boundary.db.CRUD.rating_crud import rating_crud
from backend.boundary.db.connection import DatabaseContext
from backend.core.album_filters import AlbumFilters
from backend.core.identifiers import coerce_album_id
from backend.core.realtime.change_feed import (
    ALBUMS_TOPIC,
    album_ratings_topic,
    album_topic,
)
from backend.core.realtime.snapshot_stream import SnapshotStream
from backend.models.album import AlbumResponse
from backend.models.review import ReviewResponse

logger = logging.getLogger(__name__)


class SnapshotService:
    """Factory for snapshot streams over the album store."""

    def __init__(self, ctx: DatabaseContext) -> None:
        """
        Initialize snapshot service.

        Args:
            ctx: Database context (sessions and change feed)
        """
        self.ctx = ctx

    def album_snapshot(self, album_id) -> SnapshotStream[AlbumResponse | None]:
        """
        Stream one album's record; None while the album does not exist.

        Raises:
            ValidationError: If album_id is missing
        """
        album_uuid = coerce_album_id(album_id)

        async def load() -> AlbumResponse | None:
            async with self.ctx.session() as session:
                album = await album_crud.get_by_id(session, album_uuid)
                return AlbumResponse.model_validate(album) if album else None

        return SnapshotStream(
            self.ctx.change_feed,
            [album_topic(album_uuid)],
            load,
            name=f"album:{album_uuid}",
        )

    def reviews_snapshot(self, album_id) -> SnapshotStream[list[ReviewResponse]]:
        """
        Stream an album's reviews, newest first.

        Raises:
            ValidationError: If album_id is missing
        """
        album_uuid = coerce_album_id(album_id)

        async def load() -> list[ReviewResponse]:
            async with self.ctx.session() as session:
                reviews = await rating_crud.list_for_album(session, album_uuid)
                return [ReviewResponse.model_validate(r) for r in reviews]

        return SnapshotStream(
            self.ctx.change_feed,
            [album_ratings_topic(album_uuid)],
            load,
            name=f"reviews:{album_uuid}",
        )

    def albums_snapshot(
        self,
        filters: AlbumFilters | None = None,
    ) -> SnapshotStream[list[AlbumResponse]]:
        """Stream the filtered album listing in sort order."""
        filters = filters or AlbumFilters()

        async def load() -> list[AlbumResponse]:
            async with self.ctx.session() as session:
                albums = await album_crud.list_filtered(session, filters)
                return [AlbumResponse.model_validate(a) for a in albums]

        return SnapshotStream(
            self.ctx.change_feed,
            [ALBUMS_TOPIC],
            load,
            name="albums",
        )
