"""
Rating CRUD operations.

Ratings live under an album and feed its avg_rating / num_ratings
aggregates through AggregateCRUD.

Dependencies: sqlalchemy, backend.boundary.db.models
System role: Review persistence operations
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from backend.boundary.db.CRUD.aggregate_crud import AggregateCRUD
from backend.boundary.db.models.album_model import AlbumModel
from backend.boundary.db.models.rating_model import RatingModel


class RatingCRUD(AggregateCRUD[AlbumModel, RatingModel]):
    """CRUD operations for RatingModel with album aggregate maintenance."""

    def __init__(self) -> None:
        """Initialize RatingCRUD over the albums/ratings pair."""
        super().__init__(
            RatingModel,
            parent_model=AlbumModel,
            parent_key="album_id",
            value_field="rating",
            avg_field="avg_rating",
            count_field="num_ratings",
        )

    async def add_rating(
        self,
        session: AsyncSession,
        album_id: UUID,
        rating: float,
        text: str,
        user_id: str | None = None,
    ) -> RatingModel | None:
        """
        Insert a rating and update its album's aggregates.

        Args:
            session: Async database session (caller commits)
            album_id: Parent album UUID
            rating: Numeric rating
            text: Review comment
            user_id: Submitting user identifier

        Returns:
            Created RatingModel, or None if the album does not exist
        """
        return await self.add_with_aggregate(
            session,
            album_id,
            rating,
            text=text,
            user_id=user_id,
        )

    async def list_for_album(
        self,
        session: AsyncSession,
        album_id: UUID,
    ) -> Sequence[RatingModel]:
        """
        Retrieve an album's ratings, newest first.

        Args:
            session: Async database session
            album_id: Album UUID

        Returns:
            Sequence of RatingModel rows
        """
        return await self.list_for_parent(session, album_id, newest_first=True)


rating_crud = RatingCRUD()
