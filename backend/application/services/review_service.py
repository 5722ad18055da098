"""
Review service orchestrator.

Coordinates review submission: validation, the aggregate-updating insert
transaction, and change notifications after commit.

Dependencies: backend.boundary.db.CRUD, backend.core
System role: Review submission and listing use cases
"""

import logging
from collections.abc import Mapping
from typing import Any, Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from backend.boundary.db.CRUD.rating_crud import rating_crud
from backend.boundary.db.connection import DatabaseContext
from backend.boundary.db.models.rating_model import RatingModel
from backend.core.aggregation import is_numeric_rating, parse_rating
from backend.core.exceptions import AlbumNotFoundError, ValidationError
from backend.core.identifiers import coerce_album_id
from backend.core.realtime.change_feed import ChangeFeed, album_change_topics

logger = logging.getLogger(__name__)


def _field(review: Any, name: str, default: Any = None) -> Any:
    if isinstance(review, Mapping):
        return review.get(name, default)
    return getattr(review, name, default)


class ReviewService:
    """Review service orchestrator."""

    def __init__(self, db: AsyncSession, change_feed: ChangeFeed) -> None:
        """
        Initialize review service.

        Args:
            db: Async SQLAlchemy session
            change_feed: Feed notified after each committed review
        """
        self.db = db
        self.change_feed = change_feed

    async def add_review(
        self,
        album_id,
        rating: Any,
        text: str = "",
        user_id: str | None = None,
    ) -> RatingModel:
        """
        Store a review and fold its rating into the album aggregates.

        Both writes happen in one transaction. The aggregate UPDATE runs
        first and reads the current values under the row lock, so
        concurrent submissions serialize instead of overwriting each other.

        Args:
            album_id: Album UUID or its string form
            rating: Numeric rating
            text: Review comment
            user_id: Submitting user identifier

        Returns:
            RatingModel: Stored review

        Raises:
            ValidationError: If album_id is missing or rating is not numeric
            AlbumNotFoundError: If the album does not exist (nothing is written)
        """
        album_uuid = coerce_album_id(album_id)
        if not is_numeric_rating(rating):
            raise ValidationError(
                "Review must include a numeric rating field",
                field="rating",
                details={"album_id": str(album_uuid)},
            )

        try:
            review = await rating_crud.add_rating(
                self.db,
                album_uuid,
                float(rating),
                text=text or "",
                user_id=user_id,
            )
            if review is None:
                await self.db.rollback()
                raise AlbumNotFoundError(str(album_uuid))
            await self.db.commit()
        except AlbumNotFoundError:
            logger.warning(
                "Review rejected, album does not exist",
                extra={"album_id": str(album_uuid)},
            )
            raise
        except Exception as e:
            await self.db.rollback()
            logger.error(
                "Failed to add review",
                extra={"error": str(e), "album_id": str(album_uuid)},
            )
            raise

        self.change_feed.publish(*album_change_topics(album_uuid, ratings=True))
        logger.info(
            "Review added",
            extra={
                "album_id": str(album_uuid),
                "review_id": str(review.id),
                "rating": review.rating,
            },
        )
        return review

    async def handle_form_submission(self, form: Mapping[str, Any]) -> RatingModel:
        """
        Submit a review from raw form values.

        Form posts carry every value as a string, so the rating is parsed
        to a number before the transaction runs.

        Args:
            form: Mapping with album_id, rating, text and user

        Returns:
            RatingModel: Stored review

        Raises:
            ValidationError: If album_id is missing or rating is not numeric
            AlbumNotFoundError: If the album does not exist
        """
        album_uuid = coerce_album_id(form.get("album_id"))
        rating = parse_rating(form.get("rating"))
        return await self.add_review(
            album_uuid,
            rating,
            text=form.get("text") or "",
            user_id=form.get("user") or None,
        )

    async def list_reviews(self, album_id) -> Sequence[RatingModel]:
        """
        List an album's reviews, newest first.

        A missing album has no reviews, so the result is empty.

        Args:
            album_id: Album UUID or its string form

        Returns:
            Sequence[RatingModel]: Reviews ordered by submission time descending
        """
        album_uuid = coerce_album_id(album_id)
        try:
            return await rating_crud.list_for_album(self.db, album_uuid)
        except Exception as e:
            logger.error(
                "Failed to list reviews",
                extra={"error": str(e), "album_id": str(album_uuid)},
            )
            raise


async def add_review_to_album(ctx: DatabaseContext, album_id, review: Any) -> RatingModel:
    """
    Submit a review to an album in its own session.

    Args:
        ctx: Database context
        album_id: Album UUID or its string form
        review: Mapping or object carrying rating, text and user

    Returns:
        RatingModel: Stored review
    """
    async with ctx.session() as session:
        return await ReviewService(session, ctx.change_feed).add_review(
            album_id,
            _field(review, "rating"),
            text=_field(review, "text", "") or "",
            user_id=_field(review, "user"),
        )


async def handle_review_form_submission(
    ctx: DatabaseContext,
    form: Mapping[str, Any],
) -> RatingModel:
    """Submit a review from raw form values in its own session."""
    async with ctx.session() as session:
        return await ReviewService(session, ctx.change_feed).handle_form_submission(form)


async def get_reviews_by_album_id(ctx: DatabaseContext, album_id) -> Sequence[RatingModel]:
    """List an album's reviews, newest first, in its own session."""
    async with ctx.session() as session:
        return await ReviewService(session, ctx.change_feed).list_reviews(album_id)
