"""
Review summary service orchestrator.

Loads an album's reviews and asks the summarizer for a digest.

Dependencies: backend.boundary.db.CRUD, backend.core.summary
System role: Review summary use case
"""

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from backend.boundary.db.CRUD.rating_crud import rating_crud
from backend.core.identifiers import coerce_album_id
from backend.core.summary.review_summarizer import (
    LOAD_FAILED_MESSAGE,
    ReviewSummarizer,
)
from backend.models.summary import ReviewSummaryResponse

logger = logging.getLogger(__name__)


class SummaryService:
    """Review summary service orchestrator."""

    def __init__(self, db: AsyncSession, summarizer: ReviewSummarizer) -> None:
        """
        Initialize summary service.

        Args:
            db: Async SQLAlchemy session
            summarizer: Gemini review summarizer
        """
        self.db = db
        self.summarizer = summarizer

    async def get_album_summary(self, album_id) -> ReviewSummaryResponse:
        """
        Summarize an album's reviews.

        Never fails once the id is valid: a review-loading failure yields
        the "unable to load" message and model failures are handled by the
        summarizer.

        Args:
            album_id: Album UUID or its string form

        Returns:
            ReviewSummaryResponse: Summary text, review count and whether
            the model produced the text

        Raises:
            ValidationError: If album_id is missing
        """
        album_uuid: UUID = coerce_album_id(album_id)

        try:
            reviews = await rating_crud.list_for_album(self.db, album_uuid)
        except Exception as e:
            logger.error(
                "Failed to load reviews for summary",
                extra={"album_id": str(album_uuid), "error": str(e)},
            )
            return ReviewSummaryResponse(
                album_id=album_uuid,
                summary=LOAD_FAILED_MESSAGE,
                review_count=0,
                generated=False,
            )

        result = await self.summarizer.summarize(reviews)
        return ReviewSummaryResponse(
            album_id=album_uuid,
            summary=result.summary,
            review_count=result.review_count,
            generated=result.generated,
        )
