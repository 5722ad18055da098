"""Tests for SummaryService."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from backend.application.services.review_service import add_review_to_album
from backend.application.services.summary_service import SummaryService
from backend.core.summary.review_summarizer import (
    LOAD_FAILED_MESSAGE,
    NO_REVIEWS_MESSAGE,
    ReviewSummarizer,
    SummaryResult,
)


@pytest.fixture
def summarizer() -> MagicMock:
    summarizer = MagicMock(spec=ReviewSummarizer)
    summarizer.summarize = AsyncMock(
        return_value=SummaryResult(summary="Fans love it.", review_count=2, generated=True)
    )
    return summarizer


class TestGetAlbumSummary:
    """Tests for get_album_summary()."""

    @pytest.mark.asyncio
    async def test_reviews_passed_to_summarizer(self, db_context, db_session, make_album, summarizer) -> None:
        album = await make_album()
        await add_review_to_album(db_context, album.id, {"rating": 5, "text": "Great"})
        await add_review_to_album(db_context, album.id, {"rating": 4, "text": "Good"})

        response = await SummaryService(db_session, summarizer).get_album_summary(str(album.id))

        assert response.album_id == album.id
        assert response.summary == "Fans love it."
        assert response.generated is True
        reviews = summarizer.summarize.call_args.args[0]
        assert [r.text for r in reviews] == ["Good", "Great"]

    @pytest.mark.asyncio
    async def test_no_reviews_message(self, db_session, make_album) -> None:
        album = await make_album()
        model = MagicMock()
        model.ainvoke = AsyncMock()

        response = await SummaryService(
            db_session, ReviewSummarizer(model=model)
        ).get_album_summary(album.id)

        assert response.summary == NO_REVIEWS_MESSAGE
        assert response.review_count == 0
        model.ainvoke.assert_not_called()

    @pytest.mark.asyncio
    async def test_load_failure_message(self, db_session, album_id, summarizer) -> None:
        with patch(
            "backend.application.services.summary_service.rating_crud.list_for_album",
            AsyncMock(side_effect=RuntimeError("db gone")),
        ):
            response = await SummaryService(db_session, summarizer).get_album_summary(album_id)

        assert response.summary == LOAD_FAILED_MESSAGE
        assert response.generated is False
        summarizer.summarize.assert_not_called()
