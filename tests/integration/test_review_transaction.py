"""
Integration tests for the review-submission transaction.

Runs against SQLite through aiosqlite. Verifies the aggregate invariant
(num_ratings equals the number of reviews, avg_rating their mean) under
sequential and concurrent submissions, and that rejected submissions
write nothing.
"""

import asyncio
import uuid

import pytest
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import create_async_engine

from backend.application.services.review_service import (
    add_review_to_album,
    get_reviews_by_album_id,
    handle_review_form_submission,
)
from backend.boundary.db.connection import DatabaseContext
from backend.boundary.db.models.album_model import AlbumModel
from backend.boundary.db.models.rating_model import RatingModel
from backend.core.exceptions import AlbumNotFoundError, ValidationError
from backend.core.realtime.change_feed import ALBUMS_TOPIC, album_ratings_topic, album_topic


async def _album_state(ctx: DatabaseContext, album_id: uuid.UUID) -> tuple[float, int, int]:
    async with ctx.session() as session:
        album = (
            await session.execute(select(AlbumModel).where(AlbumModel.id == album_id))
        ).scalar_one()
        review_count = (
            await session.execute(
                select(func.count(RatingModel.id)).where(RatingModel.album_id == album_id)
            )
        ).scalar_one()
    return album.avg_rating, album.num_ratings, review_count


class TestAddReviewToAlbum:
    """Tests for add_review_to_album()."""

    @pytest.mark.asyncio
    async def test_first_review_sets_aggregates(self, db_context, make_album) -> None:
        album = await make_album()

        review = await add_review_to_album(
            db_context, album.id, {"rating": 4, "text": "Lovely", "user": "u1"}
        )

        assert review.rating == 4.0
        assert review.text == "Lovely"
        assert review.user_id == "u1"
        assert review.created_at is not None
        assert await _album_state(db_context, album.id) == (4.0, 1, 1)

    @pytest.mark.asyncio
    async def test_sequential_reviews_keep_mean(self, db_context, make_album) -> None:
        album = await make_album()
        ratings = [5, 3, 4, 1, 2.5]

        for rating in ratings:
            await add_review_to_album(db_context, album.id, {"rating": rating, "text": ""})

        avg, count, stored = await _album_state(db_context, album.id)
        assert count == stored == len(ratings)
        assert avg == pytest.approx(sum(ratings) / len(ratings))

    @pytest.mark.asyncio
    async def test_existing_aggregates_extended(self, db_context, make_album) -> None:
        album = await make_album(avg_rating=4.0, num_ratings=2)

        await add_review_to_album(db_context, album.id, {"rating": 1})

        avg, count, _ = await _album_state(db_context, album.id)
        assert count == 3
        assert avg == pytest.approx(3.0)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("rating", [None, "4", True, float("nan")])
    async def test_non_numeric_rating_writes_nothing(self, db_context, make_album, rating) -> None:
        album = await make_album()

        with pytest.raises(ValidationError):
            await add_review_to_album(db_context, album.id, {"rating": rating, "text": "x"})

        assert await _album_state(db_context, album.id) == (0.0, 0, 0)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("album_id", [None, ""])
    async def test_missing_album_id_rejected(self, db_context, album_id) -> None:
        with pytest.raises(ValidationError):
            await add_review_to_album(db_context, album_id, {"rating": 3})

    @pytest.mark.asyncio
    async def test_unknown_album_rejected_and_nothing_written(self, db_context) -> None:
        with pytest.raises(AlbumNotFoundError):
            await add_review_to_album(db_context, uuid.uuid4(), {"rating": 3})

        async with db_context.session() as session:
            count = (await session.execute(select(func.count(RatingModel.id)))).scalar_one()
        assert count == 0

    @pytest.mark.asyncio
    async def test_change_topics_published_after_commit(self, db_context, make_album) -> None:
        album = await make_album()
        listing = db_context.change_feed.listen([ALBUMS_TOPIC])
        single = db_context.change_feed.listen([album_topic(album.id)])
        reviews = db_context.change_feed.listen([album_ratings_topic(album.id)])

        await add_review_to_album(db_context, album.id, {"rating": 5})

        for listener in (listing, single, reviews):
            await asyncio.wait_for(listener.wait(), timeout=1.0)
            listener.close()

    @pytest.mark.asyncio
    async def test_reviews_listed_newest_first(self, db_context, make_album) -> None:
        album = await make_album()
        for text in ("first", "second", "third"):
            await add_review_to_album(db_context, album.id, {"rating": 3, "text": text})

        reviews = await get_reviews_by_album_id(db_context, album.id)

        assert [r.text for r in reviews] == ["third", "second", "first"]


class TestFormSubmission:
    """Tests for handle_review_form_submission()."""

    @pytest.mark.asyncio
    async def test_string_rating_coerced(self, db_context, make_album) -> None:
        album = await make_album()

        review = await handle_review_form_submission(
            db_context,
            {"album_id": str(album.id), "rating": "4", "text": "Good", "user": "u9"},
        )

        assert review.rating == 4.0
        assert await _album_state(db_context, album.id) == (4.0, 1, 1)

    @pytest.mark.asyncio
    async def test_non_numeric_string_rejected(self, db_context, make_album) -> None:
        album = await make_album()

        with pytest.raises(ValidationError):
            await handle_review_form_submission(
                db_context, {"album_id": str(album.id), "rating": "great", "text": ""}
            )

        assert await _album_state(db_context, album.id) == (0.0, 0, 0)


class TestConcurrentSubmissions:
    """Concurrent submissions against a file-backed database."""

    @pytest.mark.asyncio
    async def test_no_lost_updates(self, tmp_path) -> None:
        engine = create_async_engine(
            f"sqlite+aiosqlite:///{tmp_path / 'albums.db'}",
            connect_args={"timeout": 30},
        )
        ctx = DatabaseContext(engine)
        await ctx.create_all()
        try:
            async with ctx.session() as session:
                album = AlbumModel(name="Lowlands", artist="Static Bloom", genre="Indie", release_year=2011)
                session.add(album)
                await session.commit()

            ratings = [1, 2, 3, 4, 5, 5, 4, 3]
            await asyncio.gather(*(
                add_review_to_album(ctx, album.id, {"rating": r, "text": f"r{i}"})
                for i, r in enumerate(ratings)
            ))

            avg, count, stored = await _album_state(ctx, album.id)
            assert count == stored == len(ratings)
            assert avg == pytest.approx(sum(ratings) / len(ratings))
        finally:
            await ctx.dispose()
