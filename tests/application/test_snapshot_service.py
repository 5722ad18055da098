"""Tests for SnapshotService streams over the database."""

import asyncio

import pytest

from backend.application.services.image_service import ImageService
from backend.application.services.review_service import add_review_to_album
from backend.application.services.snapshot_service import SnapshotService
from backend.boundary.aws.s3_client import S3ImageClient
from backend.core.album_filters import AlbumFilters
from backend.core.exceptions import ValidationError


async def _next(queue: asyncio.Queue):
    return await asyncio.wait_for(queue.get(), timeout=2.0)


class TestAlbumSnapshot:
    """Tests for album_snapshot()."""

    @pytest.mark.asyncio
    async def test_missing_album_delivers_none(self, db_context, album_id) -> None:
        received: list = []
        subscription = await SnapshotService(db_context).album_snapshot(album_id).subscribe(received.append)

        assert received == [None]
        subscription.unsubscribe()

    @pytest.mark.asyncio
    async def test_review_updates_album_snapshot(self, db_context, make_album) -> None:
        album = await make_album()
        queue: asyncio.Queue = asyncio.Queue()
        subscription = await SnapshotService(db_context).album_snapshot(album.id).subscribe(queue.put_nowait)

        initial = await _next(queue)
        assert initial.num_ratings == 0

        await add_review_to_album(db_context, album.id, {"rating": 4})

        updated = await _next(queue)
        assert updated.num_ratings == 1
        assert updated.avg_rating == pytest.approx(4.0)
        subscription.unsubscribe()

    @pytest.mark.asyncio
    async def test_photo_change_updates_album_snapshot(self, db_context, make_album, mock_s3_client) -> None:
        album = await make_album()
        queue: asyncio.Queue = asyncio.Queue()
        subscription = await SnapshotService(db_context).album_snapshot(album.id).subscribe(queue.put_nowait)
        await _next(queue)

        storage = S3ImageClient(bucket="covers", s3_client=mock_s3_client)
        async with db_context.session() as session:
            await ImageService(session, storage, db_context.change_feed).update_album_image(
                album.id, "c.png", b"x", "image/png"
            )

        updated = await _next(queue)
        assert updated.photo.endswith(f"albums/{album.id}/c.png")
        subscription.unsubscribe()

    def test_missing_album_id_rejected(self, db_context) -> None:
        with pytest.raises(ValidationError):
            SnapshotService(db_context).album_snapshot("")


class TestReviewsSnapshot:
    """Tests for reviews_snapshot()."""

    @pytest.mark.asyncio
    async def test_full_list_newest_first_after_each_review(self, db_context, make_album) -> None:
        album = await make_album()
        queue: asyncio.Queue = asyncio.Queue()
        subscription = await SnapshotService(db_context).reviews_snapshot(album.id).subscribe(queue.put_nowait)
        assert await _next(queue) == []

        await add_review_to_album(db_context, album.id, {"rating": 2, "text": "one"})
        assert [r.text for r in await _next(queue)] == ["one"]

        await add_review_to_album(db_context, album.id, {"rating": 5, "text": "two"})
        assert [r.text for r in await _next(queue)] == ["two", "one"]
        subscription.unsubscribe()

    @pytest.mark.asyncio
    async def test_other_album_changes_not_delivered(self, db_context, make_album) -> None:
        watched = await make_album(name="Watched")
        other = await make_album(name="Other")
        received: list = []
        subscription = await SnapshotService(db_context).reviews_snapshot(watched.id).subscribe(received.append)

        await add_review_to_album(db_context, other.id, {"rating": 3})
        await asyncio.sleep(0.05)

        assert received == [[]]
        subscription.unsubscribe()


class TestAlbumsSnapshot:
    """Tests for albums_snapshot()."""

    @pytest.mark.asyncio
    async def test_listing_reorders_after_review(self, db_context, make_album) -> None:
        low = await make_album(name="Low", avg_rating=2.0, num_ratings=1)
        await make_album(name="High", avg_rating=3.0, num_ratings=1)
        queue: asyncio.Queue = asyncio.Queue()
        subscription = await SnapshotService(db_context).albums_snapshot(AlbumFilters()).subscribe(queue.put_nowait)
        assert [a.name for a in await _next(queue)] == ["High", "Low"]

        await add_review_to_album(db_context, low.id, {"rating": 5})
        await add_review_to_album(db_context, low.id, {"rating": 5})

        snapshot = await _next(queue)
        while snapshot[0].name != "Low":
            snapshot = await _next(queue)
        assert [a.name for a in snapshot] == ["Low", "High"]
        subscription.unsubscribe()

    @pytest.mark.asyncio
    async def test_filtered_listing(self, db_context, make_album) -> None:
        await make_album(name="Rock1", genre="Rock")
        await make_album(name="Jazz1", genre="Jazz")
        received: list = []

        subscription = await SnapshotService(db_context).albums_snapshot(
            AlbumFilters(genre="Jazz")
        ).subscribe(received.append)

        assert [a.name for a in received[0]] == ["Jazz1"]
        subscription.unsubscribe()
