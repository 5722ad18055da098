"""Integration tests for album and rating CRUD against SQLite."""

import uuid

import pytest

from backend.boundary.db.CRUD.album_crud import album_crud
from backend.boundary.db.CRUD.rating_crud import rating_crud
from backend.core.album_filters import AlbumFilters, SortKey


@pytest.fixture
async def catalogue(make_album):
    """Four albums with distinct ratings, review counts and years."""
    return {
        "a": await make_album(name="A", genre="Rock", release_year=1975, avg_rating=4.5, num_ratings=2),
        "b": await make_album(name="B", genre="Rock", release_year=1990, avg_rating=3.0, num_ratings=9),
        "c": await make_album(name="C", genre="Jazz", release_year=1975, avg_rating=5.0, num_ratings=1),
        "d": await make_album(name="D", genre="Pop", release_year=2020, avg_rating=1.0, num_ratings=4),
    }


class TestListFiltered:
    """Tests for AlbumCRUD.list_filtered()."""

    @pytest.mark.asyncio
    async def test_default_sort_by_rating(self, db_session, catalogue) -> None:
        albums = await album_crud.list_filtered(db_session, AlbumFilters())
        assert [a.name for a in albums] == ["C", "A", "B", "D"]

    @pytest.mark.asyncio
    async def test_sort_by_review_count(self, db_session, catalogue) -> None:
        albums = await album_crud.list_filtered(db_session, AlbumFilters(sort=SortKey.REVIEW))
        assert [a.name for a in albums] == ["B", "D", "A", "C"]

    @pytest.mark.asyncio
    async def test_sort_by_year(self, db_session, catalogue) -> None:
        albums = await album_crud.list_filtered(db_session, AlbumFilters(sort=SortKey.YEAR))
        assert [a.name for a in albums][:2] == ["D", "B"]

    @pytest.mark.asyncio
    async def test_genre_filter(self, db_session, catalogue) -> None:
        albums = await album_crud.list_filtered(db_session, AlbumFilters(genre="Rock"))
        assert [a.name for a in albums] == ["A", "B"]

    @pytest.mark.asyncio
    async def test_genre_and_year_filter(self, db_session, catalogue) -> None:
        filters = AlbumFilters.from_raw(genre="Rock", release_year="1975")
        albums = await album_crud.list_filtered(db_session, filters)
        assert [a.name for a in albums] == ["A"]

    @pytest.mark.asyncio
    async def test_no_match(self, db_session, catalogue) -> None:
        albums = await album_crud.list_filtered(db_session, AlbumFilters(genre="Metal"))
        assert albums == []


class TestAlbumUpdates:
    """Tests for photo updates and lookups."""

    @pytest.mark.asyncio
    async def test_set_photo(self, db_session, make_album) -> None:
        album = await make_album()

        updated = await album_crud.set_photo(db_session, album.id, "https://cdn/x.png")
        await db_session.commit()

        assert updated is not None
        assert updated.photo == "https://cdn/x.png"

    @pytest.mark.asyncio
    async def test_set_photo_missing_album(self, db_session) -> None:
        assert await album_crud.set_photo(db_session, uuid.uuid4(), "https://cdn/x.png") is None

    @pytest.mark.asyncio
    async def test_exists(self, db_session, make_album) -> None:
        album = await make_album()
        assert await album_crud.exists(db_session, album.id)
        assert not await album_crud.exists(db_session, uuid.uuid4())


class TestRatingCRUD:
    """Tests for RatingCRUD aggregate maintenance."""

    @pytest.mark.asyncio
    async def test_add_rating_updates_parent(self, db_session, make_album) -> None:
        album = await make_album()

        rating = await rating_crud.add_rating(db_session, album.id, 3.0, text="ok")
        await db_session.commit()

        assert rating is not None
        refreshed = await album_crud.get_by_id(db_session, album.id)
        assert refreshed.num_ratings == 1
        assert refreshed.avg_rating == pytest.approx(3.0)

    @pytest.mark.asyncio
    async def test_add_rating_missing_parent_returns_none(self, db_session) -> None:
        assert await rating_crud.add_rating(db_session, uuid.uuid4(), 3.0, text="") is None
