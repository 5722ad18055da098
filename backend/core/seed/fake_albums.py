"""
Demo album and review generator.

Builds random albums with 0-5 reviews each and writes them to the
database. Album aggregates are computed from the generated reviews, so
seeded rows satisfy the same avg_rating/num_ratings invariant as albums
populated through review submission.

Dependencies: backend.boundary.db, backend.core.aggregation
System role: Development and demo data population
"""

import logging
import random
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Any

from backend.boundary.db.base import utcnow
from backend.boundary.db.connection import DatabaseContext
from backend.boundary.db.models.album_model import AlbumModel
from backend.boundary.db.models.rating_model import RatingModel
from backend.core.aggregation import aggregate_ratings
from backend.core.album_filters import MAX_RELEASE_YEAR, MIN_RELEASE_YEAR
from backend.core.realtime.change_feed import album_change_topics
from backend.core.seed.album_data import (
    ALBUM_NAMES,
    ALBUM_REVIEWS,
    ARTISTS,
    GENRES,
    PLACEHOLDER_PHOTO_URL,
)

logger = logging.getLogger(__name__)

DEFAULT_ALBUM_COUNT = 5
MAX_REVIEWS_PER_ALBUM = 5
# Album timestamps fall within this window before "now"
_ALBUM_AGE_DAYS = 365


@dataclass
class FakeAlbum:
    """One generated album with its reviews."""

    album: dict[str, Any]
    ratings: list[dict[str, Any]] = field(default_factory=list)


def _random_date_before(rng: random.Random, now: datetime) -> datetime:
    return now - timedelta(seconds=rng.randint(1, _ALBUM_AGE_DAYS * 86400))


def _random_date_after(rng: random.Random, start: datetime, now: datetime) -> datetime:
    span = max(int((now - start).total_seconds()), 1)
    return start + timedelta(seconds=rng.randint(1, span))


def generate_fake_albums_and_reviews(
    count: int = DEFAULT_ALBUM_COUNT,
    rng: random.Random | None = None,
) -> list[FakeAlbum]:
    """
    Generate random albums with reviews.

    Args:
        count: Number of albums to generate
        rng: Random source (seeded in tests)

    Returns:
        list[FakeAlbum]: Albums with aggregate fields matching their reviews
    """
    rng = rng or random.Random()
    now = utcnow()
    data: list[FakeAlbum] = []

    for _ in range(count):
        album_created = _random_date_before(rng, now)

        ratings = []
        for _ in range(rng.randint(0, MAX_REVIEWS_PER_ALBUM)):
            ratings.append({
                "rating": float(rng.choice(ALBUM_REVIEWS)[0]),
                "text": rng.choice(ALBUM_REVIEWS)[1],
                "user_id": f"User #{rng.randint(1, 10000)}",
                "created_at": _random_date_after(rng, album_created, now),
            })

        avg_rating, num_ratings = aggregate_ratings(r["rating"] for r in ratings)

        album = {
            "name": rng.choice(ALBUM_NAMES),
            "artist": rng.choice(ARTISTS),
            "genre": rng.choice(GENRES),
            "release_year": rng.randint(MIN_RELEASE_YEAR, MAX_RELEASE_YEAR),
            "avg_rating": avg_rating,
            "num_ratings": num_ratings,
            "photo": PLACEHOLDER_PHOTO_URL.format(seed=rng.randint(1, 1000)),
            "created_at": album_created,
        }
        data.append(FakeAlbum(album=album, ratings=ratings))

    return data


async def add_fake_albums_and_reviews(
    ctx: DatabaseContext,
    data: list[FakeAlbum] | None = None,
    count: int = DEFAULT_ALBUM_COUNT,
) -> list[AlbumModel]:
    """
    Persist generated albums, one transaction per album.

    A failure on one album is logged and the remaining albums are still
    written.

    Args:
        ctx: Database context
        data: Pre-generated albums (generated with `count` when None)
        count: Number of albums to generate when data is None

    Returns:
        list[AlbumModel]: Albums that were written
    """
    if data is None:
        data = generate_fake_albums_and_reviews(count)

    written: list[AlbumModel] = []
    for item in data:
        try:
            async with ctx.session() as session:
                async with session.begin():
                    album = AlbumModel(**item.album)
                    session.add(album)
                    await session.flush()
                    for rating in item.ratings:
                        session.add(RatingModel(album_id=album.id, **rating))
            written.append(album)
        except Exception as e:
            logger.error(
                "Error adding album",
                extra={"album_name": item.album.get("name"), "error": str(e)},
            )

    for album in written:
        ctx.change_feed.publish(*album_change_topics(album.id, ratings=True))

    logger.info(
        "Seeded demo albums",
        extra={"requested": len(data), "written": len(written)},
    )
    return written
