"""
Seed the album store with demo data.

Generates random albums with 0-5 reviews each and writes them to the
configured database, creating tables first if needed.

Run: python -m backend.scripts.seed_albums [count]

Dependencies: backend.boundary.db, backend.core.seed
"""

import asyncio
import logging
import sys

from backend.boundary.db.connection import DatabaseContext
from backend.configs import get_settings
from backend.core.seed.fake_albums import DEFAULT_ALBUM_COUNT, add_fake_albums_and_reviews
from backend.observability.logger import configure_logging

logger = logging.getLogger(__name__)


async def seed(count: int) -> int:
    """
    Create tables and insert demo albums.

    Args:
        count: Number of albums to generate

    Returns:
        int: Number of albums written
    """
    settings = get_settings()
    ctx = DatabaseContext.from_settings(settings.database)
    try:
        await ctx.create_all()
        albums = await add_fake_albums_and_reviews(ctx, count=count)
        for album in albums:
            logger.info(
                f"Seeded {album.name} by {album.artist} "
                f"({album.num_ratings} reviews, avg {album.avg_rating:.2f})"
            )
        return len(albums)
    finally:
        await ctx.dispose()


def main() -> None:
    """Parse the optional album count and run the seeder."""
    configure_logging(get_settings().log_level)

    count = DEFAULT_ALBUM_COUNT
    if len(sys.argv) > 1:
        try:
            count = int(sys.argv[1])
        except ValueError:
            logger.error(f"Album count must be an integer, got {sys.argv[1]!r}")
            sys.exit(1)

    try:
        written = asyncio.run(seed(count))
    except Exception as e:
        logger.error(f"Error: {e}")
        sys.exit(1)

    logger.info(f"Seeding complete: {written}/{count} albums written")
    sys.exit(0 if written == count else 1)


if __name__ == "__main__":
    main()
