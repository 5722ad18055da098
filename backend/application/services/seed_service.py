"""
Demo data service.

Dependencies: backend.core.seed
System role: Seeding use case behind the API and the seed script
"""

import logging

from backend.boundary.db.connection import DatabaseContext
from backend.boundary.db.models.album_model import AlbumModel
from backend.core.seed.fake_albums import (
    add_fake_albums_and_reviews,
    generate_fake_albums_and_reviews,
)

logger = logging.getLogger(__name__)


class SeedService:
    """Writes generated demo albums, one transaction per album."""

    def __init__(self, ctx: DatabaseContext) -> None:
        self.ctx = ctx

    async def seed_albums(self, count: int = 5) -> list[AlbumModel]:
        """
        Generate and persist demo albums with reviews.

        Args:
            count: Number of albums to generate

        Returns:
            list[AlbumModel]: Albums that were written (failures are skipped)
        """
        data = generate_fake_albums_and_reviews(count)
        return await add_fake_albums_and_reviews(self.ctx, data)
