"""
Demo data seeding.

Dependencies: backend.boundary.db
System role: Populates an empty store with sample albums and reviews
"""

from backend.core.seed.fake_albums import (
    FakeAlbum,
    add_fake_albums_and_reviews,
    generate_fake_albums_and_reviews,
)

__all__ = [
    "FakeAlbum",
    "generate_fake_albums_and_reviews",
    "add_fake_albums_and_reviews",
]
