"""Service orchestrators."""

from .album_service import AlbumService, get_album_by_id, get_albums
from .image_service import ImageService
from .review_service import (
    ReviewService,
    add_review_to_album,
    get_reviews_by_album_id,
    handle_review_form_submission,
)
from .seed_service import SeedService
from .snapshot_service import SnapshotService
from .summary_service import SummaryService

__all__ = [
    "AlbumService",
    "ImageService",
    "ReviewService",
    "SeedService",
    "SnapshotService",
    "SummaryService",
    "add_review_to_album",
    "get_album_by_id",
    "get_albums",
    "get_reviews_by_album_id",
    "handle_review_form_submission",
]
