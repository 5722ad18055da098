"""
Response mapping utilities.

Transforms ORM models into Pydantic response models.

Dependencies: backend.models
System role: Album and review response transformation
"""

from typing import Sequence
from uuid import UUID

from backend.boundary.db.models.album_model import AlbumModel
from backend.boundary.db.models.rating_model import RatingModel
from backend.core.album_filters import AlbumFilters
from backend.models.album import AlbumListResponse, AlbumResponse
from backend.models.review import ReviewListResponse, ReviewResponse


def map_album_to_response(album: AlbumModel) -> AlbumResponse:
    """Transform an AlbumModel into AlbumResponse."""
    return AlbumResponse.model_validate(album)


def map_albums_to_list_response(
    albums: Sequence[AlbumModel],
    filters: AlbumFilters,
) -> AlbumListResponse:
    """
    Transform a listing result into AlbumListResponse, echoing the filters.

    Args:
        albums: Albums in sort order
        filters: Filters that produced the listing

    Returns:
        AlbumListResponse: Albums plus applied filters
    """
    return AlbumListResponse(
        albums=[map_album_to_response(a) for a in albums],
        total=len(albums),
        genre=filters.genre,
        release_year=filters.release_year,
        sort=filters.sort.value,
    )


def map_review_to_response(review: RatingModel) -> ReviewResponse:
    """Transform a RatingModel into ReviewResponse."""
    return ReviewResponse.model_validate(review)


def map_reviews_to_list_response(
    album_id: UUID,
    reviews: Sequence[RatingModel],
) -> ReviewListResponse:
    """Transform an album's reviews into ReviewListResponse."""
    return ReviewListResponse(
        album_id=album_id,
        reviews=[map_review_to_response(r) for r in reviews],
        total=len(reviews),
    )
