"""
CRUD operations for database models.

Exports base CRUD classes and model-specific CRUD implementations
with pre-instantiated singletons for direct use.

Usage:
    from backend.boundary.db.CRUD import album_crud, rating_crud

    album = await album_crud.get_by_id(db, album_id)
    rating = await rating_crud.add_rating(db, album_id, 4.0, "Great record")
"""

from backend.boundary.db.CRUD.base_crud import BaseCRUD
from backend.boundary.db.CRUD.aggregate_crud import AggregateCRUD
from backend.boundary.db.CRUD.album_crud import AlbumCRUD, album_crud
from backend.boundary.db.CRUD.rating_crud import RatingCRUD, rating_crud

__all__ = [
    "BaseCRUD",
    "AggregateCRUD",
    "AlbumCRUD",
    "album_crud",
    "RatingCRUD",
    "rating_crud",
]
