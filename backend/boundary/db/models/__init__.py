"""
Database models package.

Exports:
  - AlbumModel: Album ORM model with rating aggregates
  - RatingModel: Review ORM model nested under an album

Dependencies: sqlalchemy, backend.boundary.db.base
System role: Database model definitions for domain entities
"""

from backend.boundary.db.models.album_model import AlbumModel
from backend.boundary.db.models.rating_model import RatingModel

__all__ = [
    "AlbumModel",
    "RatingModel",
]
