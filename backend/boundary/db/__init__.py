"""
Database boundary layer: ORM models and connection management.

Exports:
  - Base, UUIDMixin, CreatedAtMixin, TimestampMixin: Model building blocks
  - DatabaseContext, get_async_engine: Connection management
  - AlbumModel, RatingModel: Core domain entities

CRUD singletons live in backend.boundary.db.CRUD.

Dependencies: sqlalchemy, backend.configs
System role: Database adapter providing persistent storage for albums
and their nested ratings.
"""

from backend.boundary.db.base import Base, CreatedAtMixin, TimestampMixin, UUIDMixin
from backend.boundary.db.connection import DatabaseContext, get_async_engine
from backend.boundary.db.models.album_model import AlbumModel
from backend.boundary.db.models.rating_model import RatingModel

__all__ = [
    # Base classes
    "Base",
    "CreatedAtMixin",
    "TimestampMixin",
    "UUIDMixin",
    # Connection
    "DatabaseContext",
    "get_async_engine",
    # Models
    "AlbumModel",
    "RatingModel",
]
