"""
Album ORM model.

Represents an album in the storefront catalogue, including the derived
rating aggregates maintained by review submission.

Dependencies: sqlalchemy, backend.boundary.db.base
System role: Album persistence (the `albums` collection)
"""

from sqlalchemy import Float, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from backend.boundary.db.base import Base, TimestampMixin, UUIDMixin


class AlbumModel(Base, UUIDMixin, TimestampMixin):
    """
    Album ORM model.

    avg_rating and num_ratings are derived aggregates. They are written only
    by the review-submission transaction (incremental mean update) and by the
    demo-data seeder, which computes them from the reviews it inserts.

    Attributes:
        id: UUID primary key (auto-generated)
        name: Album title
        artist: Performing artist
        genre: Genre label (e.g. "Jazz")
        release_year: Year of release
        avg_rating: Mean of all review ratings (0.0 with no reviews)
        num_ratings: Number of reviews stored under the album
        photo: Public URL of the cover image
        created_at: Creation timestamp (UTC)
        updated_at: Last modification timestamp (UTC)

    Relationships:
        ratings: One-to-many with RatingModel (CASCADE on album deletion)
    """

    __tablename__ = "albums"

    name: Mapped[str] = mapped_column(String(255), nullable=False, doc="Album title")

    artist: Mapped[str] = mapped_column(String(255), nullable=False, doc="Artist name")

    genre: Mapped[str] = mapped_column(
        String(64),
        nullable=False,
        index=True,
        doc="Genre label used by the listing filter",
    )

    release_year: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        index=True,
        doc="Release year used by the listing filter and Year sort",
    )

    avg_rating: Mapped[float] = mapped_column(
        Float,
        nullable=False,
        default=0.0,
        doc="Derived: arithmetic mean of review ratings",
    )

    num_ratings: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
        doc="Derived: number of review rows under this album",
    )

    photo: Mapped[str | None] = mapped_column(
        String(2048),
        nullable=True,
        default=None,
        doc="Public URL of the cover image",
    )

    ratings = relationship(
        "RatingModel",
        back_populates="album",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
