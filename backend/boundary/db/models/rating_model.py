"""
Rating ORM model.

A single star-rating review nested under an album.

Dependencies: sqlalchemy, backend.boundary.db.base
System role: Review persistence (the per-album `ratings` collection)
"""

import uuid

from sqlalchemy import Float, ForeignKey, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from backend.boundary.db.base import Base, CreatedAtMixin, UUIDMixin


class RatingModel(Base, UUIDMixin, CreatedAtMixin):
    """
    Rating ORM model.

    Immutable after creation: there is no update or delete path.

    Attributes:
        id: UUID primary key (auto-generated)
        album_id: Parent album (ON DELETE CASCADE)
        rating: Numeric rating, conceptually 0-5
        text: Free-text comment
        user_id: Identifier of the submitting user
        created_at: Server-assigned submission timestamp (UTC)
    """

    __tablename__ = "ratings"

    album_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("albums.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        doc="Album this review belongs to",
    )

    rating: Mapped[float] = mapped_column(Float, nullable=False, doc="Star rating")

    text: Mapped[str] = mapped_column(
        String(4096),
        nullable=False,
        default="",
        doc="Review comment",
    )

    user_id: Mapped[str | None] = mapped_column(
        String(255),
        nullable=True,
        default=None,
        doc="Submitting user identifier",
    )

    album = relationship("AlbumModel", back_populates="ratings")
