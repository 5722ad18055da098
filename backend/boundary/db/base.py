"""
SQLAlchemy declarative base and common mixins.

Provides base class for all ORM models and reusable mixins
for common fields (timestamps, UUIDs).

Dependencies: sqlalchemy
System role: Foundation for the album and rating models
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, Uuid
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def utcnow() -> datetime:
    """Return the current UTC time (timezone-aware)."""
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    """
    SQLAlchemy declarative base for ORM model registration.

    All database models inherit from this class to ensure they're
    registered with the metadata and included in table creation.
    """

    pass


class UUIDMixin:
    """
    Mixin providing a server-assigned UUID primary key.

    Uses the portable Uuid type: native UUID on PostgreSQL,
    CHAR(32) on SQLite (development and tests).

    Attributes:
        id: UUID v4 primary key, auto-generated on insert
    """

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
        nullable=False,
    )


class CreatedAtMixin:
    """
    Mixin providing the immutable creation timestamp.

    Ratings only carry this one; they are never updated after insert.

    Attributes:
        created_at: Row creation timestamp (UTC), server-assigned
    """

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        nullable=False,
    )


class TimestampMixin(CreatedAtMixin):
    """
    Mixin adding last-modification tracking on top of created_at.

    updated_at is refreshed on every update via onupdate hook, including
    the aggregate UPDATE issued by review submission.

    Attributes:
        created_at: Row creation timestamp (UTC, immutable)
        updated_at: Last modification timestamp (UTC, auto-updated)
    """

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        onupdate=utcnow,
        nullable=False,
    )
