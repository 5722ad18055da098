"""
Album domain models and schemas.

Request/response schemas for album operations.

Dependencies: pydantic
System role: Album API contracts
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class AlbumResponse(BaseModel):
    """Response schema for an album record."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    name: str
    artist: str
    genre: str
    release_year: int
    avg_rating: float
    num_ratings: int
    photo: str | None = None
    created_at: datetime
    updated_at: datetime


class AlbumListResponse(BaseModel):
    """Response schema for the filtered album listing."""

    albums: list[AlbumResponse]
    total: int
    genre: str | None = Field(default=None, description="Applied genre filter")
    release_year: int | None = Field(default=None, description="Applied year filter")
    sort: str = Field(description="Applied sort key")


class SeedAlbumsResponse(BaseModel):
    """Response schema for demo-data seeding."""

    requested: int
    written: int
    albums: list[AlbumResponse]


class AlbumImageResponse(BaseModel):
    """Response schema for a cover image upload."""

    album_id: uuid.UUID
    photo: str
