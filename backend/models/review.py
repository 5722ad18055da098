"""
Review domain models and schemas.

Request/response schemas for review submission and listing.

Dependencies: pydantic
System role: Review API contracts
"""

import uuid
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class CreateReviewRequest(BaseModel):
    """
    Request schema for submitting a review.

    `rating` is left untyped so a non-numeric value reaches the review
    service and is reported as a 400 validation error.
    """

    rating: Any = Field(default=None, description="Numeric star rating (0-5)")
    text: str = Field(default="", max_length=4096, description="Review comment")
    user: str | None = Field(default=None, max_length=255, description="Submitting user")


class ReviewResponse(BaseModel):
    """Response schema for a stored review."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    album_id: uuid.UUID
    rating: float
    text: str
    user_id: str | None = None
    created_at: datetime


class ReviewListResponse(BaseModel):
    """Response schema for an album's reviews, newest first."""

    album_id: uuid.UUID
    reviews: list[ReviewResponse]
    total: int
