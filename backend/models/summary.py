"""
Review summary schemas.

Dependencies: pydantic
System role: Summary API contract
"""

import uuid

from pydantic import BaseModel, Field


class ReviewSummaryResponse(BaseModel):
    """Response schema for an album's review summary."""

    album_id: uuid.UUID
    summary: str
    review_count: int
    generated: bool = Field(description="True when the text came from the model")
