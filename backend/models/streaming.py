"""
Snapshot event schemas for WebSocket subscriptions.

Each server message carries the complete current result set of the
subscribed query, never a diff.

Dependencies: pydantic
System role: Real-time snapshot protocol schemas
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel


class SnapshotEventType(str, Enum):
    """Server-to-client event types for snapshot streams."""

    SNAPSHOT = "snapshot"
    ERROR = "error"


class SnapshotEvent(BaseModel):
    """
    Snapshot stream event.

    Attributes:
        event: Event type identifier
        stream: Stream name (e.g. "albums", "album", "reviews")
        data: Full snapshot payload, or error details
    """

    event: SnapshotEventType
    stream: str
    data: Any

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dictionary."""
        return {"event": self.event.value, "stream": self.stream, "data": self.data}
