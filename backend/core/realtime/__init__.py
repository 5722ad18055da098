"""
Real-time snapshot subscriptions.

Exports:
  - ChangeFeed, FeedListener: topic-based change bus
  - SnapshotStream, Subscription: full-snapshot observable and its handle
  - topic helpers for albums and their ratings
"""

from backend.core.realtime.change_feed import (
    ALBUMS_TOPIC,
    ChangeFeed,
    FeedListener,
    album_change_topics,
    album_ratings_topic,
    album_topic,
)
from backend.core.realtime.snapshot_stream import SnapshotStream, Subscription

__all__ = [
    "ALBUMS_TOPIC",
    "ChangeFeed",
    "FeedListener",
    "SnapshotStream",
    "Subscription",
    "album_change_topics",
    "album_ratings_topic",
    "album_topic",
]
