"""
In-process change feed for snapshot subscriptions.

Write paths publish topic names after they commit; listeners registered on
those topics are woken up. Several publishes before a listener wakes
coalesce into one wake-up, so subscribers reload once per burst.

Dependencies: asyncio
System role: Change notification bus behind real-time snapshots
"""

import asyncio
import logging
from collections import defaultdict
from collections.abc import Iterable
from uuid import UUID

logger = logging.getLogger(__name__)

ALBUMS_TOPIC = "albums"


def album_topic(album_id: UUID | str) -> str:
    """Topic for changes to a single album document."""
    return f"albums/{album_id}"


def album_ratings_topic(album_id: UUID | str) -> str:
    """Topic for changes to an album's nested ratings."""
    return f"albums/{album_id}/ratings"


def album_change_topics(album_id: UUID | str, ratings: bool = False) -> tuple[str, ...]:
    """
    Topics touched by a write to one album.

    Any album write can move it within (or into/out of) a filtered listing,
    so the listing topic is always included.

    Args:
        album_id: Album that was written
        ratings: Whether a rating was added under the album

    Returns:
        tuple[str, ...]: Topics to publish
    """
    topics = [ALBUMS_TOPIC, album_topic(album_id)]
    if ratings:
        topics.append(album_ratings_topic(album_id))
    return tuple(topics)


class FeedListener:
    """Wake-up handle registered on one or more topics."""

    def __init__(self, feed: "ChangeFeed", topics: tuple[str, ...]) -> None:
        self._feed = feed
        self.topics = topics
        self._event = asyncio.Event()
        self.closed = False

    def notify(self) -> None:
        self._event.set()

    async def wait(self) -> None:
        """Block until any topic changes, then reset the signal."""
        await self._event.wait()
        self._event.clear()

    def close(self) -> None:
        """Stop receiving notifications. Idempotent."""
        if not self.closed:
            self.closed = True
            self._feed._remove(self)


class ChangeFeed:
    """
    Topic-based change bus.

    Single event loop only: publish() is called from coroutines after a
    commit and listeners are awaited on the same loop.
    """

    def __init__(self) -> None:
        self._listeners: dict[str, set[FeedListener]] = defaultdict(set)

    def listen(self, topics: Iterable[str]) -> FeedListener:
        """
        Register a listener on the given topics.

        Args:
            topics: Topic names to watch

        Returns:
            FeedListener: Handle to wait on; close() it when done
        """
        listener = FeedListener(self, tuple(topics))
        for topic in listener.topics:
            self._listeners[topic].add(listener)
        return listener

    def publish(self, *topics: str) -> None:
        """Signal that the given topics changed."""
        woken = 0
        for topic in topics:
            for listener in tuple(self._listeners.get(topic, ())):
                listener.notify()
                woken += 1
        if woken:
            logger.debug(
                "Change published",
                extra={"topics": list(topics), "listeners": woken},
            )

    def listener_count(self, topic: str) -> int:
        """Number of live listeners on a topic."""
        return len(self._listeners.get(topic, ()))

    def _remove(self, listener: FeedListener) -> None:
        for topic in listener.topics:
            listeners = self._listeners.get(topic)
            if listeners is None:
                continue
            listeners.discard(listener)
            if not listeners:
                del self._listeners[topic]
