"""
Observable snapshot streams.

A SnapshotStream pairs a set of change-feed topics with a loader coroutine
that reads the full current result set. Subscribers receive the whole
snapshot (never a diff) once on subscribe and again after every change.

Dependencies: asyncio, backend.core.realtime.change_feed
System role: Real-time subscription abstraction for albums and reviews
"""

import asyncio
import inspect
import logging
from collections.abc import AsyncIterator, Awaitable, Callable, Iterable
from typing import Any, Generic, TypeVar

from backend.core.realtime.change_feed import ChangeFeed, FeedListener

logger = logging.getLogger(__name__)

T = TypeVar("T")

SnapshotCallback = Callable[[T], Awaitable[None] | None]
ErrorCallback = Callable[[Exception], Awaitable[None] | None]


async def _maybe_await(result: Any) -> None:
    if inspect.isawaitable(result):
        await result


class Subscription:
    """
    Handle returned by SnapshotStream.subscribe().

    Releasing the handle (unsubscribe() or leaving an `async with` block)
    stops delivery; no callback runs afterwards.
    """

    def __init__(self, name: str, listener: FeedListener, task: asyncio.Task) -> None:
        self.name = name
        self._listener = listener
        self._task = task

    @property
    def active(self) -> bool:
        return not self._listener.closed and not self._task.done()

    def unsubscribe(self) -> None:
        """Release the subscription. Idempotent."""
        if self._listener.closed and self._task.done():
            return
        self._listener.close()
        self._task.cancel()
        logger.debug("Subscription released", extra={"stream": self.name})

    async def __aenter__(self) -> "Subscription":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        self.unsubscribe()


class SnapshotStream(Generic[T]):
    """
    Full-snapshot stream over a query.

    Attributes:
        name: Label used in logs
        topics: Change-feed topics that trigger a reload
    """

    def __init__(
        self,
        feed: ChangeFeed,
        topics: Iterable[str],
        loader: Callable[[], Awaitable[T]],
        name: str = "snapshot",
    ) -> None:
        """
        Initialize stream.

        Args:
            feed: Change feed the write paths publish to
            topics: Topics whose changes affect the result set
            loader: Coroutine function returning the current full result set
            name: Label used in logs
        """
        self._feed = feed
        self.topics = tuple(topics)
        self._loader = loader
        self.name = name

    async def subscribe(
        self,
        callback: SnapshotCallback,
        on_error: ErrorCallback | None = None,
    ) -> Subscription:
        """
        Deliver the current snapshot, then every subsequent one.

        The listener is registered before the initial load so a change that
        lands while loading still triggers a reload.

        Args:
            callback: Called with each full snapshot (sync or async)
            on_error: Called when a reload fails; defaults to logging

        Returns:
            Subscription: Handle to release the subscription

        Raises:
            Exception: Errors from the initial load propagate to the caller
        """
        listener = self._feed.listen(self.topics)
        try:
            snapshot = await self._loader()
            await _maybe_await(callback(snapshot))
        except BaseException:
            listener.close()
            raise

        task = asyncio.create_task(self._run(listener, callback, on_error))
        logger.debug("Subscription started", extra={"stream": self.name, "topics": list(self.topics)})
        return Subscription(self.name, listener, task)

    async def _run(
        self,
        listener: FeedListener,
        callback: SnapshotCallback,
        on_error: ErrorCallback | None,
    ) -> None:
        try:
            while not listener.closed:
                await listener.wait()
                if listener.closed:
                    break
                try:
                    snapshot = await self._loader()
                except Exception as e:
                    if on_error is not None:
                        await _maybe_await(on_error(e))
                    else:
                        logger.exception(
                            "Snapshot reload failed",
                            extra={"stream": self.name, "error": str(e)},
                        )
                    continue
                if listener.closed:
                    break
                await _maybe_await(callback(snapshot))
        except asyncio.CancelledError:
            raise
        except Exception as e:
            logger.warning(
                "Snapshot callback failed, ending subscription",
                extra={"stream": self.name, "error": str(e)},
            )
        finally:
            listener.close()

    async def snapshots(self) -> AsyncIterator[T]:
        """
        Iterate over snapshots: the current one, then one per change.

        Closing the iterator releases the underlying listener.
        """
        listener = self._feed.listen(self.topics)
        try:
            yield await self._loader()
            while True:
                await listener.wait()
                yield await self._loader()
        finally:
            listener.close()

    def __aiter__(self) -> AsyncIterator[T]:
        return self.snapshots()
