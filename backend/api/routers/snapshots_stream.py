"""
WebSocket snapshot endpoints.

Each socket is one subscription: the server pushes the full current result
set on connect and again after every change. Closing the socket releases
the subscription.

Routes:
- WS /ws/albums?genre=&release_year=&sort= - Filtered album listing
- WS /ws/albums/{album_id} - Single album (null while missing)
- WS /ws/albums/{album_id}/reviews - Album reviews, newest first

Dependencies: backend.application.services.snapshot_service
System role: Real-time snapshot WebSocket API
"""

import json
import logging
from typing import Any, Callable

from fastapi import APIRouter, Depends, WebSocket, WebSocketDisconnect
from fastapi.encoders import jsonable_encoder

from backend.api.deps.dependencies import get_snapshot_service
from backend.application.services.snapshot_service import SnapshotService
from backend.core.album_filters import AlbumFilters
from backend.core.exceptions import StorefrontException
from backend.core.realtime.snapshot_stream import SnapshotStream
from backend.models.streaming import SnapshotEvent, SnapshotEventType
from backend.observability.correlation import CORRELATION_HEADER, set_correlation_id
from backend.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)
router = APIRouter(tags=["streaming"])

# Policy violation close code for bad subscription parameters
WS_POLICY_VIOLATION = 1008


def _event(event: SnapshotEventType, stream: str, data: Any) -> dict[str, Any]:
    return SnapshotEvent(event=event, stream=stream, data=jsonable_encoder(data)).to_dict()


async def _serve_stream(
    websocket: WebSocket,
    stream_name: str,
    stream_factory: Callable[[], SnapshotStream],
) -> None:
    """
    Pump snapshots from a stream into an accepted WebSocket until it closes.

    Client may send {"event": "ping"}; the server answers {"event": "pong"}.
    Any other client message is ignored.
    """
    set_correlation_id(websocket.headers.get(CORRELATION_HEADER))
    await websocket.accept()

    try:
        stream = stream_factory()
    except StorefrontException as e:
        await websocket.send_json(
            _event(SnapshotEventType.ERROR, stream_name, {"message": e.message})
        )
        await websocket.close(code=WS_POLICY_VIOLATION)
        return

    async def deliver(snapshot: Any) -> None:
        await websocket.send_json(_event(SnapshotEventType.SNAPSHOT, stream_name, snapshot))

    async def report(exc: Exception) -> None:
        log_exception_with_context(logger, "Snapshot reload failed", exc, stream=stream.name)
        await websocket.send_json(
            _event(SnapshotEventType.ERROR, stream_name, {"message": "Snapshot reload failed"})
        )

    try:
        subscription = await stream.subscribe(deliver, on_error=report)
    except WebSocketDisconnect:
        return
    except Exception as e:
        log_exception_with_context(logger, "Initial snapshot failed", e, stream=stream.name)
        await websocket.send_json(
            _event(SnapshotEventType.ERROR, stream_name, {"message": "Unable to load snapshot"})
        )
        await websocket.close()
        return

    logger.info("Snapshot subscription opened", extra={"stream": stream.name})
    try:
        while True:
            raw_data = await websocket.receive_text()
            try:
                data = json.loads(raw_data)
            except json.JSONDecodeError:
                continue
            if isinstance(data, dict) and data.get("event") == "ping":
                await websocket.send_json({"event": "pong"})
    except WebSocketDisconnect:
        pass
    finally:
        subscription.unsubscribe()
        logger.info("Snapshot subscription closed", extra={"stream": stream.name})


@router.websocket("/ws/albums")
async def albums_stream(
    websocket: WebSocket,
    genre: str | None = None,
    release_year: str | None = None,
    sort: str | None = None,
    snapshot_service: SnapshotService = Depends(get_snapshot_service),
) -> None:
    """Stream the filtered album listing."""
    await _serve_stream(
        websocket,
        "albums",
        lambda: snapshot_service.albums_snapshot(
            AlbumFilters.from_raw(genre=genre, release_year=release_year, sort=sort)
        ),
    )


@router.websocket("/ws/albums/{album_id}")
async def album_stream(
    websocket: WebSocket,
    album_id: str,
    snapshot_service: SnapshotService = Depends(get_snapshot_service),
) -> None:
    """Stream a single album record."""
    await _serve_stream(
        websocket,
        "album",
        lambda: snapshot_service.album_snapshot(album_id),
    )


@router.websocket("/ws/albums/{album_id}/reviews")
async def reviews_stream(
    websocket: WebSocket,
    album_id: str,
    snapshot_service: SnapshotService = Depends(get_snapshot_service),
) -> None:
    """Stream an album's reviews, newest first."""
    await _serve_stream(
        websocket,
        "reviews",
        lambda: snapshot_service.reviews_snapshot(album_id),
    )
