"""
Album image service orchestrator.

Uploads a cover image to the images bucket and points the album's photo
reference at its public URL.

Dependencies: fastapi.concurrency, backend.boundary.aws, backend.boundary.db.CRUD
System role: Album cover upload use case
"""

import io
import logging
from pathlib import PurePosixPath
from typing import BinaryIO

from fastapi.concurrency import run_in_threadpool
from sqlalchemy.ext.asyncio import AsyncSession

from backend.boundary.aws.s3_client import S3ImageClient, album_image_key
from backend.boundary.db.CRUD.album_crud import album_crud
from backend.boundary.db.models.album_model import AlbumModel
from backend.core.exceptions import AlbumNotFoundError, StorageError, ValidationError
from backend.core.identifiers import coerce_album_id
from backend.core.realtime.change_feed import ChangeFeed, album_change_topics

logger = logging.getLogger(__name__)


class ImageService:
    """Album image service orchestrator."""

    def __init__(
        self,
        db: AsyncSession,
        storage: S3ImageClient,
        change_feed: ChangeFeed,
    ) -> None:
        """
        Initialize image service.

        Args:
            db: Async SQLAlchemy session
            storage: Images bucket client
            change_feed: Feed notified after the photo reference changes
        """
        self.db = db
        self.storage = storage
        self.change_feed = change_feed

    async def update_album_image(
        self,
        album_id,
        file_name: str,
        data: bytes | BinaryIO,
        content_type: str = "application/octet-stream",
    ) -> AlbumModel:
        """
        Upload an album cover and store its public URL on the album.

        The photo reference is only written after the upload succeeds.

        Args:
            album_id: Album UUID or its string form
            file_name: Original file name (directory parts are dropped)
            data: Image bytes or readable binary file object
            content_type: MIME type stored with the object

        Returns:
            AlbumModel: Album with its updated photo URL

        Raises:
            ValidationError: If album_id or file_name is missing
            AlbumNotFoundError: If the album does not exist (nothing is uploaded)
            StorageError: If the upload fails (photo left unchanged)
        """
        album_uuid = coerce_album_id(album_id)
        name = PurePosixPath((file_name or "").replace("\\", "/")).name.strip()
        if not name or name in (".", ".."):
            raise ValidationError("Image file name is required", field="file_name")

        if not await album_crud.exists(self.db, album_uuid):
            raise AlbumNotFoundError(str(album_uuid))

        s3_key = album_image_key(str(album_uuid), name)
        fileobj = io.BytesIO(data) if isinstance(data, (bytes, bytearray)) else data

        try:
            photo_url = await run_in_threadpool(
                self.storage.upload_image,
                s3_key,
                fileobj,
                content_type,
            )
        except Exception as e:
            logger.error(
                "Album image upload failed",
                extra={"album_id": str(album_uuid), "s3_key": s3_key, "error": str(e)},
            )
            raise StorageError(
                "Failed to upload album image",
                operation="upload",
                key=s3_key,
                details={"error": str(e)},
            ) from e

        try:
            album = await album_crud.set_photo(self.db, album_uuid, photo_url)
            if album is None:
                await self.db.rollback()
                raise AlbumNotFoundError(str(album_uuid))
            await self.db.commit()
        except AlbumNotFoundError:
            raise
        except Exception as e:
            await self.db.rollback()
            logger.error(
                "Failed to store album photo reference",
                extra={"album_id": str(album_uuid), "error": str(e)},
            )
            raise

        self.change_feed.publish(*album_change_topics(album_uuid))
        logger.info(
            "Album image updated",
            extra={"album_id": str(album_uuid), "photo": photo_url},
        )
        return album
