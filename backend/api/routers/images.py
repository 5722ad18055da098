"""
Album image API endpoints.

Routes: POST /albums/{album_id}/image - Upload a cover image (multipart)

Dependencies: backend.application.services.image_service
System role: Album cover upload HTTP API
"""

import logging

from fastapi import APIRouter, Depends, File, UploadFile

from backend.api.deps.dependencies import get_image_service
from backend.application.services.image_service import ImageService
from backend.models.album import AlbumImageResponse

from .router_utils.error_handling import handle_storefront_errors

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/albums", tags=["images"])


@router.post("/{album_id}/image", response_model=AlbumImageResponse)
@handle_storefront_errors
async def upload_album_image(
    album_id: str,
    file: UploadFile = File(...),
    image_service: ImageService = Depends(get_image_service),
) -> AlbumImageResponse:
    """
    Upload a cover image and set it as the album photo.

    Raises:
        HTTPException: 404 for an unknown album, 502 if the upload fails
    """
    data = await file.read()
    album = await image_service.update_album_image(
        album_id,
        file.filename or "",
        data,
        file.content_type or "application/octet-stream",
    )
    return AlbumImageResponse(album_id=album.id, photo=album.photo)
