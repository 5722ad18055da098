"""
Album API endpoints.

Routes:
- GET /albums - Filtered, sorted album listing
- GET /albums/{album_id} - Single album
- POST /albums/seed - Insert demo albums with reviews

Dependencies: backend.application.services, backend.models
System role: Album catalogue HTTP API
"""

import logging

from fastapi import APIRouter, Depends, Query, status

from backend.api.deps.dependencies import get_album_service, get_seed_service
from backend.application.services.album_service import AlbumService
from backend.application.services.seed_service import SeedService
from backend.core.album_filters import AlbumFilters
from backend.models.album import AlbumListResponse, AlbumResponse, SeedAlbumsResponse

from .router_utils.error_handling import handle_storefront_errors
from .router_utils.responses import map_album_to_response, map_albums_to_list_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/albums", tags=["albums"])


@router.get("", response_model=AlbumListResponse)
@handle_storefront_errors
async def list_albums(
    genre: str | None = Query(default=None, description="Exact genre, empty for all"),
    release_year: str | None = Query(default=None, description="Exact release year, empty for all"),
    sort: str | None = Query(default=None, description="Rating (default), Review or Year"),
    album_service: AlbumService = Depends(get_album_service),
) -> AlbumListResponse:
    """
    List albums filtered by genre and release year, sorted descending.

    Args:
        genre: Genre filter
        release_year: Release year filter
        sort: Sort key
        album_service: Injected AlbumService

    Returns:
        AlbumListResponse: Albums plus the applied filters
    """
    filters = AlbumFilters.from_raw(genre=genre, release_year=release_year, sort=sort)
    albums = await album_service.list_albums(filters)
    return map_albums_to_list_response(albums, filters)


@router.post("/seed", response_model=SeedAlbumsResponse, status_code=status.HTTP_201_CREATED)
@handle_storefront_errors
async def seed_albums(
    count: int = Query(default=5, ge=1, le=50, description="Number of albums to generate"),
    seed_service: SeedService = Depends(get_seed_service),
) -> SeedAlbumsResponse:
    """Insert randomly generated demo albums and reviews."""
    albums = await seed_service.seed_albums(count)
    return SeedAlbumsResponse(
        requested=count,
        written=len(albums),
        albums=[map_album_to_response(a) for a in albums],
    )


@router.get("/{album_id}", response_model=AlbumResponse)
@handle_storefront_errors
async def get_album(
    album_id: str,
    album_service: AlbumService = Depends(get_album_service),
) -> AlbumResponse:
    """
    Get single album by ID.

    Raises:
        HTTPException: 404 if the album does not exist
    """
    album = await album_service.get_album(album_id)
    return map_album_to_response(album)
