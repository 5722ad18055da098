"""
Review summary API endpoint.

Routes: GET /albums/{album_id}/summary

Dependencies: backend.application.services.summary_service
System role: AI review summary HTTP API
"""

from fastapi import APIRouter, Depends

from backend.api.deps.dependencies import get_summary_service
from backend.application.services.summary_service import SummaryService
from backend.models.summary import ReviewSummaryResponse

from .router_utils.error_handling import handle_storefront_errors

router = APIRouter(prefix="/albums", tags=["summary"])


@router.get("/{album_id}/summary", response_model=ReviewSummaryResponse)
@handle_storefront_errors
async def get_review_summary(
    album_id: str,
    summary_service: SummaryService = Depends(get_summary_service),
) -> ReviewSummaryResponse:
    """Summarize an album's reviews; falls back to a fixed message on failure."""
    return await summary_service.get_album_summary(album_id)
