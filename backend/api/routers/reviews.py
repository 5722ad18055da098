"""
Review API endpoints.

Routes:
- GET /albums/{album_id}/reviews - Album reviews, newest first
- POST /albums/{album_id}/reviews - Submit a review (JSON)
- POST /actions/review - Submit a review (HTML form post)

Dependencies: backend.application.services.review_service, backend.models.review
System role: Review submission HTTP API
"""

import logging

from fastapi import APIRouter, Depends, Form, status

from backend.api.deps.dependencies import get_review_service
from backend.application.services.review_service import ReviewService
from backend.core.identifiers import coerce_album_id
from backend.models.review import CreateReviewRequest, ReviewListResponse, ReviewResponse

from .router_utils.error_handling import handle_storefront_errors
from .router_utils.responses import map_review_to_response, map_reviews_to_list_response

logger = logging.getLogger(__name__)

router = APIRouter(tags=["reviews"])


@router.get("/albums/{album_id}/reviews", response_model=ReviewListResponse)
@handle_storefront_errors
async def list_reviews(
    album_id: str,
    review_service: ReviewService = Depends(get_review_service),
) -> ReviewListResponse:
    """List an album's reviews, newest first."""
    album_uuid = coerce_album_id(album_id)
    reviews = await review_service.list_reviews(album_uuid)
    return map_reviews_to_list_response(album_uuid, reviews)


@router.post(
    "/albums/{album_id}/reviews",
    response_model=ReviewResponse,
    status_code=status.HTTP_201_CREATED,
)
@handle_storefront_errors
async def add_review(
    album_id: str,
    request: CreateReviewRequest,
    review_service: ReviewService = Depends(get_review_service),
) -> ReviewResponse:
    """
    Submit a review and update the album's rating aggregates.

    Raises:
        HTTPException: 400 for a non-numeric rating, 404 for an unknown album
    """
    review = await review_service.add_review(
        album_id,
        request.rating,
        text=request.text,
        user_id=request.user,
    )
    return map_review_to_response(review)


@router.post(
    "/actions/review",
    response_model=ReviewResponse,
    status_code=status.HTTP_201_CREATED,
)
@handle_storefront_errors
async def submit_review_form(
    album_id: str = Form(default=""),
    rating: str = Form(default=""),
    text: str = Form(default=""),
    user: str | None = Form(default=None),
    review_service: ReviewService = Depends(get_review_service),
) -> ReviewResponse:
    """Submit a review from a form post; the rating arrives as a string."""
    review = await review_service.handle_form_submission({
        "album_id": album_id,
        "rating": rating,
        "text": text,
        "user": user,
    })
    return map_review_to_response(review)
