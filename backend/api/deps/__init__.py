"""API-specific dependencies."""

from .dependencies import (
    ServiceCache,
    get_album_service,
    get_async_db,
    get_database_context,
    get_image_service,
    get_review_service,
    get_review_summarizer,
    get_s3_image_client,
    get_seed_service,
    get_service_cache,
    get_snapshot_service,
    get_summary_service,
)

__all__ = [
    "ServiceCache",
    "get_album_service",
    "get_async_db",
    "get_database_context",
    "get_image_service",
    "get_review_service",
    "get_review_summarizer",
    "get_s3_image_client",
    "get_seed_service",
    "get_service_cache",
    "get_snapshot_service",
    "get_summary_service",
]
