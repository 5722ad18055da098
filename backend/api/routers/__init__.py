"""API routers."""

from .albums import router as albums_router
from .health import router as health_router
from .images import router as images_router
from .reviews import router as reviews_router
from .snapshots_stream import router as snapshots_router
from .summary import router as summary_router

__all__ = [
    "albums_router",
    "health_router",
    "images_router",
    "reviews_router",
    "snapshots_router",
    "summary_router",
]
