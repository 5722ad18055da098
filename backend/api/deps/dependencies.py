"""
Dependency injection container.

Factory functions for FastAPI dependencies. Long-lived clients (database
context, images bucket client, summarizer) are cached in ServiceCache;
services are built per request around a fresh session.

Dependencies: backend.configs, backend.application, backend.boundary
System role: DI container for service injection
"""

from typing import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from backend.application.services import (
    AlbumService,
    ImageService,
    ReviewService,
    SeedService,
    SnapshotService,
    SummaryService,
)
from backend.boundary.aws.s3_client import S3ImageClient
from backend.boundary.db.connection import DatabaseContext
from backend.configs import Settings, get_settings
from backend.core.summary.review_summarizer import ReviewSummarizer


class ServiceCache:
    """Container for cached client instances."""

    def __init__(self, settings: Settings | None = None):
        self._settings = settings
        self._database: DatabaseContext | None = None
        self._s3_client: S3ImageClient | None = None
        self._prompt_registry = None
        self._summarizer: ReviewSummarizer | None = None

    @property
    def settings(self) -> Settings:
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    @property
    def database(self) -> DatabaseContext:
        """Get cached database context (engine, sessions, change feed)."""
        if self._database is None:
            self._database = DatabaseContext.from_settings(self.settings.database)
        return self._database

    @property
    def s3_client(self) -> S3ImageClient:
        """Get cached S3 images client."""
        if self._s3_client is None:
            storage = self.settings.image_storage
            self._s3_client = S3ImageClient(
                bucket=storage.bucket,
                region=storage.region,
                public_base_url=storage.public_base_url,
            )
        return self._s3_client

    @property
    def prompt_registry(self):
        """Get cached Langfuse prompt registry (inactive without keys)."""
        if self._prompt_registry is None:
            from backend.observability.prompt_registry import PromptRegistry

            self._prompt_registry = PromptRegistry(self.settings.observability)
        return self._prompt_registry

    @property
    def summarizer(self) -> ReviewSummarizer:
        """Get cached review summarizer."""
        if self._summarizer is None:
            summary_settings = self.settings.summary
            registry = self.prompt_registry if summary_settings.use_prompt_registry else None
            self._summarizer = ReviewSummarizer.from_settings(summary_settings, registry)
        return self._summarizer

    async def aclose(self) -> None:
        """Dispose the database engine and clear all cached instances."""
        if self._database is not None:
            await self._database.dispose()
        self.clear()

    def clear(self) -> None:
        """Clear all cached instances."""
        self._database = None
        self._s3_client = None
        self._prompt_registry = None
        self._summarizer = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


def get_database_context() -> DatabaseContext:
    """
    Get the database context.

    Returns:
        DatabaseContext: Engine, session factory and change feed
    """
    return get_service_cache().database


async def get_async_db(
    ctx: DatabaseContext = Depends(get_database_context),
) -> AsyncGenerator[AsyncSession, None]:
    """
    Yield a request-scoped async session.

    Args:
        ctx: Database context (injected via Depends)

    Yields:
        AsyncSession: Session closed after the response
    """
    async with ctx.session() as session:
        yield session


def get_s3_image_client() -> S3ImageClient:
    """Get the images bucket client."""
    return get_service_cache().s3_client


def get_review_summarizer() -> ReviewSummarizer:
    """Get the review summarizer."""
    return get_service_cache().summarizer


def get_album_service(db: AsyncSession = Depends(get_async_db)) -> AlbumService:
    """
    Get album service instance.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        AlbumService: Album service instance
    """
    return AlbumService(db=db)


def get_review_service(
    db: AsyncSession = Depends(get_async_db),
    ctx: DatabaseContext = Depends(get_database_context),
) -> ReviewService:
    """
    Get review service instance.

    Args:
        db: Async database session (injected via Depends)
        ctx: Database context providing the change feed

    Returns:
        ReviewService: Review service instance
    """
    return ReviewService(db=db, change_feed=ctx.change_feed)


def get_image_service(
    db: AsyncSession = Depends(get_async_db),
    ctx: DatabaseContext = Depends(get_database_context),
    storage: S3ImageClient = Depends(get_s3_image_client),
) -> ImageService:
    """
    Get image service instance.

    Args:
        db: Async database session (injected via Depends)
        ctx: Database context providing the change feed
        storage: Images bucket client (injected via Depends)

    Returns:
        ImageService: Image service instance
    """
    return ImageService(db=db, storage=storage, change_feed=ctx.change_feed)


def get_summary_service(
    db: AsyncSession = Depends(get_async_db),
    summarizer: ReviewSummarizer = Depends(get_review_summarizer),
) -> SummaryService:
    """Get summary service instance."""
    return SummaryService(db=db, summarizer=summarizer)


def get_snapshot_service(
    ctx: DatabaseContext = Depends(get_database_context),
) -> SnapshotService:
    """Get snapshot service instance."""
    return SnapshotService(ctx)


def get_seed_service(
    ctx: DatabaseContext = Depends(get_database_context),
) -> SeedService:
    """Get demo data service instance."""
    return SeedService(ctx)
