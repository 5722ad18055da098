"""
Shared test fixtures and configuration for entire test suite.

Provides: in-memory database context, album factory, service mocks
Dependencies: pytest, sqlalchemy, aiosqlite
System role: Test infrastructure and fixture management
"""

import uuid
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from backend.boundary.db.connection import DatabaseContext
from backend.boundary.db.models.album_model import AlbumModel


@pytest.fixture
async def db_context():
    """
    Create in-memory SQLite database context for testing.

    Yields:
        DatabaseContext: Context with tables created and a fresh change feed
    """
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    ctx = DatabaseContext(engine)
    await ctx.create_all()

    yield ctx

    await ctx.dispose()


@pytest.fixture
async def db_session(db_context: DatabaseContext):
    """
    Open a session on the test database.

    Yields:
        AsyncSession: Test database session
    """
    async with db_context.session() as session:
        yield session
        await session.rollback()


@pytest.fixture
def make_album(db_context: DatabaseContext):
    """
    Factory that commits an album and returns it.

    Returns:
        Callable: async (**overrides) -> AlbumModel
    """
    async def _make(**overrides) -> AlbumModel:
        values = {
            "name": "Blue Hour",
            "artist": "Lena Marsh",
            "genre": "Jazz",
            "release_year": 1999,
            "avg_rating": 0.0,
            "num_ratings": 0,
        }
        values.update(overrides)
        async with db_context.session() as session:
            album = AlbumModel(**values)
            session.add(album)
            await session.commit()
            return album

    return _make


@pytest.fixture
def album_id() -> uuid.UUID:
    """Generate a test album ID."""
    return uuid.uuid4()


@pytest.fixture
def mock_review_service():
    """
    Create mock ReviewService for testing.

    Returns:
        AsyncMock: Mocked ReviewService with async methods
    """
    service = AsyncMock()
    service.add_review = AsyncMock()
    service.handle_form_submission = AsyncMock()
    service.list_reviews = AsyncMock(return_value=[])
    service.db = AsyncMock()
    return service


@pytest.fixture
def mock_album_service():
    """
    Create mock AlbumService for testing.

    Returns:
        AsyncMock: Mocked AlbumService with async methods
    """
    service = AsyncMock()
    service.list_albums = AsyncMock(return_value=[])
    service.get_album = AsyncMock()
    return service


@pytest.fixture
def mock_s3_client():
    """
    Create mock boto3 S3 client.

    Returns:
        MagicMock: Client whose upload_fileobj succeeds
    """
    client = MagicMock()
    client.upload_fileobj = MagicMock(return_value=None)
    return client
