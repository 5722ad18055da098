"""
API test fixtures.

Provides: TestClient over a fresh app, ORM record builders
"""

import uuid
from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from backend.api.main import create_app
from backend.boundary.db.models.album_model import AlbumModel
from backend.boundary.db.models.rating_model import RatingModel


@pytest.fixture
def client():
    app = create_app()
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def album_record():
    def _build(**overrides) -> AlbumModel:
        now = datetime.now(timezone.utc)
        values = {
            "id": uuid.uuid4(),
            "name": "Copper Skies",
            "artist": "Amara Blue",
            "genre": "Soul",
            "release_year": 2004,
            "avg_rating": 4.0,
            "num_ratings": 2,
            "photo": None,
            "created_at": now,
            "updated_at": now,
        }
        values.update(overrides)
        return AlbumModel(**values)

    return _build


@pytest.fixture
def review_record():
    def _build(album_id: uuid.UUID, **overrides) -> RatingModel:
        values = {
            "id": uuid.uuid4(),
            "album_id": album_id,
            "rating": 4.0,
            "text": "Warm and soulful",
            "user_id": "User #12",
            "created_at": datetime.now(timezone.utc),
        }
        values.update(overrides)
        return RatingModel(**values)

    return _build
