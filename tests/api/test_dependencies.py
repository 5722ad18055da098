"""Tests for the cached client container."""

import pytest

from backend.api.deps.dependencies import ServiceCache
from backend.configs.database import DatabaseSettings
from backend.configs.settings import Settings
from backend.configs.summary import SummarySettings


@pytest.fixture
def settings():
    return Settings(
        database=DatabaseSettings(url="sqlite+aiosqlite:///:memory:"),
        summary=SummarySettings(model="gemini-2.5-pro", temperature=0.1),
    )


def test_database_context_is_cached(settings):
    cache = ServiceCache(settings)

    ctx = cache.database

    assert cache.database is ctx
    assert str(ctx.engine.url) == "sqlite+aiosqlite:///:memory:"


def test_summarizer_uses_summary_settings(settings):
    cache = ServiceCache(settings)

    summarizer = cache.summarizer

    assert summarizer._model_id == "gemini-2.5-pro"
    assert summarizer._temperature == 0.1
    assert cache.summarizer is summarizer


@pytest.mark.asyncio
async def test_aclose_disposes_and_clears(settings):
    cache = ServiceCache(settings)
    first = cache.database

    await cache.aclose()

    assert cache.database is not first
    await cache.aclose()
