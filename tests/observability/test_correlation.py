"""Tests for correlation ID propagation and logging setup."""

import logging

from fastapi import FastAPI
from fastapi.testclient import TestClient

from backend.observability.correlation import (
    CORRELATION_HEADER,
    clear_correlation_id,
    get_correlation_id,
    set_correlation_id,
)
from backend.observability.logger import CorrelationIdFilter, configure_logging
from backend.observability.middleware import CorrelationMiddleware, RequestLoggingMiddleware


class TestCorrelationContext:
    """Tests for the correlation contextvar helpers."""

    def test_set_explicit_id(self) -> None:
        assert set_correlation_id("abc-123") == "abc-123"
        assert get_correlation_id() == "abc-123"
        clear_correlation_id()

    def test_set_generates_id_when_missing(self) -> None:
        generated = set_correlation_id()
        assert generated
        assert get_correlation_id() == generated
        clear_correlation_id()

    def test_clear(self) -> None:
        set_correlation_id("to-clear")
        clear_correlation_id()
        assert get_correlation_id() == ""


class TestCorrelationIdFilter:
    """Tests for the logging filter."""

    def test_filter_attaches_current_id(self) -> None:
        set_correlation_id("req-1")
        record = logging.LogRecord("t", logging.INFO, __file__, 1, "msg", None, None)
        assert CorrelationIdFilter().filter(record) is True
        assert record.correlation_id == "req-1"
        clear_correlation_id()

    def test_filter_uses_dash_outside_request(self) -> None:
        clear_correlation_id()
        record = logging.LogRecord("t", logging.INFO, __file__, 1, "msg", None, None)
        CorrelationIdFilter().filter(record)
        assert record.correlation_id == "-"

    def test_configure_logging_sets_level_and_quiets_libraries(self) -> None:
        configure_logging("DEBUG")
        assert logging.getLogger().level == logging.DEBUG
        assert logging.getLogger("botocore").level == logging.WARNING
        configure_logging("INFO")


def _app() -> FastAPI:
    app = FastAPI()
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    @app.get("/echo")
    async def echo() -> dict:
        return {"correlation_id": get_correlation_id()}

    return app


class TestCorrelationMiddleware:
    """Tests for header propagation through the middleware."""

    def test_incoming_header_is_reused(self) -> None:
        client = TestClient(_app())
        response = client.get("/echo", headers={CORRELATION_HEADER: "from-client"})

        assert response.status_code == 200
        assert response.headers[CORRELATION_HEADER] == "from-client"
        assert response.json()["correlation_id"] == "from-client"

    def test_header_generated_when_absent(self) -> None:
        client = TestClient(_app())
        response = client.get("/echo")

        generated = response.headers[CORRELATION_HEADER]
        assert generated
        assert response.json()["correlation_id"] == generated
