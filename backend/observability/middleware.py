"""
FastAPI middleware for observability.

Correlation ID and request logging middleware.

Dependencies: fastapi, starlette, backend.observability.correlation
System role: Request/response observability injection
"""

import logging
import time

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from backend.observability.correlation import (
    CORRELATION_HEADER,
    clear_correlation_id,
    set_correlation_id,
)

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs method, path, status and latency of each HTTP request."""

    async def dispatch(self, request: Request, call_next):
        start_time = time.perf_counter()
        method = request.method
        path = request.url.path

        try:
            response: Response = await call_next(request)
        except Exception as e:
            logger.exception(
                f"{method} {path} - Exception",
                extra={
                    "method": method,
                    "path": path,
                    "process_time_ms": round((time.perf_counter() - start_time) * 1000, 2),
                    "error_type": type(e).__name__,
                },
            )
            raise

        logger.info(
            f"{method} {path} - {response.status_code}",
            extra={
                "method": method,
                "path": path,
                "query_string": str(request.url.query) or None,
                "status_code": response.status_code,
                "process_time_ms": round((time.perf_counter() - start_time) * 1000, 2),
            },
        )
        return response


class CorrelationMiddleware(BaseHTTPMiddleware):
    """Propagates X-Correlation-ID through the request context and response."""

    async def dispatch(self, request: Request, call_next):
        """
        Inject correlation ID into request context.

        Args:
            request: FastAPI request
            call_next: Next middleware in chain

        Returns:
            Response: Response with correlation ID header
        """
        correlation_id = set_correlation_id(request.headers.get(CORRELATION_HEADER))
        try:
            response: Response = await call_next(request)
        finally:
            clear_correlation_id()
        response.headers[CORRELATION_HEADER] = correlation_id
        return response
