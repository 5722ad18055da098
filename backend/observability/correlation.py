"""
Correlation ID context.

Carries the request's correlation ID across awaits so log records emitted
deep inside services can be tied back to one HTTP request or WebSocket.

Dependencies: contextvars
System role: Request tracing across service boundaries
"""

import uuid
from contextvars import ContextVar

correlation_id_ctx: ContextVar[str] = ContextVar("correlation_id", default="")

CORRELATION_HEADER = "X-Correlation-ID"


def set_correlation_id(correlation_id: str | None = None) -> str:
    """
    Set correlation ID in context.

    Args:
        correlation_id: Optional correlation ID (generates new if None)

    Returns:
        str: The correlation ID that was set
    """
    value = correlation_id or str(uuid.uuid4())
    correlation_id_ctx.set(value)
    return value


def get_correlation_id() -> str:
    """Current correlation ID, or "" outside a request."""
    return correlation_id_ctx.get()


def clear_correlation_id() -> None:
    """Clear correlation ID from context."""
    correlation_id_ctx.set("")
