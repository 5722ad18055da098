"""
Logging helpers for structured context.

Dependencies: logging (stdlib)
System role: Safe conversion of arbitrary values into log `extra` fields
"""

import logging
from typing import Any


def safe_log_value(value: Any, max_length: int = 500) -> str:
    """
    Render a value for a log field.

    Collections are summarized by size and long strings truncated.

    Args:
        value: Value to convert
        max_length: Maximum length before truncating

    Returns:
        str: Log-safe string
    """
    if value is None:
        return "None"
    if isinstance(value, (list, tuple)):
        text = f"{type(value).__name__}({len(value)} items)"
    elif isinstance(value, dict):
        text = f"dict({len(value)} keys)"
    else:
        try:
            text = str(value)
        except Exception as e:
            return f"<unprintable {type(e).__name__}>"

    if len(text) > max_length:
        return f"{text[:max_length]}... (truncated, {len(text)} total)"
    return text


def log_exception_with_context(
    logger: logging.Logger,
    message: str,
    exc: BaseException,
    **context: Any,
) -> None:
    """
    Log an exception with traceback and safely rendered context.

    Args:
        logger: Logger instance
        message: Log message
        exc: Exception being reported
        **context: Extra key-value pairs
    """
    extra = {key: safe_log_value(val) for key, val in context.items()}
    extra["error_type"] = type(exc).__name__
    extra["error_msg"] = safe_log_value(exc)
    logger.error(message, exc_info=exc, extra=extra)
