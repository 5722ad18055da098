"""
Logger configuration.

Single stdout handler with ISO timestamps; every record carries the
current correlation ID.

Dependencies: logging (stdlib), backend.observability.correlation
System role: Centralized logging configuration
"""

import logging
import sys

from backend.observability.correlation import get_correlation_id

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(correlation_id)s] %(message)s"

NOISY_LOGGERS = ("urllib3", "botocore", "boto3", "s3transfer", "httpx", "aiosqlite")


class CorrelationIdFilter(logging.Filter):
    """Attach the context correlation ID to each record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.correlation_id = get_correlation_id() or "-"
        return True


def configure_logging(level: str | int = "INFO") -> None:
    """
    Configure root logging.

    Args:
        level: Root log level name or number (e.g. "DEBUG")
    """
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(CorrelationIdFilter())
    handler.setFormatter(
        logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S%z")
    )

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    root_logger.setLevel(level)
    root_logger.addHandler(handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
