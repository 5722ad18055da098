"""
Exception hierarchy for the album storefront.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class StorefrontException(Exception):
    """Base exception for all storefront application errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ValidationError(StorefrontException):
    """Raised when input validation fails (missing album id, non-numeric rating, bad filter)."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        self.field = field
        super().__init__(message, details)


class AlbumNotFoundError(StorefrontException):
    """Raised when an album cannot be found."""

    def __init__(self, album_id: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize album not found error.

        Args:
            album_id: ID of the missing album
            details: Additional context
        """
        details = details or {}
        details["album_id"] = album_id
        self.album_id = album_id
        super().__init__(f"Album not found: {album_id}", details)


class StorageError(StorefrontException):
    """Raised when a blob storage operation fails."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize storage error.

        Args:
            message: Error message
            operation: Operation that failed (upload)
            key: Object key involved
            details: Additional context
        """
        details = details or {}
        if operation:
            details["operation"] = operation
        if key:
            details["key"] = key
        super().__init__(message, details)


class SummaryGenerationError(StorefrontException):
    """Raised inside the summarizer when the model call fails or returns nothing usable."""

    pass
