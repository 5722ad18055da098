"""
Album identifier parsing.

Dependencies: backend.core.exceptions
System role: Normalizes album ids arriving from URLs, forms and callers
"""

from typing import Any
from uuid import UUID

from backend.core.exceptions import AlbumNotFoundError, ValidationError


def coerce_album_id(value: Any) -> UUID:
    """
    Parse an album id.

    Args:
        value: UUID or its string form

    Returns:
        UUID: Parsed album id

    Raises:
        ValidationError: If the id is missing or empty
        AlbumNotFoundError: If the id is not a well-formed UUID (no album can match)
    """
    if isinstance(value, UUID):
        return value
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValidationError("No album ID has been provided.", field="album_id")
    try:
        return UUID(str(value).strip())
    except ValueError:
        raise AlbumNotFoundError(str(value))
