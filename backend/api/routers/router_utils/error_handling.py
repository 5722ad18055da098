"""
Storefront error handling utilities.

Decorator that maps domain exceptions raised by services to HTTP errors
with consistent logging.

Dependencies: fastapi, backend.core.exceptions
System role: Uniform error responses for album endpoints
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import HTTPException, status

from backend.core.exceptions import (
    AlbumNotFoundError,
    StorageError,
    StorefrontException,
    ValidationError,
)

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def handle_storefront_errors(func: F) -> F:
    """
    Translate domain exceptions into HTTPExceptions.

    ValidationError -> 400, AlbumNotFoundError -> 404, StorageError -> 502,
    anything else -> 500. HTTPExceptions raised by the endpoint pass through.
    """
    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)

        except HTTPException:
            raise

        except ValidationError as e:
            logger.warning(
                "Invalid request",
                extra={"field": e.field, "error": e.message},
            )
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)

        except AlbumNotFoundError as e:
            logger.warning("Album not found", extra={"album_id": e.album_id})
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)

        except StorageError as e:
            logger.error("Storage operation failed", extra={"error": str(e)})
            raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=e.message)

        except StorefrontException as e:
            logger.error("Storefront operation failed", extra={"error": str(e)})
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=e.message,
            )

        except Exception as e:
            logger.exception(
                "Unexpected failure in storefront operation",
                extra={"error": str(e)},
            )
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="An internal error occurred",
            )

    return wrapper  # type: ignore
