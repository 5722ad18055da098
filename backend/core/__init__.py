"""
Core business logic module.

Contains the exception hierarchy, rating aggregate maths, listing filters,
the change feed behind real-time snapshots, review summaries and demo data.
Submodules are imported directly; only the exceptions are re-exported here.
"""

from backend.core.exceptions import (
    AlbumNotFoundError,
    StorageError,
    StorefrontException,
    SummaryGenerationError,
    ValidationError,
)

__all__ = [
    "StorefrontException",
    "ValidationError",
    "AlbumNotFoundError",
    "StorageError",
    "SummaryGenerationError",
]
