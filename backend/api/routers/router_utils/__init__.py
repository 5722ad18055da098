"""Shared router helpers."""

from .error_handling import handle_storefront_errors

__all__ = ["handle_storefront_errors"]
