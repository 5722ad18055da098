"""
AWS boundary modules.

Exports: S3ImageClient, album_image_key
"""

from .s3_client import S3ImageClient, album_image_key

__all__ = ["S3ImageClient", "album_image_key"]
