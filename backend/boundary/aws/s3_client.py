"""
S3 client for album image operations.

Uploads cover images under albums/{album_id}/{file_name} and builds the
public HTTPS URL they are served from.

Dependencies: boto3
System role: Blob storage boundary for album cover images
"""

import logging
from typing import BinaryIO
from urllib.parse import quote

import boto3

logger = logging.getLogger(__name__)


def album_image_key(album_id: str, file_name: str) -> str:
    """
    Object key for an album image.

    Args:
        album_id: Album identifier (namespace)
        file_name: Uploaded file name

    Returns:
        str: Key of the form albums/{album_id}/{file_name}
    """
    return f"albums/{album_id}/{file_name}"


class S3ImageClient:
    """S3 client for the album images bucket (uploads and public URLs)."""

    def __init__(
        self,
        bucket: str,
        region: str = "us-east-1",
        public_base_url: str | None = None,
        s3_client=None,
    ) -> None:
        """
        Initialize S3 client for image bucket.

        Args:
            bucket: S3 bucket name for image storage
            region: AWS region for S3 bucket
            public_base_url: Base URL objects are publicly served from (CDN);
                defaults to the bucket's virtual-hosted URL
            s3_client: Pre-built boto3 S3 client (tests)
        """
        self._bucket = bucket
        self._region = region
        self._public_base_url = (
            public_base_url.rstrip("/")
            if public_base_url
            else f"https://{bucket}.s3.{region}.amazonaws.com"
        )
        self._s3_client = s3_client or boto3.client("s3", region_name=region)

    @property
    def bucket(self) -> str:
        return self._bucket

    def public_url(self, s3_key: str) -> str:
        """
        Public HTTPS download URL for an object key.

        Args:
            s3_key: S3 object key

        Returns:
            str: URL with the key percent-encoded (slashes kept)
        """
        return f"{self._public_base_url}/{quote(s3_key, safe='/')}"

    def upload_image(
        self,
        s3_key: str,
        fileobj: BinaryIO,
        content_type: str = "application/octet-stream",
    ) -> str:
        """
        Upload an image and return its public URL.

        Blocking call; run it in a threadpool from async code.

        Args:
            s3_key: Destination object key
            fileobj: Readable binary file object
            content_type: MIME type stored with the object

        Returns:
            str: Public download URL

        Raises:
            ClientError, BotoCoreError: If the upload fails
        """
        self._s3_client.upload_fileobj(
            fileobj,
            self._bucket,
            s3_key,
            ExtraArgs={"ContentType": content_type},
        )
        logger.info(
            "Image uploaded",
            extra={"bucket": self._bucket, "s3_key": s3_key, "content_type": content_type},
        )
        return self.public_url(s3_key)
