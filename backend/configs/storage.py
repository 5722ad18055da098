"""
Album image storage configuration.

Settings for the S3 bucket holding album cover images and the public
base URL their download links are built from.

Dependencies: pydantic_settings
System role: S3 images bucket configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ImageStorageSettings(BaseSettings):
    """Settings for S3 album image operations."""

    model_config = SettingsConfigDict(
        env_prefix="S3_IMAGES_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    bucket: str = Field(
        default="album-store-dev-images",
        description="S3 bucket for album cover images",
    )
    region: str = Field(
        default="us-east-1",
        description="AWS region for S3 bucket",
    )
    public_base_url: str | None = Field(
        default=None,
        description="CDN or public bucket base URL; defaults to the virtual-hosted S3 URL",
    )
