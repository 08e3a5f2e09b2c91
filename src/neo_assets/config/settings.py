"""
Asset platform settings.

Options recognized by the asset lifecycle, read from ``ASSET_``-prefixed
environment variables or a ``.env`` file.
"""
import os
import tempfile
from functools import lru_cache
from typing import List, Optional, Union

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_ACCEPTED_MIME_TYPES = ["image/*", "video/*", "audio/*", "application/pdf"]


class AssetSettings(BaseSettings):
    """Asset storage, thumbnail and housekeeping configuration."""

    model_config = SettingsConfigDict(
        env_prefix="ASSET_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Storage
    # Read from ASSET_ROOT_DIRECTORY rather than the prefixed name
    asset_root_directory: str = Field(
        default="./data/assets",
        validation_alias="asset_root_directory"
    )
    thumbnail_directory: str = Field(default="./data/thumbnails")
    default_repository_name: str = Field(default="local", min_length=1)
    scratch_directory: str = Field(
        default_factory=lambda: os.path.join(tempfile.gettempdir(), "neo-assets")
    )

    # Thumbnails
    thumbnail_width_pixels: int = Field(default=640, gt=0)
    thumbnail_extension: str = Field(default=".png")
    require_thumbnail: bool = Field(default=True)
    video_thumbnail_position: float = Field(default=0.25, ge=0.0, le=1.0)

    # Uploads
    max_upload_size_bytes: int = Field(default=500 * 1024 * 1024, gt=0)
    accepted_mime_types: Union[List[str], str] = Field(
        default_factory=lambda: list(DEFAULT_ACCEPTED_MIME_TYPES)
    )

    # External media tool
    ffmpeg_binary: str = Field(default="ffmpeg")
    ffprobe_binary: str = Field(default="ffprobe")
    transcoder_timeout_seconds: Optional[float] = Field(default=120.0, gt=0)

    # Housekeeping
    housekeeping_on_startup: bool = Field(default=True)
    housekeeping_interval_seconds: Optional[float] = Field(default=None, gt=0)

    @field_validator("thumbnail_extension")
    @classmethod
    def normalize_extension(cls, value: str) -> str:
        value = value.strip()
        if not value or value == ".":
            raise ValueError("thumbnail_extension cannot be empty")
        return value if value.startswith(".") else f".{value}"

    @field_validator("accepted_mime_types", mode="before")
    @classmethod
    def split_mime_types(cls, value):
        if isinstance(value, str):
            return [item.strip() for item in value.split(",") if item.strip()]
        return value

    def get_accepted_mime_types(self) -> List[str]:
        """Get accepted MIME type patterns as list."""
        return list(self.accepted_mime_types)


@lru_cache()
def get_settings() -> AssetSettings:
    """Get cached settings instance."""
    return AssetSettings()
