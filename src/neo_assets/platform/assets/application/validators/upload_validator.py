"""Upload validator.

ONLY upload validation - checks an uploaded file against the configured
size limit and accepted MIME types before the lifecycle touches storage.
"""

import os
from dataclasses import dataclass, field
from typing import List, Optional

from ...core.entities.uploaded_file import UploadedFile
from ...core.exceptions import InvalidParameters, UnsupportedMediaType, UploadTooLarge
from ...core.value_objects.mime_type import MimeType
from .....config.settings import AssetSettings, DEFAULT_ACCEPTED_MIME_TYPES


@dataclass
class UploadValidatorConfig:
    """Configuration for upload validator."""

    max_size_bytes: int = 500 * 1024 * 1024
    accepted_mime_types: List[str] = field(
        default_factory=lambda: list(DEFAULT_ACCEPTED_MIME_TYPES)
    )

    @classmethod
    def from_settings(cls, settings: AssetSettings) -> "UploadValidatorConfig":
        return cls(
            max_size_bytes=settings.max_upload_size_bytes,
            accepted_mime_types=settings.get_accepted_mime_types(),
        )


class UploadValidator:
    """Upload validation service."""

    def __init__(self, config: Optional[UploadValidatorConfig] = None):
        self._config = config or UploadValidatorConfig()

    @property
    def config(self) -> UploadValidatorConfig:
        return self._config

    def is_accepted(self, media_type: MimeType) -> bool:
        return any(media_type.matches(pattern) for pattern in self._config.accepted_mime_types)

    def validate(self, upload: Optional[UploadedFile]) -> MimeType:
        """Validate an upload and return its parsed MIME type.

        Raises:
            InvalidParameters: If the upload, its temp path or its MIME
                type is missing, or the temp path is not absolute
            UnsupportedMediaType: If the MIME type is malformed or not accepted
            UploadTooLarge: If the declared size exceeds the limit
        """
        if upload is None:
            raise InvalidParameters(["file"], message="An uploaded file is required")

        missing = [
            name for name, value in (
                ("temp_path", upload.temp_path),
                ("mime_type", upload.mime_type),
            ) if not value
        ]
        if missing:
            raise InvalidParameters(missing)

        # Upload temp files are the only absolute paths repositories accept
        if not os.path.isabs(upload.temp_path):
            raise InvalidParameters(
                ["temp_path"],
                message=f"Upload temp path must be absolute: {upload.temp_path}"
            )

        filename = upload.original_filename or ""
        try:
            media_type = MimeType(upload.mime_type)
        except ValueError:
            raise UnsupportedMediaType(
                upload.mime_type, self._config.accepted_mime_types, filename
            ) from None

        if not self.is_accepted(media_type):
            raise UnsupportedMediaType(
                media_type.value, self._config.accepted_mime_types, filename
            )

        if upload.size_bytes is None or upload.size_bytes < 0:
            raise InvalidParameters(["size_bytes"])
        if upload.size_bytes > self._config.max_size_bytes:
            raise UploadTooLarge(upload.size_bytes, self._config.max_size_bytes, filename)

        return media_type


def create_upload_validator(config: Optional[UploadValidatorConfig] = None) -> UploadValidator:
    """Create upload validator."""
    return UploadValidator(config)
