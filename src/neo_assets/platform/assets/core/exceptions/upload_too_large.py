"""Upload too large exception for the asset platform.

ONLY size limit violations - raised when an upload exceeds the configured
maximum size.
"""

from .....core.exceptions import PayloadTooLargeError


class UploadTooLarge(PayloadTooLargeError):
    """Raised when an uploaded file exceeds ``max_upload_size_bytes``."""

    def __init__(self, size_bytes: int, max_size_bytes: int, filename: str = ""):
        super().__init__(
            message=f"File size {size_bytes} exceeds maximum {max_size_bytes}",
            error_code="FILE_TOO_LARGE",
            details={
                "size_bytes": size_bytes,
                "max_size_bytes": max_size_bytes,
                "filename": filename,
            }
        )
        self.size_bytes = size_bytes
        self.max_size_bytes = max_size_bytes
