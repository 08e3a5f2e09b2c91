"""Unsupported media type exception for the asset platform.

ONLY MIME type violations - raised when an upload's declared type is not
in the accepted list.
"""

from typing import List

from .....core.exceptions import UnsupportedMediaTypeError


class UnsupportedMediaType(UnsupportedMediaTypeError):
    """Raised when an uploaded file's MIME type is not accepted."""

    def __init__(self, mime_type: str, accepted: List[str], filename: str = ""):
        super().__init__(
            message=f"File type '{mime_type}' is not accepted",
            error_code="UNSUPPORTED_FILE_TYPE",
            details={
                "mime_type": mime_type,
                "accepted": list(accepted),
                "filename": filename,
            }
        )
        self.mime_type = mime_type
