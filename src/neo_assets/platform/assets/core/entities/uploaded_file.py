"""Uploaded file entity.

ONLY transient upload - the temporary on-disk file the upload middleware
hands to the lifecycle manager. Consumed once, then deleted.
"""

from dataclasses import dataclass
from typing import Optional

from ..value_objects.mime_type import MimeType


@dataclass(frozen=True)
class UploadedFile:
    """A file parsed out of a request by the upload middleware.

    ``temp_path`` is an absolute path owned by the middleware; it is the
    only absolute path the lifecycle manager ever hands to a repository.
    """

    temp_path: str
    mime_type: str
    size_bytes: int
    original_filename: Optional[str] = None

    @property
    def media_type(self) -> MimeType:
        return MimeType(self.mime_type)
