"""Media metadata entity.

ONLY probe results - what the external tool reports about a media stream.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..value_objects.mime_type import MimeType


@dataclass(frozen=True)
class MediaMetadata:
    """Probe result for a media file. Every field is optional."""

    width: Optional[int] = None
    height: Optional[int] = None
    duration_seconds: Optional[float] = None
    size_bytes: Optional[int] = None

    @property
    def resolution(self) -> Optional[str]:
        if self.width and self.height:
            return f"{self.width}x{self.height}"
        return None

    @property
    def is_empty(self) -> bool:
        return not any((self.width, self.height, self.duration_seconds, self.size_bytes))

    def to_record_fields(self, media_type: MimeType) -> Dict[str, Any]:
        """Record fields derived from this metadata.

        Duration is only meaningful for time-based media, so images never
        carry one.
        """
        values: Dict[str, Any] = {}
        if self.resolution:
            values["resolution"] = self.resolution
        if not media_type.is_image() and self.duration_seconds is not None:
            values["duration_seconds"] = self.duration_seconds
        return values

    @classmethod
    def empty(cls) -> "MediaMetadata":
        return cls()
