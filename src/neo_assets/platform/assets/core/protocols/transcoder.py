"""Transcoder protocol.

ONLY media tool contract - metadata probing and thumbnail rendering over
byte streams. Implementations drive an external tool as a black box.
"""

from typing import AsyncIterable, Optional

from typing_extensions import Protocol, runtime_checkable

from ..entities.media_metadata import MediaMetadata
from ..value_objects.mime_type import MimeType


@runtime_checkable
class Transcoder(Protocol):
    """Transcoder protocol."""

    async def probe(
        self,
        source: AsyncIterable[bytes],
        asset_id: Optional[str] = None
    ) -> MediaMetadata:
        """Inspect a media stream.

        Args:
            source: Media content
            asset_id: Asset identifier for tracking/logging

        Returns:
            Width, height, duration and size where the tool reports them

        Raises:
            TranscoderError: If the tool fails
        """
        ...

    async def generate_thumbnail(
        self,
        source: AsyncIterable[bytes],
        destination_path: str,
        target_width: int,
        media_type: MimeType,
        asset_id: Optional[str] = None
    ) -> None:
        """Render a still image scaled to ``target_width`` (height follows aspect ratio).

        Images are scaled directly; videos contribute a single frame.

        Raises:
            ThumbnailGenerationFailed: If the tool fails
        """
        ...
