"""Asset serving service.

ONLY content lookup for serving - resolves an asset id to the byte stream
and content type the HTTP layer sends back, for either the primary file or
its thumbnail.
"""

import mimetypes
from dataclasses import dataclass
from typing import Optional

from ...core.exceptions import AssetNotFound
from ...core.protocols.asset_record_store import AssetRecordStore
from ...core.streams import ByteStream
from .asset_lifecycle_manager import AssetLifecycleManager

DEFAULT_CONTENT_TYPE = "application/octet-stream"


@dataclass
class ServedAsset:
    """A stream ready to be sent, with its content type."""

    asset_id: str
    stream: ByteStream
    content_type: str
    path: str
    is_thumbnail: bool = False


class AssetServingService:
    """Opens asset content for the serving endpoint."""

    def __init__(
        self,
        lifecycle_manager: AssetLifecycleManager,
        record_store: Optional[AssetRecordStore] = None
    ):
        self._manager = lifecycle_manager
        self._record_store = record_store or lifecycle_manager.record_store

    def thumbnail_content_type(self) -> str:
        extension = self._manager.settings.thumbnail_extension
        content_type, _ = mimetypes.guess_type(f"thumbnail{extension}")
        return content_type or DEFAULT_CONTENT_TYPE

    async def open(self, asset_id: str, thumbnail: bool = False) -> ServedAsset:
        """Open the primary file or thumbnail of an asset.

        Raises:
            AssetNotFound: If the record, its file or the requested
                thumbnail does not exist
        """
        record = await self._record_store.get(asset_id)
        if record is None or not record.path:
            raise AssetNotFound(asset_id=asset_id)

        if thumbnail:
            if not record.has_thumbnail:
                raise AssetNotFound(
                    message=f"Asset {asset_id} has no thumbnail",
                    asset_id=asset_id
                )
            name = self._manager.thumbnail_name(record)
            stream = await self._manager.thumbnail_repository.read(name)
            return ServedAsset(
                asset_id=asset_id,
                stream=stream,
                content_type=self.thumbnail_content_type(),
                path=self._manager.thumbnail_path(record),
                is_thumbnail=True,
            )

        repository = self._manager.get_repository(record.repository_name)
        stream = await repository.read(record.path)
        return ServedAsset(
            asset_id=asset_id,
            stream=stream,
            content_type=record.content_type,
            path=record.path,
        )


def create_asset_serving_service(
    lifecycle_manager: AssetLifecycleManager,
    record_store: Optional[AssetRecordStore] = None
) -> AssetServingService:
    """Create asset serving service."""
    return AssetServingService(lifecycle_manager, record_store)
