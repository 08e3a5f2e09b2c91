"""Asset lifecycle manager.

ONLY lifecycle orchestration - sequences storage writes, thumbnail
rendering, metadata probing and record updates for asset create, replace
and delete, and rolls back files and records when a required step fails.

Each lifecycle operation runs its steps strictly in order (write, then
thumbnail, then metadata). Operations on different assets are independent;
requests for the same asset are expected to be serialized by the caller.
"""

import logging
from typing import Any, Dict, Optional, Union

from ...core.entities.asset_record import AssetRecord, AssetState, strip_protected_fields
from ...core.entities.media_metadata import MediaMetadata
from ...core.entities.uploaded_file import UploadedFile
from ...core.exceptions import (
    AssetNotFound,
    OperationDisabled,
    ThumbnailGenerationFailed,
    TranscoderError,
)
from ...core.protocols.asset_record_store import AssetRecordStore
from ...core.protocols.asset_repository import AssetRepository
from ...core.protocols.transcoder import Transcoder
from ...core.value_objects.mime_type import MimeType
from ...infrastructure.repositories.local_filesystem_repository import LocalFilesystemRepository
from ...infrastructure.temp_files import scratch_path
from ..registry.repository_registry import RepositoryRegistry
from ..validators.upload_validator import UploadValidator, UploadValidatorConfig
from .....config.settings import AssetSettings, get_settings

logger = logging.getLogger(__name__)

THUMBNAIL_REPOSITORY_NAME = "thumbnails"
UPLOAD_REPOSITORY_NAME = "uploads"


class AssetLifecycleManager:
    """Keeps an asset's record, primary file and thumbnail consistent.

    Owns the repository registry (with the default local repository
    registered at construction), the local thumbnail repository, and the
    scratch repository used to consume upload temp files.
    """

    def __init__(
        self,
        record_store: AssetRecordStore,
        transcoder: Transcoder,
        settings: Optional[AssetSettings] = None,
        registry: Optional[RepositoryRegistry] = None,
        validator: Optional[UploadValidator] = None
    ):
        self._settings = settings or get_settings()
        self._record_store = record_store
        self._transcoder = transcoder
        self._registry = registry or RepositoryRegistry()
        self._validator = validator or UploadValidator(
            UploadValidatorConfig.from_settings(self._settings)
        )

        # Thumbnails are always local, whatever repository holds the primary file
        self._thumbnails = LocalFilesystemRepository(
            THUMBNAIL_REPOSITORY_NAME, self._settings.thumbnail_directory
        )
        self._uploads = LocalFilesystemRepository(
            UPLOAD_REPOSITORY_NAME, self._settings.scratch_directory
        )

        default_name = self._settings.default_repository_name
        if default_name not in self._registry:
            self._registry.register(
                default_name,
                LocalFilesystemRepository(default_name, self._settings.asset_root_directory)
            )

    @property
    def settings(self) -> AssetSettings:
        return self._settings

    @property
    def registry(self) -> RepositoryRegistry:
        return self._registry

    @property
    def record_store(self) -> AssetRecordStore:
        return self._record_store

    @property
    def thumbnail_repository(self) -> LocalFilesystemRepository:
        return self._thumbnails

    # Repositories

    def register_repository(self, name: str, repository: AssetRepository) -> AssetRepository:
        return self._registry.register(name, repository)

    def get_repository(self, name: Optional[str] = None) -> AssetRepository:
        """Look up a repository; ``None`` means the default one."""
        return self._registry.get(name or self._settings.default_repository_name)

    # Thumbnails

    def thumbnail_name(self, record: AssetRecord) -> str:
        return f"{record.id}{self._settings.thumbnail_extension}"

    def thumbnail_path(self, record: AssetRecord) -> str:
        """Absolute location of the record's thumbnail."""
        return self._thumbnails.resolve_path(self.thumbnail_name(record))

    async def thumbnail_exists(self, record: AssetRecord) -> bool:
        return await self._thumbnails.exists(self.thumbnail_name(record))

    async def generate_thumbnail(self, record: AssetRecord, regenerate: bool = False) -> bool:
        """Render the thumbnail for a stored asset.

        Args:
            record: Record whose primary file is already stored
            regenerate: Render even if a thumbnail already exists

        Returns:
            True if a thumbnail was rendered, False if the type has no
            thumbnail or one already exists

        Raises:
            ThumbnailGenerationFailed: If the transcoder fails
            AssetNotFound: If the primary file is missing
        """
        media_type = record.mime_type
        if media_type is None or not media_type.supports_thumbnail():
            return False
        if not regenerate and await self.thumbnail_exists(record):
            return False

        repository = self.get_repository(record.repository_name)
        source = await repository.read(record.path)

        # Render off to the side; only a complete thumbnail is moved into place
        async with scratch_path(
            self._settings.scratch_directory, self._settings.thumbnail_extension
        ) as rendered:
            try:
                await self._transcoder.generate_thumbnail(
                    source,
                    rendered,
                    self._settings.thumbnail_width_pixels,
                    media_type,
                    asset_id=record.id,
                )
            except ThumbnailGenerationFailed:
                raise
            except TranscoderError as e:
                raise ThumbnailGenerationFailed(record.id, e) from e
            await self._thumbnails.move(rendered, self.thumbnail_name(record))

        logger.info(f"Generated thumbnail for asset {record.id}")
        return True

    # Create

    async def create_asset(
        self,
        record: Optional[Union[AssetRecord, Dict[str, Any]]],
        upload: UploadedFile
    ) -> AssetRecord:
        """Persist a provisional record for ``upload`` and store the file.

        Derived fields in ``record`` (path, type, size and so on) are
        ignored. Nothing is persisted if the upload fails validation.
        """
        self._validator.validate(upload)

        if isinstance(record, AssetRecord):
            values = record.to_dict()
            values.update(values.pop("attributes"))
        else:
            values = dict(record or {})
        repository_name = values.get("repository_name") or self._settings.default_repository_name
        self.get_repository(repository_name)

        provisional = AssetRecord(repository_name=repository_name)
        provisional.apply(strip_protected_fields(values))
        provisional = await self._record_store.insert(provisional)
        provisional.transition(AssetState.UNCOMMITTED)
        logger.debug(f"Inserted provisional record {provisional.id}")

        return await self.on_asset_inserted(provisional, upload)

    async def on_asset_inserted(self, record: AssetRecord, upload: UploadedFile) -> AssetRecord:
        """Store the upload for a freshly inserted record.

        On failure the partial primary file, any thumbnail and the
        provisional record are removed before the error propagates.
        """
        try:
            media_type = self._validator.validate(upload)
            values = await self._store_upload(record, upload, media_type)
            updated = await self._record_store.update(record.id, values)
        except Exception:
            await self._remove_files(record)
            await self._discard_record(record.id)
            raise

        logger.info(f"Stored asset {updated.id} at '{updated.path}' in repository '{updated.repository_name}'")
        return updated.transition(AssetState.ACTIVE)

    # Update

    async def update_asset(
        self,
        asset_id: str,
        changes: Optional[Dict[str, Any]] = None,
        upload: Optional[UploadedFile] = None
    ) -> AssetRecord:
        """Apply caller changes and optionally replace the file.

        ``path`` and the other derived fields are dropped from ``changes``
        before anything else happens.
        """
        changes = strip_protected_fields(changes or {})

        record = await self._record_store.get(asset_id)
        if record is None:
            raise AssetNotFound(asset_id=asset_id)
        if upload is not None:
            self._validator.validate(upload)

        if changes:
            record = await self._record_store.update(asset_id, changes)
        if upload is not None:
            record = await self.on_asset_updated(record, upload)
        return record.transition(AssetState.ACTIVE)

    async def on_asset_updated(self, record: AssetRecord, upload: UploadedFile) -> AssetRecord:
        """Replace the stored file of an existing record, keeping its id."""
        media_type = self._validator.validate(upload)

        await self._delete_files(record)
        try:
            values = await self._store_upload(record, upload, media_type)
            updated = await self._record_store.update(record.id, values)
        except Exception:
            await self._remove_files(record)
            raise

        logger.info(f"Replaced file of asset {updated.id} at '{updated.path}'")
        return updated.transition(AssetState.ACTIVE)

    # Delete

    async def delete_asset(self, asset_id: str) -> AssetRecord:
        """Delete the record, then its primary file and thumbnail."""
        record = await self._record_store.delete(asset_id)
        if record is None:
            raise AssetNotFound(asset_id=asset_id)
        return await self.on_asset_deleted(record)

    async def on_asset_deleted(self, record: AssetRecord) -> AssetRecord:
        """Remove the files of an already-deleted record.

        Missing files count as deleted. Any other failure propagates,
        leaving an orphaned file for housekeeping to report.
        """
        await self._delete_files(record)
        logger.info(f"Deleted asset {record.id}")
        return record.transition(AssetState.DELETED)

    async def delete_many(self, *args, **kwargs):
        raise OperationDisabled("delete_many")

    # Internals

    async def _store_upload(
        self,
        record: AssetRecord,
        upload: UploadedFile,
        media_type: MimeType
    ) -> Dict[str, Any]:
        """Write, thumbnail and probe; return the derived record fields."""
        record.repository_name = record.repository_name or self._settings.default_repository_name
        repository = self.get_repository(record.repository_name)

        record.path = f"{record.id}.{media_type.file_extension(upload.original_filename)}"
        record.type = media_type.main_type
        record.subtype = media_type.sub_type
        record.size_bytes = upload.size_bytes
        record.has_thumbnail = media_type.supports_thumbnail()
        record.resolution = None
        record.duration_seconds = None

        try:
            source = await self._uploads.read(upload.temp_path)
            await repository.write(source, record.path)
        finally:
            await self._uploads.delete(upload.temp_path)
        record.transition(AssetState.STORED)
        logger.debug(f"Wrote asset {record.id} to '{record.path}'")

        if record.has_thumbnail:
            await self._render_thumbnail(record)
        else:
            record.transition(AssetState.NO_THUMBNAIL)

        metadata = await self._probe(record, repository, media_type)
        record.apply(metadata.to_record_fields(media_type))

        return {
            "repository_name": record.repository_name,
            "path": record.path,
            "type": record.type,
            "subtype": record.subtype,
            "size_bytes": record.size_bytes,
            "has_thumbnail": record.has_thumbnail,
            "resolution": record.resolution,
            "duration_seconds": record.duration_seconds,
        }

    async def _render_thumbnail(self, record: AssetRecord) -> None:
        try:
            await self.generate_thumbnail(record, regenerate=True)
        except ThumbnailGenerationFailed as e:
            if self._settings.require_thumbnail:
                raise
            logger.warning(f"Keeping asset {record.id} without thumbnail: {e.message}")
            await self._thumbnails.delete(self.thumbnail_name(record))
            record.has_thumbnail = False
            record.transition(AssetState.NO_THUMBNAIL)
            return
        record.transition(AssetState.THUMBNAILED)

    async def _probe(
        self,
        record: AssetRecord,
        repository: AssetRepository,
        media_type: MimeType
    ) -> MediaMetadata:
        """Probe metadata; failures are logged and yield empty metadata."""
        if not media_type.is_media():
            return MediaMetadata.empty()
        try:
            source = await repository.read(record.path)
            return await self._transcoder.probe(source, asset_id=record.id)
        except Exception as e:
            logger.warning(f"Metadata probe failed for asset {record.id}: {e}")
            return MediaMetadata.empty()

    async def _delete_files(self, record: AssetRecord) -> None:
        if record.path:
            repository = self.get_repository(record.repository_name)
            await repository.delete(record.path)
        if record.id is not None:
            await self._thumbnails.delete(self.thumbnail_name(record))

    async def _remove_files(self, record: AssetRecord) -> None:
        """Rollback step; logs instead of raising so the original error surfaces."""
        try:
            await self._delete_files(record)
        except Exception as e:
            logger.error(f"Rollback could not remove files of asset {record.id}: {e}")

    async def _discard_record(self, asset_id: Optional[str]) -> None:
        if asset_id is None:
            return
        try:
            await self._record_store.delete(asset_id)
        except Exception as e:
            logger.error(f"Rollback could not delete provisional record {asset_id}: {e}")
        else:
            logger.info(f"Rolled back provisional record {asset_id}")


def create_asset_lifecycle_manager(
    record_store: AssetRecordStore,
    transcoder: Transcoder,
    settings: Optional[AssetSettings] = None,
    registry: Optional[RepositoryRegistry] = None
) -> AssetLifecycleManager:
    """Create asset lifecycle manager."""
    return AssetLifecycleManager(record_store, transcoder, settings, registry)
