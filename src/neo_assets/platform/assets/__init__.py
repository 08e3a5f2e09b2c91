"""Asset platform module.

Pluggable asset repositories, the local filesystem implementation, the
ffmpeg transcoder, and the lifecycle, housekeeping and serving services.

Usage:
    module = AssetsModule(record_store)
    await module.start()
    record = await module.lifecycle.create_asset({"title": "Logo"}, upload)
    served = await module.serving.open(record.id, thumbnail=True)
"""

from .core import *
from .application import *
from .infrastructure import *
from .module import AssetsModule, create_assets_module

__all__ = [
    # Core
    "AssetRecord",
    "AssetState",
    "UploadedFile",
    "MediaMetadata",
    "strip_protected_fields",
    "MimeType",
    "AssetNotFound",
    "RepositoryNotFound",
    "RepositoryAlreadyRegistered",
    "InvalidRepository",
    "InvalidParameters",
    "UploadTooLarge",
    "UnsupportedMediaType",
    "TranscoderError",
    "ThumbnailGenerationFailed",
    "MissingAssets",
    "OperationDisabled",
    "AssetRepository",
    "BaseAssetRepository",
    "Transcoder",
    "AssetRecordStore",
    "ByteStream",
    "iter_bytes",
    "read_all",

    # Application
    "RepositoryRegistry",
    "create_repository_registry",
    "UploadValidator",
    "UploadValidatorConfig",
    "create_upload_validator",
    "AssetLifecycleManager",
    "create_asset_lifecycle_manager",
    "HousekeepingReport",
    "HousekeepingService",
    "create_housekeeping_service",
    "AssetServingService",
    "ServedAsset",
    "create_asset_serving_service",

    # Infrastructure
    "PathResolver",
    "resolve_path",
    "LocalFilesystemRepository",
    "create_local_repository",
    "materialized",
    "scratch_path",
    "FFmpegTranscoder",
    "create_ffmpeg_transcoder",
    "parse_probe_output",

    # Module
    "AssetsModule",
    "create_assets_module",
]
