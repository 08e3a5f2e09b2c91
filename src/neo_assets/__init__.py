"""Neo-Assets - media asset storage for the NeoMultiTenant platform.

Stores uploaded media files through pluggable repositories, renders
thumbnails and extracts metadata with ffmpeg, and keeps asset records,
primary files and thumbnails consistent across create, replace and delete.

Logging is not configured on import; call ``setup_logging()`` at startup.
"""

from .__version__ import __version__

from .config import (
    AssetSettings,
    get_settings,
    setup_logging,
    LoggingConfig,
)

from .core.exceptions import (
    # Base Exception
    AssetsError,
    ConfigurationError,

    # Utility Functions
    get_http_status_code,
    create_error_response,
)

from .platform.assets import (
    # Entities and value objects
    AssetRecord,
    AssetState,
    UploadedFile,
    MediaMetadata,
    MimeType,

    # Exceptions
    AssetNotFound,
    RepositoryNotFound,
    RepositoryAlreadyRegistered,
    InvalidRepository,
    InvalidParameters,
    UploadTooLarge,
    UnsupportedMediaType,
    TranscoderError,
    ThumbnailGenerationFailed,
    MissingAssets,
    OperationDisabled,

    # Protocols
    AssetRepository,
    BaseAssetRepository,
    AssetRecordStore,
    Transcoder,

    # Implementations and services
    PathResolver,
    LocalFilesystemRepository,
    FFmpegTranscoder,
    RepositoryRegistry,
    AssetLifecycleManager,
    HousekeepingService,
    HousekeepingReport,
    AssetServingService,
    ServedAsset,
    AssetsModule,
    create_assets_module,
)

__all__ = [
    "__version__",

    # Configuration
    "AssetSettings",
    "get_settings",
    "setup_logging",
    "LoggingConfig",

    # Exceptions
    "AssetsError",
    "ConfigurationError",
    "get_http_status_code",
    "create_error_response",
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

    # Domain
    "AssetRecord",
    "AssetState",
    "UploadedFile",
    "MediaMetadata",
    "MimeType",

    # Protocols
    "AssetRepository",
    "BaseAssetRepository",
    "AssetRecordStore",
    "Transcoder",

    # Implementations and services
    "PathResolver",
    "LocalFilesystemRepository",
    "FFmpegTranscoder",
    "RepositoryRegistry",
    "AssetLifecycleManager",
    "HousekeepingService",
    "HousekeepingReport",
    "AssetServingService",
    "ServedAsset",
    "AssetsModule",
    "create_assets_module",
]
