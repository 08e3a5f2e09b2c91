"""Asset platform core exceptions.

Domain-specific exceptions for asset operations. Each exception represents
a specific error condition that can occur during the asset lifecycle.
"""

from .asset_not_found import AssetNotFound
from .repository_not_found import RepositoryNotFound
from .repository_already_registered import RepositoryAlreadyRegistered
from .invalid_repository import InvalidRepository
from .invalid_parameters import InvalidParameters
from .upload_too_large import UploadTooLarge
from .unsupported_media_type import UnsupportedMediaType
from .transcoder_error import TranscoderError
from .thumbnail_generation_failed import ThumbnailGenerationFailed
from .missing_assets import MissingAssets
from .operation_disabled import OperationDisabled

__all__ = [
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
]
