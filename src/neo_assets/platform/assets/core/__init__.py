"""Asset platform core domain layer.

Value objects, entities, exceptions and protocols. No I/O.
"""

from .entities import *
from .value_objects import *
from .exceptions import *
from .protocols import *
from .streams import ByteStream, iter_bytes, read_all

__all__ = [
    # Entities
    "AssetRecord",
    "AssetState",
    "UploadedFile",
    "MediaMetadata",
    "strip_protected_fields",

    # Value Objects
    "MimeType",

    # Exceptions
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

    # Protocols
    "AssetRepository",
    "BaseAssetRepository",
    "Transcoder",
    "AssetRecordStore",

    # Streams
    "ByteStream",
    "iter_bytes",
    "read_all",
]
