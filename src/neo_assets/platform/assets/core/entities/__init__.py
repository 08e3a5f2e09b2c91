"""Asset platform entities."""

from .asset_record import AssetRecord, AssetState, PROTECTED_FIELDS, strip_protected_fields
from .uploaded_file import UploadedFile
from .media_metadata import MediaMetadata

__all__ = [
    "AssetRecord",
    "AssetState",
    "PROTECTED_FIELDS",
    "strip_protected_fields",
    "UploadedFile",
    "MediaMetadata",
]
