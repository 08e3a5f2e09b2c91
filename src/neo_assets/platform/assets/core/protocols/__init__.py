"""Asset platform core protocols.

Contracts for the collaborators the asset lifecycle depends on: storage
backends, the media tool and record persistence.
"""

from .asset_repository import (
    AssetRepository,
    BaseAssetRepository,
    REQUIRED_OPERATIONS,
    missing_operations,
)
from .transcoder import Transcoder
from .asset_record_store import AssetRecordStore

__all__ = [
    "AssetRepository",
    "BaseAssetRepository",
    "REQUIRED_OPERATIONS",
    "missing_operations",
    "Transcoder",
    "AssetRecordStore",
]
