"""Asset platform application layer.

Registry, validators and the services that orchestrate the asset
lifecycle.
"""

from .registry import RepositoryRegistry, create_repository_registry
from .validators import UploadValidator, UploadValidatorConfig, create_upload_validator
from .services import *

__all__ = [
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
]
