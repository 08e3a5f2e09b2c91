"""Asset platform application services."""

from .asset_lifecycle_manager import AssetLifecycleManager, create_asset_lifecycle_manager
from .housekeeping_service import HousekeepingReport, HousekeepingService, create_housekeeping_service
from .asset_serving_service import AssetServingService, ServedAsset, create_asset_serving_service

__all__ = [
    "AssetLifecycleManager",
    "create_asset_lifecycle_manager",
    "HousekeepingReport",
    "HousekeepingService",
    "create_housekeeping_service",
    "AssetServingService",
    "ServedAsset",
    "create_asset_serving_service",
]
