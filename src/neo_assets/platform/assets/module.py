"""Assets module wiring.

Builds the lifecycle manager, housekeeping and serving services from
settings and a record store, and runs housekeeping at startup.
"""

import logging
from typing import Optional

from ...__version__ import __version__
from .application.services.asset_lifecycle_manager import AssetLifecycleManager
from .application.services.asset_serving_service import AssetServingService
from .application.services.housekeeping_service import HousekeepingReport, HousekeepingService
from .core.protocols.asset_record_store import AssetRecordStore
from .core.protocols.asset_repository import AssetRepository
from .core.protocols.transcoder import Transcoder
from .infrastructure.transcoders.ffmpeg_transcoder import FFmpegTranscoder
from ...config.settings import AssetSettings, get_settings

logger = logging.getLogger(__name__)


class AssetsModule:
    """Assets module.

    Provides:
    - Asset lifecycle manager with the default local repository registered
    - Housekeeping service (startup run, optional schedule)
    - Serving service for primary files and thumbnails
    """

    def __init__(
        self,
        record_store: AssetRecordStore,
        settings: Optional[AssetSettings] = None,
        transcoder: Optional[Transcoder] = None
    ):
        self._settings = settings or get_settings()
        self._transcoder = transcoder or FFmpegTranscoder(self._settings)
        self.lifecycle = AssetLifecycleManager(record_store, self._transcoder, self._settings)
        self.housekeeping = HousekeepingService(self.lifecycle)
        self.serving = AssetServingService(self.lifecycle)
        self._started = False

    def get_name(self) -> str:
        """Get module name."""
        return "assets"

    def get_version(self) -> str:
        """Get module version."""
        return __version__

    @property
    def settings(self) -> AssetSettings:
        return self._settings

    @property
    def is_started(self) -> bool:
        return self._started

    def register_repository(self, name: str, repository: AssetRepository) -> AssetRepository:
        return self.lifecycle.register_repository(name, repository)

    async def start(self) -> Optional[HousekeepingReport]:
        """Run startup housekeeping and start the schedule if configured.

        Housekeeping failures are logged; they never stop startup.
        """
        report = None
        if self._settings.housekeeping_on_startup:
            try:
                report = await self.housekeeping.run()
            except Exception as e:
                logger.error(f"Startup housekeeping failed: {e}")

        if self._settings.housekeeping_interval_seconds:
            await self.housekeeping.start(self._settings.housekeeping_interval_seconds)

        self._started = True
        logger.info(f"Assets module started (repositories: {', '.join(self.lifecycle.registry.names())})")
        return report

    async def stop(self) -> None:
        await self.housekeeping.stop()
        self._started = False
        logger.info("Assets module stopped")


def create_assets_module(
    record_store: AssetRecordStore,
    settings: Optional[AssetSettings] = None,
    transcoder: Optional[Transcoder] = None
) -> AssetsModule:
    """Create assets module."""
    return AssetsModule(record_store, settings, transcoder)
