"""Housekeeping service.

ONLY self-healing scans - verifies every known asset's primary file still
exists and regenerates missing thumbnails in the background. Runs once at
startup and optionally on an interval.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import List, Optional, Set, Tuple

from ...core.entities.asset_record import AssetRecord
from ...core.exceptions import AssetNotFound, MissingAssets
from ...core.protocols.asset_record_store import AssetRecordStore
from .asset_lifecycle_manager import AssetLifecycleManager

logger = logging.getLogger(__name__)


@dataclass
class HousekeepingReport:
    """Outcome of one housekeeping run."""

    checked: int = 0
    missing: List[str] = field(default_factory=list)
    scheduled: List[str] = field(default_factory=list)

    @property
    def is_clean(self) -> bool:
        return not self.missing and not self.scheduled


class HousekeepingService:
    """Reconciles asset records against the files that back them.

    Every per-asset check is independent: one failing check never stops
    the others (settle-all, then collect).
    """

    def __init__(
        self,
        lifecycle_manager: AssetLifecycleManager,
        record_store: Optional[AssetRecordStore] = None
    ):
        self._manager = lifecycle_manager
        self._record_store = record_store or lifecycle_manager.record_store
        self._pending: Set[asyncio.Task] = set()
        self._background_task: Optional[asyncio.Task] = None
        self._running = False

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    @property
    def is_running(self) -> bool:
        return self._running

    async def verify_assets(self, records: Optional[List[AssetRecord]] = None) -> int:
        """Check every record's primary file exists.

        Records without a path (never committed) are skipped.

        Returns:
            Number of files checked

        Raises:
            MissingAssets: If any check failed, with every failure collected
        """
        if records is None:
            records = await self._record_store.find_all()
        targets = [record for record in records if record.path]

        results = await asyncio.gather(
            *(self._verify(record) for record in targets),
            return_exceptions=True
        )
        failures: List[Tuple[AssetRecord, BaseException]] = [
            (record, result)
            for record, result in zip(targets, results)
            if isinstance(result, BaseException)
        ]
        if failures:
            raise MissingAssets(
                [error for _, error in failures],
                asset_ids=[record.id for record, _ in failures]
            )
        return len(targets)

    async def _verify(self, record: AssetRecord) -> None:
        repository = self._manager.get_repository(record.repository_name)
        await repository.ensure_exists(record.path)

    async def regenerate_thumbnails(self, records: Optional[List[AssetRecord]] = None) -> List[str]:
        """Schedule background regeneration of missing thumbnails.

        Only records flagged ``has_thumbnail`` whose primary file is still
        present are scheduled; the rest are logged.

        Returns:
            Ids of the records scheduled for regeneration
        """
        if records is None:
            records = await self._record_store.find_all()
        candidates = [record for record in records if record.has_thumbnail and record.path]

        results = await asyncio.gather(
            *(self._check_thumbnail(record) for record in candidates),
            return_exceptions=True
        )

        scheduled = []
        for record, result in zip(candidates, results):
            if isinstance(result, BaseException):
                logger.error(f"Thumbnail check failed for asset {record.id}: {result}")
            elif result:
                scheduled.append(record.id)
        return scheduled

    async def _check_thumbnail(self, record: AssetRecord) -> bool:
        if await self._manager.thumbnail_exists(record):
            return False

        repository = self._manager.get_repository(record.repository_name)
        try:
            await repository.ensure_exists(record.path)
        except AssetNotFound:
            logger.warning(
                f"Thumbnail of asset {record.id} is missing but so is its file; not regenerating"
            )
            return False

        self._schedule(record)
        return True

    def _schedule(self, record: AssetRecord) -> None:
        task = asyncio.create_task(self._regenerate(record))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def _regenerate(self, record: AssetRecord) -> None:
        # Fire-and-forget: failures are logged only
        try:
            await self._manager.generate_thumbnail(record)
        except Exception as e:
            logger.warning(f"Could not regenerate thumbnail for asset {record.id}: {e}")

    async def wait_for_pending(self) -> None:
        """Wait for scheduled thumbnail regenerations to finish."""
        while self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)

    async def run(self) -> HousekeepingReport:
        """Run both scans. Missing files are logged, never raised."""
        records = await self._record_store.find_all()
        report = HousekeepingReport(checked=sum(1 for record in records if record.path))

        try:
            await self.verify_assets(records)
        except MissingAssets as e:
            report.missing = e.asset_ids
            logger.error(f"Housekeeping: {e.message}")
            for asset_id, error in zip(e.asset_ids, e.errors):
                logger.error(f"Housekeeping: asset {asset_id}: {error}")

        report.scheduled = await self.regenerate_thumbnails(records)

        logger.info(
            f"Housekeeping checked {report.checked} asset(s): "
            f"{len(report.missing)} missing, {len(report.scheduled)} thumbnail(s) scheduled"
        )
        return report

    async def start(self, interval_seconds: Optional[float] = None) -> None:
        """Start running housekeeping every ``interval_seconds``."""
        interval = interval_seconds or self._manager.settings.housekeeping_interval_seconds
        if not interval or interval <= 0:
            raise ValueError("A positive housekeeping interval is required")
        if not self._running:
            self._running = True
            self._background_task = asyncio.create_task(self._scheduler_loop(interval))

    async def _scheduler_loop(self, interval: float) -> None:
        while self._running:
            await asyncio.sleep(interval)
            try:
                await self.run()
            except Exception as e:
                logger.error(f"Scheduled housekeeping failed: {e}")

    async def stop(self) -> None:
        """Stop the schedule and wait for pending regenerations."""
        self._running = False
        if self._background_task:
            self._background_task.cancel()
            try:
                await self._background_task
            except asyncio.CancelledError:
                pass
            self._background_task = None
        await self.wait_for_pending()


def create_housekeeping_service(
    lifecycle_manager: AssetLifecycleManager,
    record_store: Optional[AssetRecordStore] = None
) -> HousekeepingService:
    """Create housekeeping service."""
    return HousekeepingService(lifecycle_manager, record_store)
