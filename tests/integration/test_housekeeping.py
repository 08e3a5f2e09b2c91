"""Integration tests for housekeeping scans."""

import asyncio
import os

import pytest

from neo_assets.platform.assets.application.services import HousekeepingService
from neo_assets.platform.assets.core.entities import AssetRecord
from neo_assets.platform.assets.core.exceptions import AssetNotFound, MissingAssets, RepositoryNotFound


@pytest.fixture
def housekeeping(manager):
    return HousekeepingService(manager)


class TestHousekeepingService:
    """Test verification and thumbnail regeneration."""

    @pytest.mark.asyncio
    async def test_verify_passes_when_all_files_exist(self, housekeeping, manager, make_upload):
        await manager.create_asset(None, make_upload())
        await manager.create_asset(None, make_upload("application/pdf"))

        assert await housekeeping.verify_assets() == 2

    @pytest.mark.asyncio
    async def test_verify_collects_every_missing_file(self, housekeeping, manager, settings, make_upload):
        first = await manager.create_asset(None, make_upload())
        second = await manager.create_asset(None, make_upload())
        kept = await manager.create_asset(None, make_upload())
        for record in (first, second):
            os.remove(os.path.join(settings.asset_root_directory, record.path))

        with pytest.raises(MissingAssets) as exc_info:
            await housekeeping.verify_assets()

        assert sorted(exc_info.value.asset_ids) == sorted([first.id, second.id])
        assert kept.id not in exc_info.value.asset_ids
        assert all(isinstance(e, AssetNotFound) for e in exc_info.value.errors)

    @pytest.mark.asyncio
    async def test_verify_isolates_configuration_failures(self, housekeeping, record_store):
        await record_store.insert(AssetRecord(repository_name="gone", path="x.png", type="image", subtype="png"))
        await record_store.insert(AssetRecord(repository_name="local", path="y.png", type="image", subtype="png"))

        with pytest.raises(MissingAssets) as exc_info:
            await housekeeping.verify_assets()

        kinds = sorted(type(e).__name__ for e in exc_info.value.errors)
        assert kinds == [AssetNotFound.__name__, RepositoryNotFound.__name__]

    @pytest.mark.asyncio
    async def test_records_without_path_are_skipped(self, housekeeping, record_store):
        await record_store.insert(AssetRecord(attributes={"title": "provisional"}))

        assert await housekeeping.verify_assets() == 0

    @pytest.mark.asyncio
    async def test_regenerates_exactly_one_missing_thumbnail(
        self, housekeeping, manager, record_store, transcoder, make_upload
    ):
        missing = await manager.create_asset(None, make_upload())
        await manager.create_asset(None, make_upload())
        os.remove(manager.thumbnail_path(missing))
        before = record_store.records[missing.id].to_dict()
        calls = len(transcoder.thumbnail_calls)

        scheduled = await housekeeping.regenerate_thumbnails()
        await housekeeping.wait_for_pending()

        assert scheduled == [missing.id]
        assert len(transcoder.thumbnail_calls) == calls + 1
        assert transcoder.thumbnail_calls[-1]["asset_id"] == missing.id
        assert os.path.exists(manager.thumbnail_path(missing))
        assert record_store.records[missing.id].to_dict() == before

    @pytest.mark.asyncio
    async def test_skips_regeneration_when_primary_is_missing(
        self, housekeeping, manager, settings, transcoder, make_upload
    ):
        record = await manager.create_asset(None, make_upload())
        os.remove(manager.thumbnail_path(record))
        os.remove(os.path.join(settings.asset_root_directory, record.path))
        calls = len(transcoder.thumbnail_calls)

        assert await housekeeping.regenerate_thumbnails() == []
        assert len(transcoder.thumbnail_calls) == calls

    @pytest.mark.asyncio
    async def test_background_failures_are_only_logged(
        self, housekeeping, manager, transcoder, make_upload, caplog
    ):
        record = await manager.create_asset(None, make_upload())
        os.remove(manager.thumbnail_path(record))
        transcoder.fail_thumbnail = True

        scheduled = await housekeeping.regenerate_thumbnails()
        await housekeeping.wait_for_pending()

        assert scheduled == [record.id]
        assert housekeeping.pending_count == 0
        assert "Could not regenerate thumbnail" in caplog.text

    @pytest.mark.asyncio
    async def test_failed_regeneration_leaves_no_thumbnail_and_is_retried(
        self, housekeeping, manager, settings, transcoder, make_upload
    ):
        record = await manager.create_asset(None, make_upload())
        os.remove(manager.thumbnail_path(record))
        transcoder.fail_thumbnail = True

        await housekeeping.regenerate_thumbnails()
        await housekeeping.wait_for_pending()

        assert not await manager.thumbnail_exists(record)
        assert os.listdir(settings.scratch_directory) == []

        transcoder.fail_thumbnail = False
        assert await housekeeping.regenerate_thumbnails() == [record.id]
        await housekeeping.wait_for_pending()
        assert await manager.thumbnail_exists(record)

    @pytest.mark.asyncio
    async def test_run_reports_instead_of_raising(self, housekeeping, manager, settings, make_upload):
        gone = await manager.create_asset(None, make_upload())
        thumbless = await manager.create_asset(None, make_upload())
        os.remove(os.path.join(settings.asset_root_directory, gone.path))
        os.remove(manager.thumbnail_path(thumbless))

        report = await housekeeping.run()
        await housekeeping.wait_for_pending()

        assert report.checked == 2
        assert report.missing == [gone.id]
        assert report.scheduled == [thumbless.id]
        assert not report.is_clean

    @pytest.mark.asyncio
    async def test_periodic_schedule(self, housekeeping, mocker):
        run = mocker.patch.object(housekeeping, "run", mocker.AsyncMock())

        await housekeeping.start(0.01)
        await asyncio.sleep(0.05)
        await housekeeping.stop()

        assert run.await_count >= 1
        assert not housekeeping.is_running

    @pytest.mark.asyncio
    async def test_start_requires_interval(self, housekeeping):
        with pytest.raises(ValueError):
            await housekeeping.start()
