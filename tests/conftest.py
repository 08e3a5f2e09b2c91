"""Pytest configuration and fixtures for neo-assets tests."""

import os
import struct
import uuid
from typing import Any, Dict, List, Optional

import pytest

from neo_assets.config.settings import AssetSettings
from neo_assets.platform.assets.application.services.asset_lifecycle_manager import AssetLifecycleManager
from neo_assets.platform.assets.core.entities import AssetRecord, MediaMetadata, UploadedFile
from neo_assets.platform.assets.core.exceptions import AssetNotFound, ThumbnailGenerationFailed, TranscoderError
from neo_assets.platform.assets.core.streams import read_all

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


def fake_png(width: int, height: int = 1) -> bytes:
    """Signature plus an IHDR chunk; enough for width checks."""
    ihdr = struct.pack(">IIBBBBB", width, height, 8, 6, 0, 0, 0)
    return PNG_SIGNATURE + struct.pack(">I", len(ihdr)) + b"IHDR" + ihdr + b"\x00\x00\x00\x00"


def png_width(data: bytes) -> int:
    assert data.startswith(PNG_SIGNATURE)
    return struct.unpack(">I", data[16:20])[0]


class InMemoryAssetRecordStore:
    """Record store kept in a dict; hands out copies like a real database."""

    def __init__(self):
        self.records: Dict[str, AssetRecord] = {}
        self.fail_update = False

    async def insert(self, record: AssetRecord) -> AssetRecord:
        stored = record.copy()
        stored.id = stored.id or uuid.uuid4().hex
        self.records[stored.id] = stored
        return stored.copy()

    async def get(self, asset_id: str) -> Optional[AssetRecord]:
        record = self.records.get(asset_id)
        return AssetRecord.from_dict(record.to_dict()) if record else None

    async def update(self, asset_id: str, values: Dict[str, Any]) -> AssetRecord:
        if self.fail_update:
            raise RuntimeError("database unavailable")
        record = self.records.get(asset_id)
        if record is None:
            raise AssetNotFound(asset_id=asset_id)
        record.apply(values)
        return AssetRecord.from_dict(record.to_dict())

    async def delete(self, asset_id: str) -> Optional[AssetRecord]:
        record = self.records.pop(asset_id, None)
        return AssetRecord.from_dict(record.to_dict()) if record else None

    async def find_all(self) -> List[AssetRecord]:
        return [AssetRecord.from_dict(r.to_dict()) for r in self.records.values()]


class FakeTranscoder:
    """Transcoder double that renders a tiny PNG of the requested width."""

    def __init__(self):
        self.metadata = MediaMetadata(width=1920, height=1080, duration_seconds=12.5, size_bytes=1024)
        self.fail_thumbnail = False
        self.fail_probe = False
        self.thumbnail_calls: List[Dict[str, Any]] = []
        self.probe_calls: List[Optional[str]] = []

    async def probe(self, source, asset_id=None) -> MediaMetadata:
        await read_all(source)
        self.probe_calls.append(asset_id)
        if self.fail_probe:
            raise TranscoderError("ffprobe exited with code 1", return_code=1)
        return self.metadata

    async def generate_thumbnail(self, source, destination_path, target_width, media_type, asset_id=None) -> None:
        content = await read_all(source)
        self.thumbnail_calls.append({
            "asset_id": asset_id,
            "destination_path": destination_path,
            "target_width": target_width,
            "media_type": media_type.value,
            "source_size": len(content),
        })
        if self.fail_thumbnail:
            # Leave a partial output behind like a crashed tool would
            with open(destination_path, "wb") as f:
                f.write(b"partial")
            raise ThumbnailGenerationFailed(asset_id, TranscoderError("ffmpeg exited with code 1"))
        os.makedirs(os.path.dirname(destination_path), exist_ok=True)
        with open(destination_path, "wb") as f:
            f.write(fake_png(target_width))


@pytest.fixture
def settings(tmp_path):
    """Settings with every directory under tmp_path."""
    return AssetSettings(
        _env_file=None,
        asset_root_directory=str(tmp_path / "assets"),
        thumbnail_directory=str(tmp_path / "thumbnails"),
        scratch_directory=str(tmp_path / "scratch"),
        thumbnail_width_pixels=64,
        housekeeping_on_startup=False,
    )


@pytest.fixture
def record_store():
    return InMemoryAssetRecordStore()


@pytest.fixture
def transcoder():
    return FakeTranscoder()


@pytest.fixture
def manager(record_store, transcoder, settings):
    return AssetLifecycleManager(record_store, transcoder, settings)


@pytest.fixture
def make_upload(tmp_path):
    """Factory writing an upload temp file the way the middleware would."""
    incoming = tmp_path / "incoming"
    incoming.mkdir()

    def _make(
        mime_type: str = "image/png",
        content: Optional[bytes] = None,
        original_filename: Optional[str] = None,
        size_bytes: Optional[int] = None
    ) -> UploadedFile:
        content = content if content is not None else b"\x89PNG" + b"\x00" * 1020
        path = incoming / uuid.uuid4().hex
        path.write_bytes(content)
        return UploadedFile(
            temp_path=str(path),
            mime_type=mime_type,
            size_bytes=len(content) if size_bytes is None else size_bytes,
            original_filename=original_filename,
        )

    return _make


@pytest.fixture
def read_png_width():
    return png_width
