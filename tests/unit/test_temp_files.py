"""Tests for scoped scratch files."""

import os

import pytest

from neo_assets.platform.assets.core.streams import iter_bytes
from neo_assets.platform.assets.infrastructure.temp_files import materialized, scratch_path


class TestMaterialized:
    """Test that scratch copies are removed on every exit path."""

    @pytest.mark.asyncio
    async def test_file_exists_inside_block_and_is_removed_after(self, tmp_path):
        async with materialized(iter_bytes(b"media bytes"), str(tmp_path), ".mp4") as path:
            assert path.endswith(".mp4")
            with open(path, "rb") as f:
                assert f.read() == b"media bytes"

        assert not os.path.exists(path)

    @pytest.mark.asyncio
    async def test_file_is_removed_when_block_raises(self, tmp_path):
        with pytest.raises(RuntimeError):
            async with materialized(iter_bytes(b"x"), str(tmp_path)) as path:
                raise RuntimeError("tool crashed")

        assert not os.path.exists(path)

    @pytest.mark.asyncio
    async def test_file_is_removed_when_source_fails(self, tmp_path):
        async def broken():
            yield b"partial"
            raise IOError("read failed")

        with pytest.raises(IOError):
            async with materialized(broken(), str(tmp_path)):
                pass

        assert os.listdir(tmp_path) == []


class TestScratchPath:
    """Test reserved scratch paths."""

    @pytest.mark.asyncio
    async def test_creates_directory_and_removes_file(self, tmp_path):
        scratch_dir = tmp_path / "missing" / "scratch"

        async with scratch_path(str(scratch_dir), ".png") as path:
            assert os.path.exists(path)
            assert path.endswith(".png")
            assert os.path.dirname(path) == str(scratch_dir)

        assert not os.path.exists(path)

    @pytest.mark.asyncio
    async def test_moved_away_file_is_not_an_error(self, tmp_path):
        async with scratch_path(str(tmp_path)) as path:
            os.rename(path, str(tmp_path / "kept"))

        assert (tmp_path / "kept").exists()
