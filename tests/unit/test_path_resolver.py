"""Tests for path resolution against a repository root."""

import os

import pytest

from neo_assets.platform.assets.core.exceptions import AssetNotFound, InvalidParameters
from neo_assets.platform.assets.infrastructure.paths import PathResolver, resolve_path


class TestResolvePath:
    """Test resolve_path sandboxing."""

    @pytest.mark.parametrize("path", [
        "a.png",
        "nested/dir/b.mp4",
        "./c.svg",
        "nested/../d.png",
        "nested/./deeper/../e.png",
    ])
    def test_relative_paths_stay_inside_root(self, tmp_path, path):
        root = str(tmp_path)
        resolved = resolve_path(path, root)

        assert resolved.startswith(root + os.sep)
        assert resolved == os.path.normpath(os.path.join(root, path))

    @pytest.mark.parametrize("path", [
        "../outside.png",
        "nested/../../outside.png",
        "a/b/../../../etc/passwd",
    ])
    def test_escaping_relative_paths_are_rejected(self, tmp_path, path):
        with pytest.raises(InvalidParameters) as exc_info:
            resolve_path(path, str(tmp_path))

        assert exc_info.value.params == ["path"]

    def test_absolute_paths_pass_through(self, tmp_path):
        absolute = "/var/tmp/upload-1234"

        assert resolve_path(absolute, str(tmp_path)) == absolute

    def test_empty_path_is_rejected(self, tmp_path):
        with pytest.raises(InvalidParameters):
            resolve_path("", str(tmp_path))

    def test_filesystem_root_accepts_relative_paths(self):
        assert resolve_path("srv/assets/a.png", "/") == os.path.join(os.sep, "srv", "assets", "a.png")

    def test_parent_references_cannot_climb_above_filesystem_root(self):
        assert resolve_path("../a.png", "/") == os.path.join(os.sep, "a.png")

    def test_root_prefix_sibling_is_not_inside_root(self, tmp_path):
        root = tmp_path / "assets"
        with pytest.raises(InvalidParameters):
            resolve_path("../assets-evil/x.png", str(root))


class TestPathResolver:
    """Test PathResolver directory and file checks."""

    @pytest.mark.asyncio
    async def test_ensure_directory_creates_missing_parents(self, tmp_path):
        resolver = PathResolver(str(tmp_path))

        created = await resolver.ensure_directory("a/b/c")

        assert os.path.isdir(created)

    @pytest.mark.asyncio
    async def test_ensure_directory_is_idempotent(self, tmp_path):
        resolver = PathResolver(str(tmp_path))

        await resolver.ensure_directory("a")
        await resolver.ensure_directory("a")

        assert os.path.isdir(tmp_path / "a")

    @pytest.mark.asyncio
    async def test_ensure_directory_fails_when_a_file_is_in_the_way(self, tmp_path):
        (tmp_path / "taken").write_bytes(b"x")
        resolver = PathResolver(str(tmp_path))

        with pytest.raises(OSError):
            await resolver.ensure_directory("taken")

    @pytest.mark.asyncio
    async def test_ensure_file_exists(self, tmp_path):
        (tmp_path / "present.png").write_bytes(b"x")
        resolver = PathResolver(str(tmp_path))

        resolved = await resolver.ensure_file_exists("present.png")

        assert resolved == str(tmp_path / "present.png")

    @pytest.mark.asyncio
    async def test_ensure_file_exists_raises_not_found_with_path(self, tmp_path):
        resolver = PathResolver(str(tmp_path))

        with pytest.raises(AssetNotFound) as exc_info:
            await resolver.ensure_file_exists("missing.png")

        assert exc_info.value.asset_id == str(tmp_path / "missing.png")
        assert exc_info.value.error_code == "NOT_FOUND"

    def test_root_is_required(self):
        with pytest.raises(InvalidParameters):
            PathResolver("")
