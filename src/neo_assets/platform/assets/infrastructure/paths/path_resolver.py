"""Path resolver.

ONLY path resolution - maps repository-relative paths onto a root
directory without ever leaving it, and creates/checks the directories and
files those paths point at.
"""

import errno
import logging
import os

import aiofiles.os

from ...core.exceptions import AssetNotFound, InvalidParameters

logger = logging.getLogger(__name__)


def resolve_path(path: str, root_dir: str) -> str:
    """Resolve ``path`` against ``root_dir``.

    Absolute paths are returned unchanged. This is a trust boundary: only
    middleware-owned temp files and the configured roots are ever passed
    in absolute form, never anything derived from client input.

    Raises:
        InvalidParameters: If ``path`` is empty or a relative path
            normalizes to a location outside ``root_dir``
    """
    if not path:
        raise InvalidParameters(["path"], message="Path is required")

    if os.path.isabs(path):
        return path

    root = os.path.abspath(root_dir)
    resolved = os.path.normpath(os.path.join(root, path))
    if os.path.commonpath([root, resolved]) != root:
        raise InvalidParameters(
            ["path"],
            message=f"Path escapes repository root: {path}",
            details={"root_dir": root}
        )
    return resolved


class PathResolver:
    """Resolves paths against a fixed root directory."""

    def __init__(self, root_dir: str):
        if not root_dir:
            raise InvalidParameters(["root_dir"], message="Root directory is required")
        self._root_dir = os.path.abspath(root_dir)

    @property
    def root_dir(self) -> str:
        return self._root_dir

    def resolve(self, path: str) -> str:
        return resolve_path(path, self._root_dir)

    async def ensure_directory(self, path: str) -> str:
        """Create a directory and any missing parents.

        An existing directory counts as success; any other failure
        propagates.
        """
        resolved = self.resolve(path)
        try:
            await aiofiles.os.makedirs(resolved)
        except FileExistsError:
            if not await aiofiles.os.path.isdir(resolved):
                raise
        else:
            logger.debug(f"Created directory {resolved}")
        return resolved

    async def ensure_parent_directory(self, path: str) -> str:
        """Create the directory holding ``path``; returns the resolved file path."""
        resolved = self.resolve(path)
        await self.ensure_directory(os.path.dirname(resolved))
        return resolved

    async def ensure_file_exists(self, path: str) -> str:
        """Check a file exists.

        Raises:
            AssetNotFound: If nothing exists at the resolved path. Any other
                OSError propagates unchanged.
        """
        resolved = self.resolve(path)
        try:
            await aiofiles.os.stat(resolved)
        except OSError as e:
            if e.errno == errno.ENOENT:
                raise AssetNotFound(
                    message=f"File not found: {resolved}",
                    asset_id=resolved
                ) from e
            raise
        return resolved

    def __repr__(self) -> str:
        return f"PathResolver(root_dir='{self._root_dir}')"
