"""Local filesystem asset repository.

ONLY local disk storage - implements the asset repository contract against
a root directory on the local filesystem with aiofiles streaming I/O.
"""

import errno
import logging
import os
import shutil
from typing import AsyncIterable, Optional

import aiofiles
import aiofiles.os

from ...core.exceptions import AssetNotFound
from ...core.protocols.asset_repository import BaseAssetRepository
from ...core.streams import ByteStream, DEFAULT_CHUNK_SIZE
from ..paths.path_resolver import PathResolver

logger = logging.getLogger(__name__)


class LocalFilesystemRepository(BaseAssetRepository):
    """Asset repository backed by a local directory.

    The root directory is created at construction. Relative paths resolve
    inside it; absolute paths are used as-is (upload temp files only).
    """

    def __init__(
        self,
        name: str,
        root_dir: str,
        chunk_size: int = DEFAULT_CHUNK_SIZE
    ):
        super().__init__(name)
        if chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")
        self._resolver = PathResolver(root_dir)
        self._chunk_size = chunk_size
        os.makedirs(self._resolver.root_dir, exist_ok=True)

    @property
    def root_dir(self) -> str:
        return self._resolver.root_dir

    def resolve_path(self, path: str) -> str:
        return self._resolver.resolve(path)

    async def ensure_directory(self, path: str) -> str:
        return await self._resolver.ensure_directory(path)

    async def read(self, path: str) -> ByteStream:
        resolved = await self._ensure_file(path)
        return self._stream_file(resolved)

    async def _stream_file(self, resolved: str) -> ByteStream:
        async with aiofiles.open(resolved, "rb") as f:
            while True:
                chunk = await f.read(self._chunk_size)
                if not chunk:
                    break
                yield chunk

    async def write(self, stream: AsyncIterable[bytes], path: str) -> None:
        resolved = await self._resolver.ensure_parent_directory(path)
        written = 0
        async with aiofiles.open(resolved, "wb") as f:
            async for chunk in stream:
                await f.write(chunk)
                written += len(chunk)
        logger.debug(f"Wrote {written} bytes to {resolved} in repository '{self.name}'")

    async def move(self, old_path: str, new_path: str) -> None:
        source = await self._ensure_file(old_path)
        destination = await self._resolver.ensure_parent_directory(new_path)
        try:
            await aiofiles.os.rename(source, destination)
        except OSError as e:
            if e.errno != errno.EXDEV:
                raise
            # Different devices: fall back to copy then delete
            await self._copy_across_devices(source, destination)
        logger.debug(f"Moved {source} to {destination} in repository '{self.name}'")

    async def _copy_across_devices(self, source: str, destination: str) -> None:
        await self.write(self._stream_file(source), destination)
        shutil.copystat(source, destination)
        await aiofiles.os.remove(source)

    async def delete(self, path: str) -> None:
        resolved = self._resolver.resolve(path)
        try:
            await aiofiles.os.remove(resolved)
        except FileNotFoundError:
            logger.debug(f"Delete of missing file {resolved} treated as done")
            return
        logger.debug(f"Deleted {resolved} from repository '{self.name}'")

    async def ensure_exists(self, path: str) -> None:
        await self._ensure_file(path)

    async def _ensure_file(self, path: str) -> str:
        try:
            return await self._resolver.ensure_file_exists(path)
        except AssetNotFound as e:
            e.repository_name = self.name
            e.details["repository_name"] = self.name
            raise

    def __repr__(self) -> str:
        return f"LocalFilesystemRepository(name='{self.name}', root_dir='{self.root_dir}')"


def create_local_repository(
    name: str,
    root_dir: str,
    chunk_size: Optional[int] = None
) -> LocalFilesystemRepository:
    """Create local filesystem repository."""
    return LocalFilesystemRepository(name, root_dir, chunk_size or DEFAULT_CHUNK_SIZE)
