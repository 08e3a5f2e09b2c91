"""Scoped temporary files.

ONLY temp materialization - copies a byte stream to a local scratch file
for tools that need a real path, and removes the file on every exit path.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterable, AsyncIterator, Optional

import aiofiles
import aiofiles.os
import aiofiles.tempfile

logger = logging.getLogger(__name__)


@asynccontextmanager
async def scratch_path(scratch_dir: str, suffix: str = "") -> AsyncIterator[str]:
    """Reserve an empty scratch file path, deleted on exit."""
    await aiofiles.os.makedirs(scratch_dir, exist_ok=True)
    async with aiofiles.tempfile.NamedTemporaryFile(
        "wb", suffix=suffix, dir=scratch_dir, delete=False
    ) as reserved:
        path = reserved.name
    try:
        yield path
    finally:
        try:
            await aiofiles.os.remove(path)
        except FileNotFoundError:
            pass
        except OSError as e:
            logger.warning(f"Failed to remove scratch file {path}: {e}")


@asynccontextmanager
async def materialized(
    stream: AsyncIterable[bytes],
    scratch_dir: str,
    suffix: Optional[str] = None
) -> AsyncIterator[str]:
    """Drain ``stream`` into a scratch file and yield its path.

    The file is removed when the block exits, whether it succeeded or
    raised, and also when draining the stream fails.
    """
    async with scratch_path(scratch_dir, suffix or "") as path:
        async with aiofiles.open(path, "wb") as f:
            async for chunk in stream:
                await f.write(chunk)
        yield path
