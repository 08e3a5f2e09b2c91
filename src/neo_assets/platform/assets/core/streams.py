"""Byte stream helpers.

Asset content moves between repositories and the transcoder as async
iterators of byte chunks. A stream is produced lazily and can be consumed
once.
"""

from typing import AsyncIterable, AsyncIterator, Iterable, Union

ByteStream = AsyncIterator[bytes]

DEFAULT_CHUNK_SIZE = 64 * 1024


async def iter_bytes(
    data: Union[bytes, Iterable[bytes]],
    chunk_size: int = DEFAULT_CHUNK_SIZE
) -> ByteStream:
    """Wrap in-memory bytes (or an iterable of chunks) as a byte stream."""
    if isinstance(data, (bytes, bytearray, memoryview)):
        view = memoryview(data)
        for offset in range(0, len(view), chunk_size):
            yield bytes(view[offset:offset + chunk_size])
        return
    for chunk in data:
        yield bytes(chunk)


async def read_all(stream: AsyncIterable[bytes]) -> bytes:
    """Drain a byte stream into memory."""
    buffer = bytearray()
    async for chunk in stream:
        buffer.extend(chunk)
    return bytes(buffer)
