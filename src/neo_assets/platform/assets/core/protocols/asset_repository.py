"""Asset repository protocol.

ONLY storage backend contract - the capability interface every storage
backend (local filesystem, remote object stores) implements.
"""

import inspect
from abc import ABC, abstractmethod
from typing import AsyncIterable, List

from typing_extensions import Protocol, runtime_checkable

from ..exceptions import AssetNotFound
from ..streams import ByteStream

# Operations a backend must provide as coroutine functions
REQUIRED_OPERATIONS = ("read", "write", "move", "delete", "ensure_exists")


@runtime_checkable
class AssetRepository(Protocol):
    """Asset repository protocol.

    Paths are repository-relative. Every operation is a coroutine.
    """

    name: str

    async def read(self, path: str) -> ByteStream:
        """Open a file for reading.

        Returns:
            A lazily produced byte stream, readable once

        Raises:
            AssetNotFound: If nothing exists at ``path``
        """
        ...

    async def write(self, stream: AsyncIterable[bytes], path: str) -> None:
        """Drain ``stream`` into ``path``, creating parent directories.

        A failure part-way through propagates and leaves the partial file
        in place; cleaning it up is the caller's job.
        """
        ...

    async def move(self, old_path: str, new_path: str) -> None:
        """Move a file, creating destination parent directories.

        Raises:
            AssetNotFound: If nothing exists at ``old_path``
        """
        ...

    async def delete(self, path: str) -> None:
        """Delete a file. Deleting a missing file is not an error."""
        ...

    async def ensure_exists(self, path: str) -> None:
        """Check a file exists.

        Raises:
            AssetNotFound: If nothing exists at ``path``
        """
        ...


def missing_operations(candidate: object) -> List[str]:
    """List the repository operations ``candidate`` lacks or defines as plain functions."""
    missing = []
    for operation in REQUIRED_OPERATIONS:
        method = getattr(candidate, operation, None)
        if method is None or not inspect.iscoroutinefunction(method):
            missing.append(operation)
    return missing


class BaseAssetRepository(ABC):
    """Base class for concrete repositories."""

    def __init__(self, name: str):
        self.name = name

    @abstractmethod
    async def read(self, path: str) -> ByteStream:
        pass

    @abstractmethod
    async def write(self, stream: AsyncIterable[bytes], path: str) -> None:
        pass

    @abstractmethod
    async def move(self, old_path: str, new_path: str) -> None:
        pass

    @abstractmethod
    async def delete(self, path: str) -> None:
        pass

    @abstractmethod
    async def ensure_exists(self, path: str) -> None:
        pass

    async def exists(self, path: str) -> bool:
        """Boolean form of ``ensure_exists``."""
        try:
            await self.ensure_exists(path)
        except AssetNotFound:
            return False
        return True

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name='{self.name}')"
