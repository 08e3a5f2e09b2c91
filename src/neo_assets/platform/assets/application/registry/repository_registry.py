"""Repository registry.

ONLY repository lookup - name-keyed registry of storage backends, validated
at registration time. Owned by the lifecycle manager instance and shared by
reference with the services that need repository access.
"""

import logging
from typing import Dict, Iterator, List, Optional

from ...core.exceptions import (
    InvalidParameters,
    InvalidRepository,
    RepositoryAlreadyRegistered,
    RepositoryNotFound,
)
from ...core.protocols.asset_repository import AssetRepository, missing_operations

logger = logging.getLogger(__name__)


class RepositoryRegistry:
    """Name-keyed asset repository registry."""

    def __init__(self):
        self._repositories: Dict[str, AssetRepository] = {}

    def register(self, name: str, repository: AssetRepository) -> AssetRepository:
        """Register a repository under a unique name.

        Raises:
            InvalidParameters: If ``name`` is empty
            RepositoryAlreadyRegistered: If ``name`` is taken
            InvalidRepository: If ``repository`` lacks any of the
                read/write/move/delete/ensure_exists coroutines
        """
        if not name:
            raise InvalidParameters(["name"], message="Repository name is required")
        if name in self._repositories:
            raise RepositoryAlreadyRegistered(name)

        missing = missing_operations(repository)
        if missing:
            raise InvalidRepository(name, missing)

        self._repositories[name] = repository
        logger.debug(f"Registered asset repository '{name}': {repository!r}")
        return repository

    def get(self, name: Optional[str]) -> AssetRepository:
        try:
            return self._repositories[name]
        except KeyError:
            raise RepositoryNotFound(name, available=self.names()) from None

    def names(self) -> List[str]:
        return list(self._repositories)

    def __contains__(self, name: object) -> bool:
        return name in self._repositories

    def __iter__(self) -> Iterator[str]:
        return iter(self._repositories)

    def __len__(self) -> int:
        return len(self._repositories)


def create_repository_registry() -> RepositoryRegistry:
    """Create an empty repository registry."""
    return RepositoryRegistry()
