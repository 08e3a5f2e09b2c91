"""Repository registry."""

from .repository_registry import RepositoryRegistry, create_repository_registry

__all__ = [
    "RepositoryRegistry",
    "create_repository_registry",
]
