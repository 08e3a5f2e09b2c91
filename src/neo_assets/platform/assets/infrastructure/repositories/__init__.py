"""Concrete asset repositories."""

from .local_filesystem_repository import LocalFilesystemRepository, create_local_repository

__all__ = [
    "LocalFilesystemRepository",
    "create_local_repository",
]
