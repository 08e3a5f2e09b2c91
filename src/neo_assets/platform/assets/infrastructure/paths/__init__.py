"""Path resolution for filesystem-backed repositories."""

from .path_resolver import PathResolver, resolve_path

__all__ = [
    "PathResolver",
    "resolve_path",
]
