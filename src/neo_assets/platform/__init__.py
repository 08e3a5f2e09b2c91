"""Neo-Assets Platform Modules.

Modules:
- assets: Asset storage, thumbnails, metadata and housekeeping

Each module follows maximum separation architecture with:
- Clean domain entities and value objects
- Protocol-based dependency injection
- Application services
- Infrastructure adapters and repositories
"""

from . import assets

__all__ = [
    "assets",
]
