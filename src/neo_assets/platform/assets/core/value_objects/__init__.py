"""Asset platform value objects.

Immutable value objects that encapsulate asset-related rules and provide
type safety with validation.
"""

from .mime_type import MimeType

__all__ = [
    "MimeType",
]
