"""HTTP status code mapping for exceptions.

Maps exception categories to HTTP status codes for the API layer that
wraps neo-assets. Lookups walk the exception's MRO so platform
exceptions resolve through the category they inherit from.
"""

from typing import Any, Dict, Optional, Type

from .base import AssetsError, ConfigurationError
from .domain import (
    ResourceNotFoundError,
    ValidationError,
    PayloadTooLargeError,
    UnsupportedMediaTypeError,
    RegistrationError,
    ExternalToolError,
    OperationNotAllowedError,
    AggregateError,
)


HTTP_STATUS_MAP = {
    # 400 Bad Request
    ValidationError: 400,

    # 404 Not Found
    ResourceNotFoundError: 404,

    # 405 Method Not Allowed
    OperationNotAllowedError: 405,

    # 413 Payload Too Large
    PayloadTooLargeError: 413,

    # 415 Unsupported Media Type
    UnsupportedMediaTypeError: 415,

    # 500 Internal Server Error
    ConfigurationError: 500,
    RegistrationError: 500,
    ExternalToolError: 500,
    AggregateError: 500,

    # Default for AssetsError
    AssetsError: 500,
}


class HttpStatusMapper:
    """HTTP status code mapper for exceptions.

    Allows per-instance overrides on top of the default mapping.
    """

    def __init__(self, overrides: Optional[Dict[Type[Exception], int]] = None):
        self._overrides = dict(overrides or {})
        self._cache: Dict[Type[Exception], int] = {}

    def get_status_code(self, exception: Exception) -> int:
        """Get HTTP status code for exception.

        Args:
            exception: The exception instance

        Returns:
            HTTP status code (cached per exception type)
        """
        exception_type = type(exception)
        if exception_type in self._cache:
            return self._cache[exception_type]

        status_code = 500
        for klass in exception_type.__mro__:
            if klass in self._overrides:
                status_code = self._overrides[klass]
                break
            if klass in HTTP_STATUS_MAP:
                status_code = HTTP_STATUS_MAP[klass]
                break

        self._cache[exception_type] = status_code
        return status_code

    def clear_cache(self) -> None:
        """Clear the status code cache."""
        self._cache.clear()

    def get_mapping_stats(self) -> Dict[str, Any]:
        """Get statistics about current mappings."""
        return {
            "cached_mappings": len(self._cache),
            "default_mappings": len(HTTP_STATUS_MAP),
            "overrides": len(self._overrides),
        }


_global_mapper: Optional[HttpStatusMapper] = None


def get_mapper() -> HttpStatusMapper:
    """Get or create the global HTTP status mapper."""
    global _global_mapper
    if _global_mapper is None:
        _global_mapper = HttpStatusMapper()
    return _global_mapper


def set_status_overrides(overrides: Dict[Type[Exception], int]) -> None:
    """Replace the global mapper with one using the given overrides."""
    global _global_mapper
    _global_mapper = HttpStatusMapper(overrides)


def get_http_status_code(exception: Exception) -> int:
    """Get HTTP status code for exception using the global mapper."""
    return get_mapper().get_status_code(exception)
