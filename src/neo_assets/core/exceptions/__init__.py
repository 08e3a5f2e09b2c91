"""Exceptions module for neo-assets.

This module provides the exception hierarchy shared by every neo-assets
platform module, organized by the kind of failure.
"""

from .base import (
    AssetsError,
    ConfigurationError,
    get_http_status_code,
    create_error_response,
)

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

__all__ = [
    # Base Exception
    "AssetsError",

    # Categories
    "ConfigurationError",
    "ResourceNotFoundError",
    "ValidationError",
    "PayloadTooLargeError",
    "UnsupportedMediaTypeError",
    "RegistrationError",
    "ExternalToolError",
    "OperationNotAllowedError",
    "AggregateError",

    # Utility Functions
    "get_http_status_code",
    "create_error_response",
]
