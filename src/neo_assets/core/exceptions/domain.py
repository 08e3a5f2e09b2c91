"""Domain-specific exceptions for neo-assets.

This module defines the exception categories that platform exceptions
inherit from. The HTTP status mapping is keyed on these categories.
"""

from .base import AssetsError, ConfigurationError


# Lookup Errors
class ResourceNotFoundError(AssetsError):
    """Raised when a requested resource does not exist."""
    pass


# Validation Errors
class ValidationError(AssetsError):
    """Raised when input validation fails."""
    pass


class PayloadTooLargeError(ValidationError):
    """Raised when submitted content exceeds the configured size limit."""
    pass


class UnsupportedMediaTypeError(ValidationError):
    """Raised when submitted content has a type that is not accepted."""
    pass


# Registration Errors
class RegistrationError(ConfigurationError):
    """Raised when a component cannot be registered."""
    pass


# External Tool Errors
class ExternalToolError(AssetsError):
    """Raised when an external process fails or misbehaves."""
    pass


# Operation Errors
class OperationNotAllowedError(AssetsError):
    """Raised when an operation is switched off."""
    pass


class AggregateError(AssetsError):
    """Raised when several independent operations failed together."""
    pass
