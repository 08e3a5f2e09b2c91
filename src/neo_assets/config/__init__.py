"""Configuration module for neo-assets.

Settings for storage roots, thumbnails, uploads and the external media
tool, plus logging setup.
"""

from .settings import (
    AssetSettings,
    DEFAULT_ACCEPTED_MIME_TYPES,
    get_settings,
)

from .logging_config import (
    setup_logging,
    LogLevel,
    LogVerbosity,
    LogFormat,
    LoggingConfig,
)

__all__ = [
    # Settings
    "AssetSettings",
    "DEFAULT_ACCEPTED_MIME_TYPES",
    "get_settings",

    # Logging configuration
    "setup_logging",
    "LogLevel",
    "LogVerbosity",
    "LogFormat",
    "LoggingConfig",
]
