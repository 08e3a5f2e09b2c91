"""Asset input validators."""

from .upload_validator import UploadValidator, UploadValidatorConfig, create_upload_validator

__all__ = [
    "UploadValidator",
    "UploadValidatorConfig",
    "create_upload_validator",
]
