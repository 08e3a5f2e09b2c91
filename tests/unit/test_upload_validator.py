"""Tests for upload validation."""

import pytest

from neo_assets.platform.assets.application.validators import UploadValidator, UploadValidatorConfig
from neo_assets.platform.assets.core.entities import UploadedFile
from neo_assets.platform.assets.core.exceptions import (
    InvalidParameters,
    UnsupportedMediaType,
    UploadTooLarge,
)


@pytest.fixture
def validator():
    return UploadValidator(UploadValidatorConfig(
        max_size_bytes=1000,
        accepted_mime_types=["image/*", "application/pdf"],
    ))


class TestUploadValidator:
    """Test upload size, type and input checks."""

    def test_accepts_valid_upload(self, validator):
        upload = UploadedFile("/tmp/upload-1", "IMAGE/PNG", 999, "a.png")

        assert validator.validate(upload).value == "image/png"

    def test_missing_upload(self, validator):
        with pytest.raises(InvalidParameters) as exc_info:
            validator.validate(None)

        assert exc_info.value.params == ["file"]

    def test_missing_fields(self, validator):
        with pytest.raises(InvalidParameters) as exc_info:
            validator.validate(UploadedFile("", "", 10))

        assert exc_info.value.params == ["temp_path", "mime_type"]

    def test_relative_temp_path_is_rejected(self, validator):
        with pytest.raises(InvalidParameters):
            validator.validate(UploadedFile("uploads/a.png", "image/png", 10))

    def test_rejects_unaccepted_type(self, validator):
        with pytest.raises(UnsupportedMediaType):
            validator.validate(UploadedFile("/tmp/a", "video/mp4", 10))

    def test_rejects_malformed_type(self, validator):
        with pytest.raises(UnsupportedMediaType):
            validator.validate(UploadedFile("/tmp/a", "not a type", 10))

    def test_rejects_oversized_upload(self, validator):
        with pytest.raises(UploadTooLarge) as exc_info:
            validator.validate(UploadedFile("/tmp/a", "application/pdf", 1001, "big.pdf"))

        assert exc_info.value.details["filename"] == "big.pdf"
