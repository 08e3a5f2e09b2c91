"""Tests for the exception hierarchy and HTTP mapping."""

import pytest

from neo_assets.core.exceptions import AssetsError, create_error_response, get_http_status_code
from neo_assets.core.exceptions.http_mapping import HttpStatusMapper
from neo_assets.platform.assets.core.exceptions import (
    AssetNotFound,
    InvalidParameters,
    InvalidRepository,
    MissingAssets,
    OperationDisabled,
    RepositoryAlreadyRegistered,
    RepositoryNotFound,
    ThumbnailGenerationFailed,
    TranscoderError,
    UnsupportedMediaType,
    UploadTooLarge,
)


class TestExceptions:
    """Test error codes, details and status mapping."""

    @pytest.mark.parametrize("exception,status", [
        (AssetNotFound(asset_id="a1"), 404),
        (InvalidParameters(["file"]), 400),
        (UploadTooLarge(10, 5), 413),
        (UnsupportedMediaType("text/html", ["image/*"]), 415),
        (OperationDisabled("delete_many"), 405),
        (RepositoryNotFound("s3"), 500),
        (RepositoryAlreadyRegistered("local"), 500),
        (InvalidRepository("bad", ["read"]), 500),
        (TranscoderError("boom"), 500),
        (ThumbnailGenerationFailed("a1", RuntimeError("boom")), 500),
        (MissingAssets([AssetNotFound(asset_id="a1")]), 500),
    ])
    def test_http_status_codes(self, exception, status):
        assert isinstance(exception, AssetsError)
        assert get_http_status_code(exception) == status

    def test_error_response_envelope(self):
        response = create_error_response(OperationDisabled("delete_many"))

        assert response == {
            "error": {
                "code": "FUNC_DISABLED",
                "message": "Operation 'delete_many' is disabled",
                "details": {"name": "delete_many"},
                "type": "OperationDisabled",
            }
        }

    def test_thumbnail_failure_wraps_cause(self):
        cause = TranscoderError("ffmpeg exited with code 1", return_code=1)
        error = ThumbnailGenerationFailed("a1", cause)

        assert error.cause is cause
        assert error.error_code == "GENERATE_THUMB_FAIL"
        assert error.details["cause_type"] == "TranscoderError"

    def test_transcoder_error_keeps_stderr_tail(self):
        error = TranscoderError("failed", command=["ffmpeg"], stderr="x" * 5000, return_code=1)

        assert len(error.details["stderr"]) == 2000
        assert error.details["command"] == ["ffmpeg"]

    def test_missing_assets_collects_errors(self):
        errors = [AssetNotFound(asset_id="p1"), AssetNotFound(asset_id="p2")]

        error = MissingAssets(errors, asset_ids=["a1", "a2"])

        assert error.errors == errors
        assert error.details["count"] == 2
        assert error.asset_ids == ["a1", "a2"]

    def test_mapper_overrides(self):
        mapper = HttpStatusMapper({RepositoryNotFound: 404})

        assert mapper.get_status_code(RepositoryNotFound("s3")) == 404
        assert mapper.get_status_code(RepositoryAlreadyRegistered("local")) == 500
        assert mapper.get_mapping_stats()["cached_mappings"] == 2
