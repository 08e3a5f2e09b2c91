"""Thumbnail generation failed exception for the asset platform.

ONLY thumbnail failures - wraps the underlying tool error together with
the asset it was generating for.
"""

from typing import Optional

from .....core.exceptions import ExternalToolError


class ThumbnailGenerationFailed(ExternalToolError):
    """Raised when a thumbnail could not be rendered."""

    def __init__(self, asset_id: Optional[str], cause: BaseException):
        super().__init__(
            message=f"Failed to generate thumbnail for asset {asset_id}: {cause}",
            error_code="GENERATE_THUMB_FAIL",
            details={
                "asset_id": asset_id,
                "cause": str(cause),
                "cause_type": type(cause).__name__,
            }
        )
        self.asset_id = asset_id
        self.cause = cause
