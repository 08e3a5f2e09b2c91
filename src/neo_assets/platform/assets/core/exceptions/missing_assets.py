"""Missing assets exception for the asset platform.

ONLY housekeeping aggregate - collects every per-asset failure from a
verification scan into one error.
"""

from typing import List, Optional

from .....core.exceptions import AggregateError


class MissingAssets(AggregateError):
    """Raised when one or more asset files failed verification.

    ``errors`` and ``asset_ids`` are parallel lists when ids are known.
    """

    def __init__(self, errors: List[BaseException], asset_ids: Optional[List[str]] = None):
        errors = list(errors)
        asset_ids = list(asset_ids or [])
        super().__init__(
            message=f"{len(errors)} asset file(s) failed verification",
            error_code="MISSING_ASSETS",
            details={
                "count": len(errors),
                "asset_ids": asset_ids,
                "errors": [str(e) for e in errors],
            }
        )
        self.errors = errors
        self.asset_ids = asset_ids
