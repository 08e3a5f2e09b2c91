"""Asset not found exception for the asset platform.

ONLY asset not found - represents when a requested asset record or
file cannot be located.
"""

from typing import Any, Dict, Optional

from .....core.exceptions import ResourceNotFoundError


class AssetNotFound(ResourceNotFoundError):
    """Raised when a requested asset record or file cannot be found.

    The ``asset_id`` carries whatever identified the missing thing: a
    record id when the record lookup failed, or the resolved path when the
    file check failed.
    """

    def __init__(
        self,
        message: Optional[str] = None,
        asset_id: Optional[str] = None,
        repository_name: Optional[str] = None,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        enhanced_details = details or {}
        if asset_id:
            enhanced_details["asset_id"] = str(asset_id)
        if repository_name:
            enhanced_details["repository_name"] = repository_name

        super().__init__(
            message=message or f"Asset not found: {asset_id}",
            error_code=error_code or "NOT_FOUND",
            details=enhanced_details
        )

        self.asset_id = asset_id
        self.repository_name = repository_name
