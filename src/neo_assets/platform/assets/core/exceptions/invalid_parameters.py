"""Invalid parameters exception for the asset platform.

ONLY bad input - raised when required input is missing or unusable.
"""

from typing import Any, Dict, List, Optional

from .....core.exceptions import ValidationError


class InvalidParameters(ValidationError):
    """Raised when required parameters are missing or invalid."""

    def __init__(
        self,
        params: List[str],
        message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        enhanced_details = details or {}
        enhanced_details["params"] = list(params)

        super().__init__(
            message=message or f"Invalid or missing parameters: {', '.join(params)}",
            error_code="INVALID_PARAMS",
            details=enhanced_details
        )
        self.params = list(params)
