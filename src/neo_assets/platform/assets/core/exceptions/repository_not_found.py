"""Repository not found exception for the asset platform.

ONLY unknown repository - raised when a lookup names a repository that
was never registered.
"""

from typing import Any, Dict, List, Optional

from .....core.exceptions import ConfigurationError


class RepositoryNotFound(ConfigurationError):
    """Raised when no repository is registered under the requested name."""

    def __init__(
        self,
        name: Optional[str],
        available: Optional[List[str]] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        enhanced_details = details or {}
        enhanced_details["name"] = name
        if available is not None:
            enhanced_details["available"] = sorted(available)

        super().__init__(
            message=f"No asset repository registered as '{name}'",
            error_code="REPOSITORY_NOT_FOUND",
            details=enhanced_details
        )

        self.name = name
