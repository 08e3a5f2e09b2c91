"""Invalid repository exception for the asset platform.

ONLY capability contract violations - raised at registration time when an
object does not implement the asset repository operations.
"""

from typing import List, Optional

from .....core.exceptions import RegistrationError


class InvalidRepository(RegistrationError):
    """Raised when a registered object fails the repository contract."""

    def __init__(self, name: str, missing: Optional[List[str]] = None):
        missing = list(missing or [])
        super().__init__(
            message=(
                f"Object registered as '{name}' is not a valid asset repository"
                + (f" (missing: {', '.join(missing)})" if missing else "")
            ),
            error_code="REPOSITORY_INVALID",
            details={"name": name, "missing": missing}
        )
        self.name = name
        self.missing = missing
