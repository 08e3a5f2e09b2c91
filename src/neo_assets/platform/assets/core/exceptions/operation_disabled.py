"""Operation disabled exception for the asset platform.

ONLY switched-off operations - e.g. bulk delete, which cannot isolate
per-item cleanup failures.
"""

from .....core.exceptions import OperationNotAllowedError


class OperationDisabled(OperationNotAllowedError):
    """Raised when a disabled operation is invoked."""

    def __init__(self, name: str):
        super().__init__(
            message=f"Operation '{name}' is disabled",
            error_code="FUNC_DISABLED",
            details={"name": name}
        )
        self.name = name
