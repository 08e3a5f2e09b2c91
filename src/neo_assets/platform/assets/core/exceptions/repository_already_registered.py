"""Repository already registered exception for the asset platform.

ONLY duplicate registration - raised when two repositories claim the
same name.
"""

from .....core.exceptions import RegistrationError


class RepositoryAlreadyRegistered(RegistrationError):
    """Raised when a repository name is registered twice."""

    def __init__(self, name: str):
        super().__init__(
            message=f"An asset repository is already registered as '{name}'",
            error_code="REPOSITORY_EXISTS",
            details={"name": name}
        )
        self.name = name
