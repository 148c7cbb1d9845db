"""Repository-specific exceptions.

These exceptions provide semantic meaning for data access errors,
separating them from general database errors.
"""


class RepositoryError(Exception):
    """Base exception for repository operations."""


class StoreUnavailableError(RepositoryError):
    """The holdings store could not be read or written."""

    def __init__(self, operation: str, owner_identity: str):
        self.operation = operation
        self.owner_identity = owner_identity
        super().__init__(f"Holdings store unavailable during {operation} for {owner_identity}")
