"""Domain layer errors.

Every store operation reports failure with one of these. The HTTP layer maps
them to status codes in ``forum.interface.api.errors``.
"""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Malformed input, e.g. a missing identifier or unknown relation name."""

    pass


class NotFoundError(DomainError):
    """Raised when no live row matches a key."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ConflictError(DomainError):
    """Raised when a create collides with an existing composite key."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} already exists: {identifier}")


class StorageError(DomainError):
    """Any other failure of the underlying storage."""

    def __init__(self, operation: str, message: str):
        self.operation = operation
        super().__init__(f"Storage failure during {operation}: {message}")
