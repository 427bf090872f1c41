"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class BusinessRuleViolationError(DomainError):
    """Business rule violation error."""

    pass


class UnauthorizedError(DomainError):
    """Raised when an operation needs a caller identity and none is available."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message)


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ConflictError(DomainError):
    """Raised when a concurrent write on a unique key cannot be resolved."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"Conflicting concurrent update on {resource}: {identifier}")


class StorageError(DomainError):
    """Raised when the persistence layer fails for any other reason."""

    pass
