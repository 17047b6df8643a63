class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a referenced employee, leave, item or booking does not exist."""


class DataFetchError(DomainError):
    """Raised when a source collection could not be read (storage unreachable or denied)."""
