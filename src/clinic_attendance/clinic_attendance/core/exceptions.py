class DomainError(Exception):
    """Base exception for business rule violations."""


class BadRequestError(DomainError):
    """Raised for missing, malformed or inverted request parameters."""


class ValidationError(BadRequestError):
    """Raised when input data is invalid or violates domain rules."""


class InvalidRangeError(BadRequestError):
    """Raised when a date range starts after it ends."""


class NotFoundError(DomainError):
    """Raised when an edit/delete targets a row that does not exist."""


class ConflictError(DomainError):
    """Raised on duplicate names or duplicate composite keys."""


class StorageUnavailableError(DomainError):
    """Raised when the underlying store cannot be reached."""
