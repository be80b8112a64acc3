class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InvalidPeriod(ValidationError):
    """Raised when a settlement period starts after it ends."""


class InvalidRecord(ValidationError):
    """Raised when a time card, absence or salary cannot be constructed."""


class DirectoryUnavailable(DomainError):
    """Raised when the employee directory cannot be queried."""
