class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthenticationError(DomainError):
    """Raised when login credentials are rejected."""


class NotFoundError(DomainError):
    """Raised when a referenced department or academic year does not exist."""
