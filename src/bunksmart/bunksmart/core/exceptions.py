class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InvalidHistoryError(ValidationError):
    """Raised when attendance counts are inconsistent (attended > total, negatives)."""


class AuthenticationError(DomainError):
    """Raised when login credentials or verification codes are invalid."""


class AuthorizationError(DomainError):
    """Raised when the session is not allowed to perform an action."""


class NotFoundError(DomainError):
    """Raised when a subject or attendance record does not exist."""
