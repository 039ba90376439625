class DomainError(Exception):
    """Base exception for business rule violations."""

    code = "internal"


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""

    code = "invalid-argument"


class NotFoundError(DomainError):
    """Raised when a referenced check-in does not exist."""

    code = "not-found"


class PreconditionError(DomainError):
    """Raised when a check-in cannot be validated in its current state."""

    code = "failed-precondition"


class AuthenticationError(DomainError):
    """Raised when no caller identity is attached to the request."""

    code = "unauthenticated"


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""

    code = "permission-denied"


class PersistenceError(DomainError):
    """Raised when a validation record could not be stored."""

    code = "internal"


class AnnotationError(DomainError):
    """Raised by annotation clients when the provider call fails."""

    code = "unavailable"
