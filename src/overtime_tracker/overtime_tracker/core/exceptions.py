class DomainError(Exception):
    """Base exception for business rule violations."""

    status_code = 400


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""

    status_code = 400


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid or the session is missing/expired."""

    status_code = 401


class AuthorizationError(DomainError):
    """Raised when a user acts on a resource owned by someone else."""

    status_code = 403


class NotFoundError(DomainError):
    status_code = 404


class StorageError(DomainError):
    """Raised when the database fails; the operation has been rolled back."""

    status_code = 500
