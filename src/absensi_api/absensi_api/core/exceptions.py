class DomainError(Exception):
    """Base exception for business rule violations."""

    status_code = 400


class ValidationError(DomainError):
    """Raised when input data is missing or malformed."""

    status_code = 400


class AuthError(DomainError):
    """Base for token and credential failures."""

    status_code = 401


class AuthenticationError(AuthError):
    """Raised when credentials or a session token are invalid."""

    status_code = 401


class AuthorizationError(AuthError):
    """Raised when a token is missing or the role lacks permission."""

    status_code = 403


class NotFoundError(DomainError):
    """Raised when no row matches the request."""

    status_code = 404


class ServerError(DomainError):
    status_code = 500


class StoreError(ServerError):
    """Raised when the underlying database call fails."""
