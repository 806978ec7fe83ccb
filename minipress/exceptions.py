"""Application errors and their HTTP mapping.

Handlers and services raise these; a single exception handler in
``minipress.main`` turns them into ``{"detail": ...}`` responses. The
message is always a short static string, never the underlying cause.
"""


class MiniPressError(Exception):
    """Base class for errors that map to an HTTP response."""

    status_code: int = 500
    detail: str = "Internal server error"

    def __init__(self, detail: str | None = None) -> None:
        if detail is not None:
            self.detail = detail
        super().__init__(self.detail)


class InvalidInputError(MiniPressError):
    """Malformed identifier or payload."""

    status_code = 400
    detail = "Invalid request"


class NotFoundError(MiniPressError):
    """No row matched the lookup."""

    status_code = 404
    detail = "Not found"


class UnauthorizedError(MiniPressError):
    """Missing identity or insufficient role."""

    status_code = 401
    detail = "Unauthorized"


class ForbiddenError(MiniPressError):
    """Authenticated, but not allowed to touch this resource."""

    status_code = 403
    detail = "Forbidden"


class StorageError(MiniPressError):
    """Connection or query failure in the data access layer."""

    status_code = 500
    detail = "Database error"


class ConflictError(StorageError):
    """A unique constraint rejected the write."""

    status_code = 409
    detail = "Conflicting record already exists"


class ServiceUnavailableError(StorageError):
    """No database connection could be checked out of the pool in time."""

    status_code = 503
    detail = "Service temporarily unavailable"


class OAuthError(MiniPressError):
    """The OAuth provider interaction failed."""

    status_code = 400
    detail = "Authentication failed"


class OAuthStateError(OAuthError):
    """Callback state did not match the one issued at login."""

    detail = "Invalid OAuth state"


class ExchangeError(OAuthError):
    """Authorization code could not be exchanged for an access token."""

    detail = "Failed to get access token"


class ProfileFetchError(OAuthError):
    """The provider's user-info endpoint could not be read."""

    detail = "Failed to get user info"
