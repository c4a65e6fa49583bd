"""Typed error hierarchy for token, transport, HTTP status and decode failures."""


class DomoError(Exception):
    """Base exception for all domo_users errors."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        method: str | None = None,
        path: str | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.method = method
        self.path = path


class AuthenticationError(DomoError):
    """Token acquisition failed, or 401 from the API."""


class TransportError(DomoError):
    """Network-level failure; no HTTP response was received."""


class DecodeError(DomoError):
    """Response body was not JSON or not the expected shape."""


class APIError(DomoError):
    """Request failed — non-2xx response."""


class UnauthorizedError(APIError, AuthenticationError):
    """401 — token missing, expired or revoked."""


class BadRequestError(APIError):
    """400 — invalid request body or parameters."""


class PermissionDeniedError(APIError):
    """403 — token lacks the required scope."""


class NotFoundError(APIError):
    """404 — resource does not exist."""


class ConflictError(APIError):
    """409 — resource already exists."""


# Map HTTP status codes to exception classes.
STATUS_MAP: dict[int, type[DomoError]] = {
    400: BadRequestError,
    401: UnauthorizedError,
    403: PermissionDeniedError,
    404: NotFoundError,
    409: ConflictError,
}
