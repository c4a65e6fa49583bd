"""
domo_users - Python client for the Domo platform Users API

Manage user accounts: list, bulk fetch by email, create, get, update, delete.
"""

__version__ = "0.1.0"

from ._auth import TokenProvider
from ._client import Domo
from ._exceptions import (
    APIError,
    AuthenticationError,
    BadRequestError,
    ConflictError,
    DecodeError,
    DomoError,
    NotFoundError,
    PermissionDeniedError,
    TransportError,
    UnauthorizedError,
)
from ._types import User

__all__ = [
    "APIError",
    "AuthenticationError",
    "BadRequestError",
    "ConflictError",
    "DecodeError",
    # Main client
    "Domo",
    "DomoError",
    "NotFoundError",
    "PermissionDeniedError",
    "TokenProvider",
    "TransportError",
    "UnauthorizedError",
    "User",
]
