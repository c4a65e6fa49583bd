"""Users resource — CRUD for user accounts on the Domo instance."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from .._exceptions import DecodeError
from .._types import User
from ._utils import _build_params, _json

_list = list  # preserve builtin; shadowed by .list() method

if TYPE_CHECKING:
    import requests

    from .._auth import TokenProvider
    from .._http import HTTPClient

_SCOPE = "user"


def _decode(resp: requests.Response, data: object, *, method: str, path: str) -> User:
    """Decode one user, attaching the request context to any DecodeError."""
    try:
        return User.from_dict(data)
    except DecodeError as e:
        raise DecodeError(
            e.message, status_code=resp.status_code, method=method, path=path
        ) from e


class Users:
    """client.users — list, fetch, create, update and delete users.

    Every call acquires a ``user``-scoped token and sends exactly one request.
    """

    def __init__(self, http: HTTPClient, tokens: TokenProvider):
        self._http = http
        self._tokens = tokens

    def _user(self, method: str, path: str, **kwargs: object) -> User:
        token = self._tokens.get_access_token(_SCOPE)
        resp = self._http.request(method, path, token=token, **kwargs)
        return _decode(resp, _json(resp, method=method, path=path), method=method, path=path)

    def _users(self, method: str, path: str, **kwargs: object) -> _list[User]:
        token = self._tokens.get_access_token(_SCOPE)
        resp = self._http.request(method, path, token=token, **kwargs)
        body = _json(resp, method=method, path=path)
        if not isinstance(body, _list):
            raise DecodeError(
                f"Expected a list of users, got {type(body).__name__}",
                status_code=resp.status_code,
                method=method,
                path=path,
            )
        return [_decode(resp, d, method=method, path=path) for d in body]

    def list(self, *, limit: int | None = None, offset: int | None = None) -> _list[User]:
        """Get a page of users. Pass ``offset`` to walk further pages."""
        params = _build_params(limit=limit, offset=offset)
        return self._users("GET", "/v1/users", params=params)

    def bulk_emails(self, emails: Iterable[str]) -> _list[User]:
        """Fetch the users matching each of ``emails``."""
        return self._users("POST", "/v1/users/bulk/emails", json=_list(emails))

    def create(self, user: User) -> User:
        """Create a user. The returned user carries the server-assigned id."""
        return self._user("POST", "/v1/users", json=user.to_dict())

    def get(self, user_id: str | int) -> User:
        """Retrieve a user.

        For a deleted user only a subset of fields is returned, with
        ``deleted=True``.
        """
        return self._user("GET", f"/v1/users/{user_id}")

    def update(self, user_id: str | int, user: User) -> User:
        """Update a user. The API currently requires every field to be set."""
        return self._user("PUT", f"/v1/users/{user_id}", json=user.to_dict())

    def delete(self, user_id: str | int) -> None:
        """Permanently delete a user. This cannot be reversed."""
        token = self._tokens.get_access_token(_SCOPE)
        self._http.request("DELETE", f"/v1/users/{user_id}", token=token)
