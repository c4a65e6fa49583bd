"""Domo API client — configuration, token acquisition and resource namespaces."""

from __future__ import annotations

import os

from ._auth import TokenProvider
from ._exceptions import AuthenticationError
from ._http import HTTPClient
from ._resources import Users

DEFAULT_HOST = "https://api.domo.com"


class Domo:
    """Client for the Domo platform API.

    Usage:
        client = Domo(client_id="...", client_secret="...")
        for user in client.users.list(limit=50, offset=0):
            print(user.id, user.email)
    """

    def __init__(
        self,
        client_id: str | None = None,
        client_secret: str | None = None,
        host: str | None = None,
        timeout: int = 30,
    ):
        client_id = client_id or os.environ.get("DOMO_CLIENT_ID")
        client_secret = client_secret or os.environ.get("DOMO_CLIENT_SECRET")
        if not client_id or not client_secret:
            raise AuthenticationError(
                "No client credentials provided. Pass client_id= and client_secret= "
                "or set DOMO_CLIENT_ID and DOMO_CLIENT_SECRET env vars."
            )
        host = host or os.environ.get("DOMO_HOST") or DEFAULT_HOST

        self._http = HTTPClient(host=host, timeout=timeout)
        self._tokens = TokenProvider(self._http, client_id, client_secret)
        self.users = Users(self._http, self._tokens)

    @property
    def host(self) -> str:
        return self._http.host

    def get_access_token(self, scope: str) -> str:
        """Return the ``Authorization`` header value for ``scope``."""
        return self._tokens.get_access_token(scope)
