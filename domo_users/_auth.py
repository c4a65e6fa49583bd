"""OAuth2 client-credentials token acquisition, cached per scope."""

from __future__ import annotations

import logging
import threading
import time
from typing import TYPE_CHECKING

from ._exceptions import AuthenticationError, DomoError

if TYPE_CHECKING:
    from ._http import HTTPClient

logger = logging.getLogger(__name__)

# Refresh tokens this many seconds before the server-declared expiry.
_EXPIRY_SKEW = 60


class TokenProvider:
    """Fetches and reuses bearer tokens from ``{host}/oauth/token``."""

    def __init__(self, http: HTTPClient, client_id: str, client_secret: str):
        self._http = http
        self._client_id = client_id
        self._client_secret = client_secret
        self._lock = threading.Lock()
        # scope -> (credential, monotonic deadline or None)
        self._tokens: dict[str, tuple[str, float | None]] = {}

    def get_access_token(self, scope: str) -> str:
        """Return an ``Authorization`` header value for ``scope``.

        Raises:
            AuthenticationError: The token endpoint failed or returned no token.
        """
        with self._lock:
            cached = self._tokens.get(scope)
            if cached is not None:
                credential, deadline = cached
                if deadline is None or time.monotonic() < deadline:
                    logger.debug("Reusing cached token for scope %r", scope)
                    return credential
                del self._tokens[scope]

            credential, expires_in = self._fetch(scope)
            deadline = None
            if expires_in is not None:
                deadline = time.monotonic() + max(expires_in - _EXPIRY_SKEW, 0)
            self._tokens[scope] = (credential, deadline)
            return credential

    def clear(self) -> None:
        """Drop every cached token."""
        with self._lock:
            self._tokens.clear()

    def _fetch(self, scope: str) -> tuple[str, float | None]:
        url = f"{self._http.host}/oauth/token"
        logger.debug("Requesting access token for scope %r", scope)
        try:
            resp = self._http.send(
                "GET",
                url,
                params={"grant_type": "client_credentials", "scope": scope},
                auth=(self._client_id, self._client_secret),
            )
        except DomoError as e:
            raise AuthenticationError(
                f"Token request failed: {e.message}",
                status_code=e.status_code,
                method=e.method,
                path=e.path,
            ) from e

        try:
            body = resp.json()
        except ValueError as e:
            raise AuthenticationError(
                "Token response is not valid JSON", status_code=resp.status_code, path=url
            ) from e

        token = body.get("access_token") if isinstance(body, dict) else None
        if not token:
            raise AuthenticationError(
                "Token response has no access_token", status_code=resp.status_code, path=url
            )

        expires_in = body.get("expires_in")
        if not isinstance(expires_in, (int, float)):
            expires_in = None
        return f"Bearer {token}", expires_in
