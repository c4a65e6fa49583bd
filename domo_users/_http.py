"""Thin HTTP client wrapping requests.Session with per-request auth and error mapping."""

import logging
from typing import Any

import requests

from ._exceptions import STATUS_MAP, APIError, TransportError

logger = logging.getLogger(__name__)


def _error_message(resp: requests.Response) -> str:
    message = f"HTTP {resp.status_code}"
    try:
        body = resp.json()
    except ValueError:
        logger.debug("Failed to parse error body: %s", resp.text[:200] if resp.text else "empty")
        return resp.text or message
    if isinstance(body, dict):
        for key in ("message", "error", "detail"):
            if isinstance(body.get(key), str):
                return body[key]
    return resp.text or message


def _raise_for_status(resp: requests.Response, *, method: str = "", path: str = "") -> None:
    """Map HTTP error responses to typed exceptions."""
    message = _error_message(resp)
    resp.close()
    exc_cls = STATUS_MAP.get(resp.status_code, APIError)
    raise exc_cls(message, status_code=resp.status_code, method=method, path=path)


class HTTPClient:
    """Minimal HTTP client: one request per call, no retry."""

    def __init__(self, host: str, timeout: int = 30):
        self._session = requests.Session()
        self._session.headers["Content-Type"] = "application/json"
        self._session.headers["Accept"] = "application/json"
        self._host = host.rstrip("/")
        self._timeout = timeout

    @property
    def host(self) -> str:
        return self._host

    def send(self, method: str, url: str, **kwargs: Any) -> requests.Response:
        """Send one request to an absolute URL and raise typed exception on error."""
        logger.debug("%s %s", method, url)
        try:
            resp = self._session.request(method, url, timeout=self._timeout, **kwargs)
        except requests.RequestException as e:
            raise TransportError(str(e), method=method, path=url) from e
        if not resp.ok:
            _raise_for_status(resp, method=method, path=url)
        return resp

    def request(self, method: str, path: str, *, token: str, **kwargs: Any) -> requests.Response:
        """Send an authenticated request to a host-relative path."""
        headers = dict(kwargs.pop("headers", None) or {})
        headers["Authorization"] = token
        return self.send(method, f"{self._host}{path}", headers=headers, **kwargs)
