"""Shared helpers for resource modules."""

from typing import Any

import requests

from .._exceptions import DecodeError


def _build_params(**kwargs: Any) -> dict:
    """Build query params dict, omitting None values."""
    return {k: v for k, v in kwargs.items() if v is not None}


def _json(resp: requests.Response, *, method: str = "", path: str = "") -> Any:
    """Decode a response body, raising DecodeError when it is not JSON."""
    try:
        return resp.json()
    except ValueError as e:
        raise DecodeError(
            "Response body is not valid JSON",
            status_code=resp.status_code,
            method=method,
            path=path,
        ) from e
