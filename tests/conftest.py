"""
Root pytest configuration and fixtures for the domo_users test suite.
"""

from unittest.mock import Mock

import pytest

from domo_users._auth import TokenProvider
from domo_users._http import HTTPClient

HOST = "https://api.test.domo.com"


@pytest.fixture
def http():
    return HTTPClient(host=HOST, timeout=5)


@pytest.fixture
def tokens():
    """Token provider stub handing out a fixed bearer credential."""
    provider = Mock(spec=TokenProvider)
    provider.get_access_token.return_value = "Bearer tok_123"
    return provider


@pytest.fixture
def user_data():
    """A full user object as the API returns it."""
    return {
        "id": 871428330,
        "name": "Leonhard Euler",
        "email": "leonhard.euler@domo.com",
        "alternateEmail": "leonhard@gmail.com",
        "employeeNumber": 1707,
        "title": "Software Engineer",
        "phone": "+1 (801) 555-0100",
        "location": "American Fork",
        "timezone": "America/Denver",
        "locale": "en-US",
        "role": "Privileged",
    }


@pytest.fixture
def clean_environment(monkeypatch):
    """Remove DOMO_* variables so tests control configuration."""
    for var in ("DOMO_CLIENT_ID", "DOMO_CLIENT_SECRET", "DOMO_HOST"):
        monkeypatch.delenv(var, raising=False)
