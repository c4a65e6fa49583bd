"""Resource namespaces for the Domo API client."""

from .users import Users

__all__ = ["Users"]
