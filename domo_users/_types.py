"""Dataclass models mirroring Domo API resource schemas."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any

from ._exceptions import DecodeError

# Attribute name -> JSON key, where they differ.
_USER_KEYS = {
    "alternate_email": "alternateEmail",
    "employee_number": "employeeNumber",
}

_UNSIGNED_FIELDS = {"id", "employee_number"}
_BOOL_FIELDS = {"deleted"}


def _matches(name: str, value: Any) -> bool:
    # bool is an int subclass; reject it for numeric fields.
    if name in _UNSIGNED_FIELDS:
        return isinstance(value, int) and not isinstance(value, bool) and value >= 0
    if name in _BOOL_FIELDS:
        return isinstance(value, bool)
    return isinstance(value, str)


@dataclass
class User:
    """A user account on the Domo instance.

    Every field is optional. ``None`` means the server did not return the
    field, or, in a request body, that the field is omitted. A deleted user
    comes back as a subset of fields with ``deleted=True``.
    """

    id: int | None = None
    name: str | None = None
    email: str | None = None
    alternate_email: str | None = None
    employee_number: int | None = None
    title: str | None = None
    phone: str | None = None
    location: str | None = None  # free text, e.g. "City, State, Country"
    timezone: str | None = None
    locale: str | None = None
    # Deprecated in favour of custom roles: 'Admin', 'Privileged', 'Participant'.
    role: str | None = None
    deleted: bool | None = None

    @classmethod
    def new(cls) -> User:
        return cls()

    @classmethod
    def template(cls) -> User:
        """Example user with every field populated, for discovering the schema."""
        return cls(
            id=0,
            name="First Last",
            email="First.Last@company.com",
            alternate_email="first.last@gmail.com",
            employee_number=0,
            title="Title",
            phone="+1 (800) 700-6000",
            location="CA",
            timezone="America/Los_Angeles",
            locale="en-US",
            role="Admin - Match roles defined in instance",
            deleted=False,
        )

    @classmethod
    def from_dict(cls, data: Any) -> User:
        if not isinstance(data, dict):
            raise DecodeError(f"Expected a user object, got {type(data).__name__}")
        kwargs = {}
        for f in fields(cls):
            key = _USER_KEYS.get(f.name, f.name)
            value = data.get(key)
            if value is None:
                continue
            if not _matches(f.name, value):
                raise DecodeError(f"Invalid value for {key!r}: {value!r}")
            kwargs[f.name] = value
        return cls(**kwargs)

    def to_dict(self) -> dict[str, Any]:
        """Camel-cased JSON object, omitting fields that are ``None``."""
        body: dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is not None:
                body[_USER_KEYS.get(f.name, f.name)] = value
        return body
