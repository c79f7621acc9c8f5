"""Customer records."""

from __future__ import annotations

import re
from typing import Any

from pydantic import field_validator

from .base import DomainModel
from .exceptions import InvalidEmailError
from .types import Email

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s.]+$")


def validate_email(value: Any) -> str:
    """Return ``value`` unchanged or raise :class:`InvalidEmailError`."""

    if not isinstance(value, str) or not EMAIL_PATTERN.match(value):
        msg = f"Invalid email address: {value!r}"
        raise InvalidEmailError(msg)
    return value


class Customer(DomainModel):
    """Guest record keyed by email.

    Records are immutable so a stored customer can never drift away from the
    directory key it was filed under. ``with_email`` returns a validated copy.
    """

    email: str
    first_name: str
    last_name: str

    # InvalidEmailError is not a ValueError, so pydantic lets it propagate as-is.
    @field_validator("email", mode="before")
    @classmethod
    def check_email(cls, value: Any) -> str:
        return validate_email(value)

    @property
    def key(self) -> Email:
        return Email(self.email)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def with_email(self, email: str) -> Customer:
        return type(self).model_validate({**self.model_dump(), "email": email})


__all__ = ["EMAIL_PATTERN", "Customer", "validate_email"]
