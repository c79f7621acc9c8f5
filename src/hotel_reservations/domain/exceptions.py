"""Domain validation errors."""

from __future__ import annotations


class DomainError(RuntimeError):
    """Base class for invariant violations in domain models."""


class InvalidEmailError(DomainError):
    """Raised when a customer email does not look like local@domain.tld."""


class InvalidStayError(DomainError):
    """Raised when a check-in is not strictly before its check-out."""


__all__ = ["DomainError", "InvalidEmailError", "InvalidStayError"]
