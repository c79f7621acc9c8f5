"""Booking-specific errors."""

from __future__ import annotations


class BookingError(RuntimeError):
    """Base class for errors raised while booking a room."""


class BookingConflictError(BookingError):
    """Raised in strict mode when a stay overlaps an existing reservation."""


__all__ = ["BookingConflictError", "BookingError"]
