"""Reservation ledger exports."""

from .exceptions import BookingConflictError, BookingError
from .ledger import ReservationLedger

__all__ = ["BookingConflictError", "BookingError", "ReservationLedger"]
