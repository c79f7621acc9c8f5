"""Shared type aliases for the domain layer."""

from __future__ import annotations

from datetime import date, datetime
from typing import NewType
from uuid import UUID

RoomNumber = NewType("RoomNumber", str)
Email = NewType("Email", str)
ReservationId = NewType("ReservationId", UUID)
DateLike = date | datetime

__all__ = [
    "DateLike",
    "Email",
    "ReservationId",
    "RoomNumber",
]
