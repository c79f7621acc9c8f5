"""Hotel domain models."""

from .base import DomainModel
from .customer import EMAIL_PATTERN, Customer, validate_email
from .enums import RoomType
from .exceptions import DomainError, InvalidEmailError, InvalidStayError
from .reservation import Reservation, StayPeriod
from .room import Room
from .types import DateLike, Email, ReservationId, RoomNumber

__all__ = [
    "EMAIL_PATTERN",
    "Customer",
    "DateLike",
    "DomainError",
    "DomainModel",
    "Email",
    "InvalidEmailError",
    "InvalidStayError",
    "Reservation",
    "ReservationId",
    "Room",
    "RoomNumber",
    "RoomType",
    "StayPeriod",
    "validate_email",
]
