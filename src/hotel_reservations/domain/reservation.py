"""Stay periods and reservations."""

from __future__ import annotations

from datetime import date, datetime
from typing import Any
from uuid import uuid4

from pydantic import Field, field_validator, model_validator

from hotel_reservations.utils import as_timestamp, ensure_utc, utc_now

from .base import DomainModel
from .exceptions import InvalidStayError
from .types import DateLike, ReservationId


def _new_reservation_id() -> ReservationId:
    return ReservationId(uuid4())


def _check_order(check_in: datetime, check_out: datetime) -> None:
    if check_in >= check_out:
        msg = f"Check-in {check_in.isoformat()} must be before check-out {check_out.isoformat()}"
        raise InvalidStayError(msg)


class StayPeriod(DomainModel):
    """Half-open interval ``[check_in, check_out)`` in UTC."""

    check_in: datetime
    check_out: datetime

    @field_validator("check_in", "check_out", mode="before")
    @classmethod
    def promote_dates(cls, value: Any) -> Any:
        if isinstance(value, date) and not isinstance(value, datetime):
            return as_timestamp(value)
        return value

    @field_validator("check_in", "check_out")
    @classmethod
    def normalize_timestamp(cls, value: datetime) -> datetime:
        return ensure_utc(value)

    @model_validator(mode="after")
    def check_order(self) -> StayPeriod:
        _check_order(self.check_in, self.check_out)
        return self

    @classmethod
    def between(cls, check_in: DateLike, check_out: DateLike) -> StayPeriod:
        return cls(check_in=check_in, check_out=check_out)

    def overlaps(self, other: StayPeriod) -> bool:
        """Back-to-back stays (one checks out as the other checks in) do not overlap."""

        return not (self.check_out <= other.check_in or self.check_in >= other.check_out)


class Reservation(DomainModel):
    """A booking of one room by one customer.

    Customers and rooms are referenced by key. Records are immutable; the
    ``with_*`` helpers return a re-validated copy with one field replaced.
    """

    id: ReservationId = Field(default_factory=_new_reservation_id)
    customer_email: str
    room_number: str
    check_in: datetime
    check_out: datetime
    created_at: datetime = Field(default_factory=utc_now)

    @field_validator("check_in", "check_out", mode="before")
    @classmethod
    def promote_dates(cls, value: Any) -> Any:
        if isinstance(value, date) and not isinstance(value, datetime):
            return as_timestamp(value)
        return value

    @field_validator("check_in", "check_out")
    @classmethod
    def normalize_timestamp(cls, value: datetime) -> datetime:
        return ensure_utc(value)

    @model_validator(mode="after")
    def check_order(self) -> Reservation:
        _check_order(self.check_in, self.check_out)
        return self

    @property
    def period(self) -> StayPeriod:
        return StayPeriod(check_in=self.check_in, check_out=self.check_out)

    def with_customer(self, customer_email: str) -> Reservation:
        return self._replace(customer_email=customer_email)

    def with_room(self, room_number: str) -> Reservation:
        return self._replace(room_number=room_number)

    def with_stay(self, check_in: DateLike, check_out: DateLike) -> Reservation:
        return self._replace(check_in=check_in, check_out=check_out)

    def _replace(self, **changes: Any) -> Reservation:
        return type(self).model_validate({**self.model_dump(), **changes})


__all__ = ["Reservation", "StayPeriod"]
