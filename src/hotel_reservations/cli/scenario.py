"""JSON scenario files used to seed an in-memory container from the CLI."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

from pydantic import Field, field_validator

from hotel_reservations.container import ServiceContainer
from hotel_reservations.domain import DomainModel, Room
from hotel_reservations.utils import ensure_utc


class CustomerSeed(DomainModel):
    email: str
    first_name: str
    last_name: str


class ReservationSeed(DomainModel):
    customer_email: str
    room_number: str
    check_in: datetime
    check_out: datetime

    @field_validator("check_in", "check_out")
    @classmethod
    def normalize_timestamp(cls, value: datetime) -> datetime:
        return ensure_utc(value)


class Scenario(DomainModel):
    """Rooms, customers and reservations to replay into a fresh container."""

    rooms: tuple[Room, ...] = ()
    customers: tuple[CustomerSeed, ...] = ()
    reservations: tuple[ReservationSeed, ...] = Field(default=())

    @classmethod
    def from_path(cls, path: Path) -> Scenario:
        return cls.model_validate_json(path.read_text(encoding="utf-8"))

    def apply(self, container: ServiceContainer) -> None:
        """Register rooms, then customers, then book each reservation in order."""

        container.admin_service.add_rooms(self.rooms)
        for seed in self.customers:
            container.hotel_service.create_customer(seed.email, seed.first_name, seed.last_name)
        for booking in self.reservations:
            container.hotel_service.book_room(
                booking.customer_email,
                booking.room_number,
                booking.check_in,
                booking.check_out,
            )


__all__ = ["CustomerSeed", "ReservationSeed", "Scenario"]
