"""Administrative operations over the room catalog and ledger."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from decimal import Decimal

from hotel_reservations.booking import ReservationLedger
from hotel_reservations.domain import Customer, Reservation, Room, RoomType
from hotel_reservations.persistence import CustomerDirectory, RoomCatalog


class AdminService:
    def __init__(
        self,
        catalog: RoomCatalog,
        customers: CustomerDirectory,
        ledger: ReservationLedger,
        *,
        logger: logging.Logger | None = None,
    ) -> None:
        self._catalog = catalog
        self._customers = customers
        self._ledger = ledger
        self._logger = logger or logging.getLogger(__name__)

    def create_room(
        self,
        room_number: str,
        price: Decimal | float | str,
        room_type: RoomType,
        *,
        complimentary: bool = False,
    ) -> Room:
        """Register a room built from primitive fields."""

        if complimentary:
            room = Room.complimentary(room_number, room_type)
        else:
            room = Room(room_number=room_number, price=Decimal(str(price)), room_type=room_type)
        self._catalog.add_room(room)
        self._logger.info(
            "Created room %s (%s, %s)",
            room.room_number,
            room.room_type.value,
            room.price,
        )
        return room

    def add_rooms(self, rooms: Iterable[Room]) -> None:
        for room in rooms:
            self._catalog.add_room(room)

    def get_customer(self, email: str) -> Customer | None:
        return self._customers.get_customer(email)

    def all_rooms(self) -> Sequence[Room]:
        return self._catalog.all_rooms()

    def all_customers(self) -> Sequence[Customer]:
        return self._customers.all_customers()

    def all_reservations(self) -> Sequence[Reservation]:
        return self._ledger.all_reservations()


__all__ = ["AdminService"]
