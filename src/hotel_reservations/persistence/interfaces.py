"""Store abstractions for rooms and customers."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from hotel_reservations.domain import Customer, Room


class RoomCatalog(Protocol):
    """Authoritative set of rooms keyed by room number."""

    def add_room(self, room: Room) -> None: ...

    def get_room(self, room_number: str) -> Room | None: ...

    def all_rooms(self) -> Sequence[Room]: ...


class CustomerDirectory(Protocol):
    """Customer records keyed by email."""

    def add_customer(self, email: str, first_name: str, last_name: str) -> Customer: ...

    def get_customer(self, email: str) -> Customer | None: ...

    def all_customers(self) -> Sequence[Customer]: ...
