"""In-memory store implementations.

State lives for the lifetime of the process only. Each store guards its
mapping with its own re-entrant lock.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Sequence
from dataclasses import dataclass, field

from hotel_reservations.domain import Customer, Email, Room, RoomNumber

from .interfaces import CustomerDirectory, RoomCatalog

logger = logging.getLogger(__name__)


@dataclass
class InMemoryRoomCatalog(RoomCatalog):
    _rooms: dict[RoomNumber, Room] = field(default_factory=dict)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    def add_room(self, room: Room) -> None:
        """Insert or replace ``room``; the last registration of a number wins."""

        with self._lock:
            previous = self._rooms.get(room.key)
            if previous is not None and previous != room:
                logger.warning("Room %s re-registered; replacing %r", room.key, previous)
            self._rooms[room.key] = room
        logger.debug("Registered room %s (%s)", room.key, room.room_type.value)

    def get_room(self, room_number: str) -> Room | None:
        # Keys are stored stripped, matching Room's own normalization.
        with self._lock:
            return self._rooms.get(RoomNumber(room_number.strip()))

    def all_rooms(self) -> Sequence[Room]:
        with self._lock:
            return list(self._rooms.values())

    def __len__(self) -> int:
        return len(self._rooms)


@dataclass
class InMemoryCustomerDirectory(CustomerDirectory):
    _customers: dict[Email, Customer] = field(default_factory=dict)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    def add_customer(self, email: str, first_name: str, last_name: str) -> Customer:
        # Validation happens before the mapping is touched.
        customer = Customer(email=email, first_name=first_name, last_name=last_name)
        with self._lock:
            if customer.key in self._customers:
                logger.info("Customer %s re-registered; overwriting record", customer.key)
            self._customers[customer.key] = customer
        return customer

    def get_customer(self, email: str) -> Customer | None:
        with self._lock:
            return self._customers.get(Email(email))

    def all_customers(self) -> Sequence[Customer]:
        with self._lock:
            return list(self._customers.values())

    def __len__(self) -> int:
        return len(self._customers)


__all__ = ["InMemoryCustomerDirectory", "InMemoryRoomCatalog"]
