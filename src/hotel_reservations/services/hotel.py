"""Guest-facing hotel operations."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from hotel_reservations.booking import ReservationLedger
from hotel_reservations.domain import Customer, DateLike, Reservation, Room
from hotel_reservations.persistence import CustomerDirectory, NotFoundError


class HotelService:
    """Customer registration, booking and room search keyed by email and room number."""

    def __init__(
        self,
        customers: CustomerDirectory,
        ledger: ReservationLedger,
        *,
        logger: logging.Logger | None = None,
    ) -> None:
        self._customers = customers
        self._ledger = ledger
        self._logger = logger or logging.getLogger(__name__)

    def create_customer(self, email: str, first_name: str, last_name: str) -> Customer:
        customer = self._customers.add_customer(email, first_name, last_name)
        self._logger.info("Created customer account %s", customer.email)
        return customer

    def get_customer(self, email: str) -> Customer | None:
        return self._customers.get_customer(email)

    def get_room(self, room_number: str) -> Room | None:
        return self._ledger.get_room(room_number)

    def book_room(
        self,
        customer_email: str,
        room_number: str,
        check_in: DateLike,
        check_out: DateLike,
    ) -> Reservation:
        """Book a room for a registered customer.

        Raises :class:`NotFoundError` when either the customer or the room is
        unknown. Whether overlapping stays are rejected depends on the ledger.
        """

        customer = self._customers.get_customer(customer_email)
        if customer is None:
            msg = f"Customer {customer_email} not found"
            raise NotFoundError(msg)
        room = self._ledger.get_room(room_number)
        if room is None:
            msg = f"Room {room_number} not found"
            raise NotFoundError(msg)
        return self._ledger.reserve_room(customer, room, check_in, check_out)

    def get_customer_reservations(self, customer_email: str) -> Sequence[Reservation]:
        customer = self._customers.get_customer(customer_email)
        if customer is None:
            return []
        return self._ledger.get_customers_reservation(customer)

    def find_rooms(self, check_in: DateLike, check_out: DateLike) -> set[Room]:
        return self._ledger.find_available_rooms(check_in, check_out)


__all__ = ["HotelService"]
