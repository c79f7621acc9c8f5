"""Reservation storage and availability queries."""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterator, Sequence

from hotel_reservations.domain import (
    Customer,
    DateLike,
    Reservation,
    ReservationId,
    Room,
    StayPeriod,
)
from hotel_reservations.persistence import RoomCatalog

from .exceptions import BookingConflictError


class ReservationLedger:
    """Authoritative store of reservations.

    By default booking is advisory: :meth:`reserve_room` stores every request,
    including ones that overlap an existing stay, and callers are expected to
    consult :meth:`find_available_rooms` first. With ``enforce_availability``
    the availability check and the insert run atomically under the ledger
    lock and overlaps raise :class:`BookingConflictError`.
    """

    def __init__(
        self,
        catalog: RoomCatalog,
        *,
        enforce_availability: bool = False,
        logger: logging.Logger | None = None,
    ) -> None:
        self._catalog = catalog
        self._enforce_availability = enforce_availability
        self._logger = logger or logging.getLogger(__name__)
        self._reservations: dict[ReservationId, Reservation] = {}
        self._lock = threading.RLock()

    @property
    def enforce_availability(self) -> bool:
        return self._enforce_availability

    def reserve_room(
        self,
        customer: Customer,
        room: Room,
        check_in: DateLike,
        check_out: DateLike,
    ) -> Reservation:
        reservation = Reservation(
            customer_email=customer.email,
            room_number=room.room_number,
            check_in=check_in,
            check_out=check_out,
        )
        with self._lock:
            clashes = list(self._overlapping(room.room_number, reservation.period))
            if clashes:
                if self._enforce_availability:
                    msg = (
                        f"Room {room.room_number} is already booked between "
                        f"{reservation.check_in.isoformat()} and "
                        f"{reservation.check_out.isoformat()}"
                    )
                    raise BookingConflictError(msg)
                self._logger.warning(
                    "Room %s double-booked by %s; overlaps %d existing reservation(s)",
                    room.room_number,
                    customer.email,
                    len(clashes),
                )
            self._reservations[reservation.id] = reservation

        self._logger.info(
            "Reserved room %s for %s from %s to %s",
            room.room_number,
            customer.email,
            reservation.check_in.isoformat(),
            reservation.check_out.isoformat(),
        )
        return reservation

    def is_room_available(self, room: Room, check_in: DateLike, check_out: DateLike) -> bool:
        period = StayPeriod.between(check_in, check_out)
        with self._lock:
            return next(self._overlapping(room.room_number, period), None) is None

    def find_available_rooms(self, check_in: DateLike, check_out: DateLike) -> set[Room]:
        """Return every catalog room with no reservation overlapping the stay."""

        period = StayPeriod.between(check_in, check_out)
        available: set[Room] = set()
        rooms = self._catalog.all_rooms()
        with self._lock:
            for room in rooms:
                if next(self._overlapping(room.room_number, period), None) is None:
                    available.add(room)
        self._logger.debug(
            "%d of %d rooms free between %s and %s",
            len(available),
            len(rooms),
            period.check_in.isoformat(),
            period.check_out.isoformat(),
        )
        return available

    def get_customers_reservation(self, customer: Customer) -> Sequence[Reservation]:
        # Matched on email, so a re-registered customer still sees earlier bookings.
        with self._lock:
            return [
                reservation
                for reservation in self._reservations.values()
                if reservation.customer_email == customer.email
            ]

    def all_reservations(self) -> Sequence[Reservation]:
        with self._lock:
            return list(self._reservations.values())

    def get_room(self, room_number: str) -> Room | None:
        return self._catalog.get_room(room_number)

    def all_rooms(self) -> Sequence[Room]:
        return self._catalog.all_rooms()

    def _overlapping(self, room_number: str, period: StayPeriod) -> Iterator[Reservation]:
        for reservation in self._reservations.values():
            if reservation.room_number != room_number:
                continue
            if reservation.period.overlaps(period):
                yield reservation

    def __len__(self) -> int:
        return len(self._reservations)


__all__ = ["ReservationLedger"]
