"""Service container wiring application components."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from hotel_reservations.booking import ReservationLedger
from hotel_reservations.config import AppSettings
from hotel_reservations.persistence import InMemoryCustomerDirectory, InMemoryRoomCatalog
from hotel_reservations.services import AdminService, HotelService

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ServiceContainer:
    """Stores and facades sharing one in-memory state."""

    settings: AppSettings
    room_catalog: InMemoryRoomCatalog
    customer_directory: InMemoryCustomerDirectory
    reservation_ledger: ReservationLedger
    hotel_service: HotelService
    admin_service: AdminService


def build_container(settings: AppSettings | None = None) -> ServiceContainer:
    """Construct the primary service container."""

    resolved_settings = settings or AppSettings.from_env()

    room_catalog = InMemoryRoomCatalog()
    customer_directory = InMemoryCustomerDirectory()
    reservation_ledger = ReservationLedger(
        room_catalog,
        enforce_availability=resolved_settings.enforce_availability,
    )
    hotel_service = HotelService(customer_directory, reservation_ledger)
    admin_service = AdminService(room_catalog, customer_directory, reservation_ledger)

    logger.debug(
        "Built container for %s (enforce_availability=%s)",
        resolved_settings.environment,
        resolved_settings.enforce_availability,
    )
    return ServiceContainer(
        settings=resolved_settings,
        room_catalog=room_catalog,
        customer_directory=customer_directory,
        reservation_ledger=reservation_ledger,
        hotel_service=hotel_service,
        admin_service=admin_service,
    )


__all__ = ["ServiceContainer", "build_container"]
