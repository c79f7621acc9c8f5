from __future__ import annotations

from decimal import Decimal

import pytest
from pydantic import ValidationError

from hotel_reservations.domain import InvalidEmailError, Room, RoomType
from hotel_reservations.persistence import InMemoryCustomerDirectory, InMemoryRoomCatalog


def _room(number: str, price: str = "100", room_type: RoomType = RoomType.DOUBLE) -> Room:
    return Room(room_number=number, price=Decimal(price), room_type=room_type)


def test_catalog_last_registration_wins() -> None:
    catalog = InMemoryRoomCatalog()
    catalog.add_room(_room("101", "100"))
    catalog.add_room(_room("101", "120", RoomType.SINGLE))
    catalog.add_room(_room("102"))

    assert len(catalog.all_rooms()) == 2
    stored = catalog.get_room("101")
    assert stored is not None
    assert stored.price == Decimal("120")
    assert stored.room_type is RoomType.SINGLE


def test_catalog_lookup_returns_registered_room_or_none() -> None:
    catalog = InMemoryRoomCatalog()
    rooms = [
        _room("101"),
        _room("102", "80", RoomType.SINGLE),
        Room.complimentary("103", RoomType.SINGLE),
    ]
    for room in rooms:
        catalog.add_room(room)

    for room in rooms:
        assert catalog.get_room(room.room_number) == room
    assert catalog.get_room("999") is None
    assert set(catalog.all_rooms()) == set(rooms)


def test_catalog_snapshot_is_detached() -> None:
    catalog = InMemoryRoomCatalog()
    catalog.add_room(_room("101"))
    snapshot = catalog.all_rooms()
    catalog.add_room(_room("102"))

    assert len(snapshot) == 1
    assert len(catalog) == 2


def test_directory_rejects_bad_email_without_storing() -> None:
    directory = InMemoryCustomerDirectory()
    with pytest.raises(InvalidEmailError):
        directory.add_customer("bad-email", "A", "B")
    assert directory.all_customers() == []


def test_directory_stores_and_overwrites_by_email() -> None:
    directory = InMemoryCustomerDirectory()
    directory.add_customer("a@b.com", "A", "B")

    stored = directory.get_customer("a@b.com")
    assert stored is not None
    assert (stored.first_name, stored.last_name) == ("A", "B")

    directory.add_customer("a@b.com", "Alice", "Brown")
    assert len(directory.all_customers()) == 1
    replaced = directory.get_customer("a@b.com")
    assert replaced is not None
    assert replaced.first_name == "Alice"

    assert directory.get_customer("missing@b.com") is None


def test_catalog_lookup_strips_room_number() -> None:
    catalog = InMemoryRoomCatalog()
    catalog.add_room(_room(" 101 "))

    assert catalog.get_room(" 101 ") == catalog.get_room("101")
    assert catalog.get_room("101") is not None


def test_stored_customer_cannot_drift_from_its_key() -> None:
    directory = InMemoryCustomerDirectory()
    stored = directory.add_customer("a@b.com", "A", "B")

    with pytest.raises(ValidationError):
        stored.email = "z@y.com"  # type: ignore[misc]

    renamed = stored.with_email("z@y.com")
    assert renamed.email == "z@y.com"
    original = directory.get_customer("a@b.com")
    assert original is not None
    assert original.email == "a@b.com"
    assert directory.get_customer("z@y.com") is None
